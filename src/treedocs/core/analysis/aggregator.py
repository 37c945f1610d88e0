from __future__ import annotations

"""
Subtree Aggregator.

Recursive totals (document count, content volume, byte size) for arbitrary
directory paths. Totals are computed from the filesystem, not from an
already scanned tree, so any path met while rendering can be summarised.
Each aggregator memoises per directory; one instance serves a single run.
"""

import logging
import os
from dataclasses import dataclass
from typing import Dict, Tuple

from treedocs.core.analysis.metrics import file_size, format_size, measure_file
from treedocs.core.pipeline.components.filters import (
    compile_patterns,
    is_document,
    is_reserved,
    matches_any,
)
from treedocs.domain.config import GeneratorConfig
from treedocs.domain.tree_models import Aggregate
from treedocs.infra import fs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Totals:
    documents: int = 0
    volume: int = 0
    size: int = 0

    def __add__(self, other: "_Totals") -> "_Totals":
        return _Totals(
            self.documents + other.documents,
            self.volume + other.volume,
            self.size + other.size,
        )


# -----------------------------------------------------------------------------
# AGGREGATOR SERVICE
# -----------------------------------------------------------------------------

class SubtreeAggregator:
    """
    Computes and memoises recursive totals below directory paths.

    Documents exclude reserved artifacts and excluded names; the byte total
    covers every file, hidden or not. Symbolic links to directories are not
    followed. Unlistable directories and unreadable files contribute zero.
    """

    def __init__(self, config: GeneratorConfig):
        self._config = config
        self._exclude_rx = compile_patterns(config.exclude_patterns)
        self._cache: Dict[Tuple[str, bool], _Totals] = {}

    def aggregate(self, path: str) -> Aggregate:
        """Return all three totals for ``path``."""
        totals = self._totals(os.path.abspath(path))
        return Aggregate(
            document_count=totals.documents,
            content_volume=totals.volume,
            byte_size=totals.size,
            formatted_size=format_size(totals.size),
        )

    def count_documents(self, path: str) -> int:
        return self._totals(os.path.abspath(path)).documents

    def aggregate_content_volume(self, path: str) -> int:
        return self._totals(os.path.abspath(path)).volume

    def aggregate_byte_size(self, path: str) -> Tuple[int, str]:
        """Return ``(raw, formatted)`` byte size of the whole subtree."""
        size = self._totals(os.path.abspath(path)).size
        return size, format_size(size)

    def _totals(self, path: str, counted: bool = True) -> _Totals:
        """
        Totals below ``path``. Inside an excluded subtree (``counted`` False)
        files only contribute bytes.
        """
        key = (path, counted)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        try:
            entries = fs.list_entries(path)
        except OSError as e:
            logger.debug(f"Aggregation skipped for '{path}': {e}")
            entries = []

        totals = _Totals()
        for entry in entries:
            visible = counted and not matches_any(entry.name, self._exclude_rx)
            if entry.is_directory:
                totals = totals + self._totals(entry.path, visible)
            elif not entry.is_file:
                continue
            elif visible and is_document(entry.name, self._config) and not is_reserved(entry.name, self._config):
                metrics = measure_file(entry.path, self._config.encoding)
                totals = totals + _Totals(1, metrics.content_volume, metrics.byte_size)
            else:
                totals = totals + _Totals(size=file_size(entry.path))

        self._cache[key] = totals
        return totals


# -----------------------------------------------------------------------------
# STANDALONE API
# -----------------------------------------------------------------------------

def count_documents(path: str, config: GeneratorConfig) -> int:
    """Recursive number of documents under ``path``."""
    return SubtreeAggregator(config).count_documents(path)


def aggregate_content_volume(path: str, config: GeneratorConfig) -> int:
    """Recursive sum of document content volumes under ``path``."""
    return SubtreeAggregator(config).aggregate_content_volume(path)


def aggregate_byte_size(path: str, config: GeneratorConfig) -> Tuple[int, str]:
    """Recursive byte size of every file under ``path``."""
    return SubtreeAggregator(config).aggregate_byte_size(path)
