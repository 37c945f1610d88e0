from __future__ import annotations

"""
Tree Scanner.

Builds the ordered in-memory mirror of a document collection. Reserved
artifacts and excluded names are skipped, documents become FileNodes
annotated with their metrics, and sub-directories are scanned recursively.
"""

import logging
import os
from typing import List, Optional

from treedocs.core.analysis.metrics import measure_file
from treedocs.core.pipeline.components.filters import (
    compile_patterns,
    document_stem,
    is_document,
    is_reserved,
    matches_any,
)
from treedocs.domain.config import GeneratorConfig
from treedocs.domain.tree_models import DirectoryNode, FileNode, Node
from treedocs.infra import fs

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def scan(
        path: str,
        config: GeneratorConfig,
        depth: int = 0,
        warnings: Optional[List[str]] = None,
) -> DirectoryNode:
    """
    Recursively scan ``path`` into a DirectoryNode.

    Children are all document files first, then all sub-directories, each
    group sorted by name. A path that cannot be listed yields an empty node
    and a warning appended to ``warnings``.

    Args:
        path: Directory to scan.
        config: Run configuration.
        depth: Distance of ``path`` from the scan root.
        warnings: Optional accumulator for non-fatal conditions.

    Returns:
        DirectoryNode: The scanned subtree.
    """
    abs_path = os.path.abspath(path)
    exclude_rx = compile_patterns(config.exclude_patterns)
    return _scan_directory(abs_path, config, depth, exclude_rx, warnings)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _scan_directory(path, config, depth, exclude_rx, warnings) -> DirectoryNode:
    name = os.path.basename(path.rstrip(os.sep)) or path

    try:
        entries = fs.list_entries(path)
    except OSError as e:
        msg = f"Directory not found or unreadable: {path} ({e})"
        logger.warning(msg)
        if warnings is not None:
            warnings.append(msg)
        return DirectoryNode(name=name, path=path, depth=depth)

    files: List[fs.Entry] = []
    directories: List[fs.Entry] = []
    for entry in entries:
        if is_reserved(entry.name, config) or matches_any(entry.name, exclude_rx):
            continue
        if entry.is_directory:
            directories.append(entry)
        elif entry.is_file and is_document(entry.name, config):
            files.append(entry)

    children: List[Node] = []
    for entry in sorted(files, key=lambda e: e.name):
        children.append(_build_file_node(entry, config, depth + 1))
    for entry in sorted(directories, key=lambda e: e.name):
        children.append(_scan_directory(entry.path, config, depth + 1, exclude_rx, warnings))

    return DirectoryNode(name=name, path=path, depth=depth, children=tuple(children))


def _build_file_node(entry: fs.Entry, config: GeneratorConfig, depth: int) -> FileNode:
    metrics = measure_file(entry.path, config.encoding)
    return FileNode(
        name=document_stem(entry.name, config),
        path=entry.path,
        depth=depth,
        byte_size=metrics.byte_size,
        formatted_size=metrics.formatted_size,
        content_volume=metrics.content_volume,
    )
