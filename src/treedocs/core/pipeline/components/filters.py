from __future__ import annotations

"""
Entry Filtering and Classification.

Regex-based exclusion of directory entries plus the classification of a
file name as a reserved artifact or an input document.
"""

import os
import re
from typing import Iterable, List

from treedocs.domain.config import GeneratorConfig

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed expressions are discarded rather than aborting the scan.

    Args:
        patterns: Raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error:
            continue
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """True if ``name`` matches at least one compiled pattern."""
    return any(rx.search(name) for rx in compiled_patterns)

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

def is_reserved(name: str, config: GeneratorConfig) -> bool:
    """True for generated pages and companion files."""
    return name in config.reserved_filenames


def is_document(name: str, config: GeneratorConfig) -> bool:
    """True if the file carries the recognised document extension."""
    _, ext = os.path.splitext(name)
    return ext == config.document_extension


def document_stem(name: str, config: GeneratorConfig) -> str:
    """Filename with the document extension removed."""
    if name.endswith(config.document_extension):
        return name[: -len(config.document_extension)]
    return name
