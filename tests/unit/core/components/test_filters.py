from __future__ import annotations

"""
Unit tests for the Entry Filters module.

Verifies:
1. Regex compilation and matching logic.
2. Classification of reserved artifacts and documents.
"""

import re

from treedocs.core.pipeline.components.filters import (
    compile_patterns,
    document_stem,
    is_document,
    is_reserved,
    matches_any,
)
from treedocs.domain.config import GeneratorConfig
from treedocs.domain.constants import DEFAULT_EXCLUDE_PATTERNS


def test_compile_patterns_handles_valid_and_invalid():
    """Verify that valid patterns compile and invalid ones are skipped silently."""
    compiled = compile_patterns([r"^valid.*", r"[invalid_regex", r"normal"])

    assert len(compiled) == 2
    assert all(isinstance(p, re.Pattern) for p in compiled)


def test_default_exclusions():
    compiled = compile_patterns(DEFAULT_EXCLUDE_PATTERNS)

    assert matches_any(".git", compiled)
    assert matches_any("__pycache__", compiled)
    assert matches_any("node_modules", compiled)
    assert not matches_any("道藏", compiled)
    assert not matches_any("my.notes.md", compiled)


def test_reserved_names():
    config = GeneratorConfig(root_path="/r")

    for name in ("README.md", "_sidebar.md", "_navbar.md", "_coverpage.md"):
        assert is_reserved(name, config)
    assert not is_reserved("readme.md", config)


def test_document_detection_is_exact():
    config = GeneratorConfig(root_path="/r")

    assert is_document("a.md", config)
    assert is_document("README.md", config)
    assert not is_document("a.MD", config)
    assert not is_document("a.markdown", config)
    assert not is_document("md", config)


def test_document_stem():
    config = GeneratorConfig(root_path="/r", document_extension=".txt")

    assert document_stem("notes.v2.txt", config) == "notes.v2"
    assert document_stem("image.png", config) == "image.png"
