from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies default injection, type coercion with warnings, domain
normalisation and strict-mode failures.
"""

import pytest

from treedocs.core.pipeline.stages.validator import validate_config
from treedocs.domain.config import get_default_config


def test_non_dict_falls_back_to_defaults():
    cfg, warnings = validate_config("nonsense")

    assert cfg == get_default_config()
    assert warnings


def test_non_dict_strict_raises():
    with pytest.raises(TypeError):
        validate_config(["x"], strict=True)


def test_missing_keys_are_filled_and_unknown_keys_dropped():
    cfg, warnings = validate_config({"collection_name": "佛藏", "surprise": 1})

    assert cfg["collection_name"] == "佛藏"
    assert cfg["index_filename"] == "README.md"
    assert "surprise" not in cfg
    assert warnings == []


def test_string_fields_are_stripped_and_blank_uses_default():
    cfg, _ = validate_config({"collection_name": "  Books ", "locale": "   "})

    assert cfg["collection_name"] == "Books"
    assert cfg["locale"] == "en"


def test_wrong_types_warn_and_fall_back():
    cfg, warnings = validate_config({"collection_name": 42, "exclude_patterns": 7})

    assert cfg["collection_name"] == "Library"
    assert cfg["exclude_patterns"] == get_default_config()["exclude_patterns"]
    assert len(warnings) == 2


def test_csv_strings_become_lists():
    cfg, warnings = validate_config({"exclude_patterns": "^tmp$, ^draft"})

    assert cfg["exclude_patterns"] == ["^tmp$", "^draft"]
    assert any("CSV" in w for w in warnings)


def test_explicit_empty_list_disables_excludes():
    cfg, _ = validate_config({"exclude_patterns": []})

    assert cfg["exclude_patterns"] == []


def test_extension_gets_a_dot():
    cfg, warnings = validate_config({"document_extension": "txt"})

    assert cfg["document_extension"] == ".txt"
    assert warnings


def test_invalid_link_style_and_encoding():
    cfg, warnings = validate_config({"link_style": "absolute", "encoding": "klingon-8"})

    assert cfg["link_style"] == "page"
    assert cfg["encoding"] == "utf-8"
    assert len(warnings) == 2


def test_link_style_is_case_insensitive():
    cfg, _ = validate_config({"link_style": "ROOT"})
    assert cfg["link_style"] == "root"


def test_index_and_sidebar_names_must_differ():
    cfg, warnings = validate_config({"index_filename": "x.md", "sidebar_filename": "x.md"})

    assert cfg["index_filename"] == "README.md"
    assert cfg["sidebar_filename"] == "_sidebar.md"
    assert warnings


@pytest.mark.parametrize("raw", [
    {"collection_name": 1},
    {"document_extension": "md"},
    {"link_style": "nope"},
    {"encoding": "nope-42"},
    {"contact_lines": [1]},
])
def test_strict_mode_raises(raw):
    with pytest.raises((TypeError, ValueError)):
        validate_config(raw, strict=True)
