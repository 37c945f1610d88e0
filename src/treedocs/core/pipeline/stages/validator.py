from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (JSON file, CLI) and the
engine. Coerces types, injects defaults for missing keys and normalises
domain values, collecting human-readable warnings along the way.
"""

import codecs
import logging
from typing import Any, Dict, List, Tuple

from treedocs.domain.config import get_default_config
from treedocs.domain.constants import LINK_STYLES
from treedocs.infra.fs import normalize_path

logger = logging.getLogger(__name__)

_STRING_FIELDS = (
    "root_path", "collection_name", "document_extension", "index_filename",
    "sidebar_filename", "encoding", "locale", "link_style",
)

_LIST_FIELDS = ("companion_filenames", "exclude_patterns", "contact_lines")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalise a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise instead of falling back on invalid values.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalised configuration and warnings.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on an invalid domain value.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _LIST_FIELDS:
        merged[field] = _as_list_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["root_path"] = normalize_path(merged["root_path"], defaults["root_path"])
    merged["document_extension"] = _normalize_extension(
        merged["document_extension"], warnings, strict
    )
    merged["link_style"] = _check_choice(
        merged["link_style"], LINK_STYLES, defaults["link_style"], "link_style", warnings, strict
    )
    merged["encoding"] = _check_encoding(merged["encoding"], defaults["encoding"], warnings, strict)

    if merged["index_filename"] == merged["sidebar_filename"]:
        msg = "Fields 'index_filename' and 'sidebar_filename' must differ."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using defaults.")
        merged["index_filename"] = defaults["index_filename"]
        merged["sidebar_filename"] = defaults["sidebar_filename"]

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Accept a list of strings or, outside strict mode, a CSV string."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return [x.strip() for x in value.split(",") if x.strip()]

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_extension(ext: str, warnings: List[str], strict: bool) -> str:
    if ext.startswith("."):
        return ext
    if strict:
        raise ValueError(f"Invalid extension '{ext}': must start with '.'.")
    warnings.append(f"Extension '{ext}' corrected to '.{ext}'.")
    return "." + ext


def _check_choice(value, choices, fallback, field, warnings, strict) -> str:
    v = value.lower()
    if v in choices:
        return v
    msg = f"Invalid field '{field}': '{value}' is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback


def _check_encoding(value: str, fallback: str, warnings: List[str], strict: bool) -> str:
    try:
        codecs.lookup(value)
        return value
    except LookupError:
        msg = f"Unknown encoding '{value}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using '{fallback}'.")
        return fallback
