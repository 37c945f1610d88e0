from __future__ import annotations

"""
Configuration Domain Management.

Provides the default configuration dictionary, optional loading of a JSON
configuration file, and the immutable GeneratorConfig value that is threaded
through every analysis, rendering and emission call.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from treedocs.domain.constants import (
    COMPANION_FILENAMES,
    DEFAULT_COLLECTION_NAME,
    DEFAULT_ENCODING,
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_LOCALE,
    DOCUMENT_EXTENSION,
    INDEX_FILENAME,
    LINK_STYLE_PAGE,
    SIDEBAR_FILENAME,
)

logger = logging.getLogger(__name__)

# Keys a configuration file or the CLI may set
CONFIG_KEYS = (
    "root_path", "collection_name", "document_extension",
    "index_filename", "sidebar_filename", "companion_filenames",
    "exclude_patterns", "encoding", "locale", "link_style", "contact_lines",
)

# -----------------------------------------------------------------------------
# Configuration Models
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GeneratorConfig:
    """
    Immutable run configuration.

    Attributes:
        root_path: Absolute directory to scan.
        collection_name: Name of the designated top-level collection.
        document_extension: The single recognised document extension.
        index_filename: Generated index page filename.
        sidebar_filename: Generated sidebar filename.
        companion_filenames: Pre-existing files never treated as documents.
        exclude_patterns: Regexes of entry names skipped during scanning.
        encoding: Text encoding for every read and write.
        locale: Catalogue used for page wording.
        link_style: ``page`` for page-relative links, ``root`` for root-relative.
        contact_lines: Bullet lines of the root page contact section.
    """
    root_path: str
    collection_name: str = DEFAULT_COLLECTION_NAME
    document_extension: str = DOCUMENT_EXTENSION
    index_filename: str = INDEX_FILENAME
    sidebar_filename: str = SIDEBAR_FILENAME
    companion_filenames: Tuple[str, ...] = tuple(COMPANION_FILENAMES)
    exclude_patterns: Tuple[str, ...] = tuple(DEFAULT_EXCLUDE_PATTERNS)
    encoding: str = DEFAULT_ENCODING
    locale: str = DEFAULT_LOCALE
    link_style: str = LINK_STYLE_PAGE
    contact_lines: Tuple[str, ...] = ()

    @property
    def reserved_filenames(self) -> Tuple[str, ...]:
        """Generated and companion filenames, excluded from scanning."""
        return (self.index_filename, self.sidebar_filename) + tuple(self.companion_filenames)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "root_path": os.getcwd(),
        "collection_name": DEFAULT_COLLECTION_NAME,
        "document_extension": DOCUMENT_EXTENSION,
        "index_filename": INDEX_FILENAME,
        "sidebar_filename": SIDEBAR_FILENAME,
        "companion_filenames": list(COMPANION_FILENAMES),
        "exclude_patterns": list(DEFAULT_EXCLUDE_PATTERNS),
        "encoding": DEFAULT_ENCODING,
        "locale": DEFAULT_LOCALE,
        "link_style": LINK_STYLE_PAGE,
        "contact_lines": [],
    }


def to_generator_config(cfg: Dict[str, Any]) -> GeneratorConfig:
    """
    Freeze a validated configuration dictionary.

    Args:
        cfg: Output of the configuration validator.

    Returns:
        GeneratorConfig: Immutable configuration value.
    """
    return GeneratorConfig(
        root_path=os.path.abspath(cfg["root_path"]),
        collection_name=cfg["collection_name"],
        document_extension=cfg["document_extension"],
        index_filename=cfg["index_filename"],
        sidebar_filename=cfg["sidebar_filename"],
        companion_filenames=tuple(cfg["companion_filenames"]),
        exclude_patterns=tuple(cfg["exclude_patterns"]),
        encoding=cfg["encoding"],
        locale=cfg["locale"],
        link_style=cfg["link_style"],
        contact_lines=tuple(cfg["contact_lines"]),
    )

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the defaults overlaid with an optional JSON configuration file.

    Unknown keys are ignored. A missing or corrupted file leaves the
    defaults untouched.

    Args:
        path: Location of a JSON object with configuration keys.

    Returns:
        Dict[str, Any]: Configuration dictionary (not yet validated).
    """
    config = get_default_config()
    if not path:
        return config

    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{path}'. Using defaults.")
        return config

    for key in CONFIG_KEYS:
        if key in data:
            config[key] = data[key]

    logger.debug(f"Configuration loaded from {path}")
    return config
