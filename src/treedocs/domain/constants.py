from __future__ import annotations

"""
Domain Constants.

Centralised defaults for the documentation generator: reserved filenames,
the recognised document extension, text encoding and size unit thresholds.
"""

from typing import List

DEFAULT_COLLECTION_NAME = "Library"
DEFAULT_LOCALE = "en"

DOCUMENT_EXTENSION = ".md"
DEFAULT_ENCODING = "utf-8"

# Generated artifacts written into every visited directory
INDEX_FILENAME = "README.md"
SIDEBAR_FILENAME = "_sidebar.md"

# Pre-existing companion files, never regenerated
COMPANION_FILENAMES: List[str] = ["_navbar.md", "_coverpage.md"]

DEFAULT_EXCLUDE_PATTERNS: List[str] = [
    r"^(__pycache__|node_modules)$",
    r"^\.",
]

LINK_STYLE_PAGE = "page"
LINK_STYLE_ROOT = "root"
LINK_STYLES = (LINK_STYLE_PAGE, LINK_STYLE_ROOT)

# Size unit bands
KIB = 1024
MIB = 1024 * 1024

# Average UTF-8 bytes per content unit (wide characters)
BYTES_PER_CONTENT_UNIT = 3
