from __future__ import annotations

"""
Internationalization (i18n) Utility.

Loads JSON locale catalogues and resolves dot-notation keys with variable
interpolation. Page templates and CLI help texts both draw their wording
from these catalogues.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from treedocs.domain.constants import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

LOCALES_REL_PATH = os.path.join("..", "interface", "locales")

# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific strings.

    Keys missing from the active catalogue are resolved against the default
    (English) catalogue before falling back to the caller's default.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))
        self._fallback: Dict[str, Any] = self._read_catalogue(DEFAULT_LOCALE) or {}
        self._translations: Dict[str, Any] = {}
        self._locale = DEFAULT_LOCALE
        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def available_locales(self) -> List[str]:
        """List the catalogue identifiers shipped with the package."""
        try:
            names = os.listdir(self._locales_path)
        except OSError:
            return []
        return sorted(n[:-5] for n in names if n.endswith(".json"))

    def load_locale(self, locale: str) -> None:
        """
        Activate a catalogue.

        Args:
            locale: ISO identifier (e.g. 'en', 'zh').
        """
        data = self._read_catalogue(locale)
        if data is None:
            self._translations = dict(self._fallback)
            self._locale = DEFAULT_LOCALE
            return

        self._translations = data
        self._locale = locale
        logger.debug(f"I18n: Loaded locale catalogue '{locale}'")

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a string using dot-notation.

        Args:
            key: Hierarchical identifier (e.g. 'page.contains').
            default: Returned when the key resolves in no catalogue.
            **kwargs: Interpolation variables.

        Returns:
            str: The formatted string, ``default``, or the key itself.
        """
        value = _resolve(self._translations, key)
        if value is None:
            value = _resolve(self._fallback, key)
        if value is None:
            value = default if default is not None else key

        if not kwargs:
            return value
        try:
            return value.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Interpolation failed for '{key}': {e}")
            return value

    def _read_catalogue(self, locale: str) -> Optional[Dict[str, Any]]:
        file_path = os.path.join(self._locales_path, f"{locale}.json")
        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale resource missing at '{file_path}'. Fallback active.")
            return None
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            return None
        return data if isinstance(data, dict) else None


def _resolve(catalogue: Dict[str, Any], key: str) -> Optional[str]:
    current: Any = catalogue
    for k in key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(k)
    return current if isinstance(current, str) else None

# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

# Process-wide instance for CLI texts
i18n = I18n(DEFAULT_LOCALE)
