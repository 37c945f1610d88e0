from __future__ import annotations

"""
Link Resolution.

Computes the link targets written into index pages and sidebars. Links are
relative to the page being rendered ('page' style) or to the scan root
('root' style, the docsify default), always with forward slashes.
"""

import os

from treedocs.domain.config import GeneratorConfig
from treedocs.domain.constants import LINK_STYLE_ROOT
from treedocs.infra.fs import to_posix


class LinkResolver:
    """Path-to-link conversion bound to one run configuration."""

    def __init__(self, config: GeneratorConfig):
        self._root = os.path.abspath(config.root_path)
        self._index = config.index_filename
        self._root_style = config.link_style == LINK_STYLE_ROOT

    def relative_label(self, path: str) -> str:
        """Root-relative forward-slash path, '' for the root itself."""
        rel = to_posix(os.path.relpath(os.path.abspath(path), self._root))
        return "" if rel == "." else rel

    def file_link(self, page_dir: str, target: str) -> str:
        """Link from the page in ``page_dir`` to the file ``target``."""
        return self._link(page_dir, os.path.abspath(target))

    def index_link(self, page_dir: str, target_dir: str) -> str:
        """Link from the page in ``page_dir`` to the index of ``target_dir``."""
        target_dir = os.path.abspath(target_dir)
        if self._root_style and target_dir == self._root:
            return f"/{self._index}"
        return self._link(page_dir, os.path.join(target_dir, self._index))

    def root_index_link(self, page_dir: str) -> str:
        return self.index_link(page_dir, self._root)

    def _link(self, page_dir: str, target: str) -> str:
        base = self._root if self._root_style else os.path.abspath(page_dir)
        return to_posix(os.path.relpath(target, base))
