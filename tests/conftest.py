from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures building sample document collections on disk.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treedocs.domain.config import GeneratorConfig  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def library(tmp_path: Path) -> Path:
    """
    Create a collection with one designated directory 'C'.

    Structure:
    /site
      /C
        /A
          a1.md  (500 B)
          a2.md  (2000 B)
        /B
          /B1
            b.md (10 B)
    """
    root = tmp_path / "site"
    a = root / "C" / "A"
    b1 = root / "C" / "B" / "B1"
    a.mkdir(parents=True)
    b1.mkdir(parents=True)

    (a / "a1.md").write_bytes(b"x" * 500)
    (a / "a2.md").write_bytes(b"y" * 2000)
    (b1 / "b.md").write_bytes(b"z" * 10)
    return root


@pytest.fixture
def library_config(library: Path) -> GeneratorConfig:
    """GeneratorConfig targeting the ``library`` fixture, collection 'C'."""
    return GeneratorConfig(root_path=str(library), collection_name="C")
