from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin access capability over the 'os' module: list a directory's immediate
entries, read raw bytes, stat a size and persist text. Every primitive lets
OSError propagate; the analysis layer decides how failures degrade.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

# -----------------------------------------------------------------------------
# DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Entry:
    """
    An immediate child of a listed directory.

    Symbolic links to directories are neither directories nor files here,
    so a walk never leaves the real tree or loops back on an ancestor.
    """
    name: str
    path: str
    is_directory: bool
    is_file: bool = False

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def is_directory(path: str) -> bool:
    return os.path.isdir(path)


def to_posix(path: str) -> str:
    """Normalize host separators to forward slashes."""
    return path.replace(os.sep, "/").replace("\\", "/")

# -----------------------------------------------------------------------------
# READ API
# -----------------------------------------------------------------------------

def list_entries(path: str) -> List[Entry]:
    """
    List the immediate entries of a directory, sorted by name.

    Args:
        path: Directory to list.

    Returns:
        List[Entry]: One entry per child.

    Raises:
        OSError: If the directory cannot be listed.
    """
    entries: List[Entry] = []
    with os.scandir(path) as it:
        for item in it:
            entries.append(Entry(
                name=item.name,
                path=os.path.join(path, item.name),
                is_directory=item.is_dir(follow_symlinks=False),
                is_file=item.is_file(),
            ))
    entries.sort(key=lambda e: e.name)
    return entries


def read_bytes(path: str) -> bytes:
    """Read a whole file. Raises OSError on failure."""
    with open(path, "rb") as f:
        return f.read()


def byte_size(path: str) -> int:
    """Size of a file from its metadata. Raises OSError on failure."""
    return os.stat(path).st_size

# -----------------------------------------------------------------------------
# WRITE API
# -----------------------------------------------------------------------------

def write_text(path: str, content: str, encoding: str) -> None:
    """
    Create or overwrite a text file without backup.

    Raises:
        OSError: If the file cannot be written.
    """
    with open(path, "w", encoding=encoding, newline="\n") as f:
        f.write(content)
