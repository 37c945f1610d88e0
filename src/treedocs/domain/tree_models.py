from __future__ import annotations

"""
Directory Tree Data Models.

Immutable in-memory mirror of the scanned document collection. Nodes are
built once per run by the scanner and consumed once by the emitter.
"""

import enum
from dataclasses import dataclass, field
from typing import List, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    A single document file.

    Attributes:
        name: Filename without the document extension.
        path: Absolute filesystem path to the file.
        depth: Distance from the scan root.
        byte_size: Raw byte count.
        formatted_size: Byte count rendered in B/KB/MB.
        content_volume: Estimated content units (see metrics).
    """
    name: str
    path: str
    depth: int
    byte_size: int = 0
    formatted_size: str = "0 B"
    content_volume: int = 0


@dataclass(frozen=True)
class DirectoryNode:
    """
    A visited directory.

    Children hold every file node first, then every directory node, each
    group sorted by name.
    """
    name: str
    path: str
    depth: int
    children: Tuple[Union["DirectoryNode", FileNode], ...] = field(default_factory=tuple)

    @property
    def files(self) -> List[FileNode]:
        return [c for c in self.children if isinstance(c, FileNode)]

    @property
    def directories(self) -> List["DirectoryNode"]:
        return [c for c in self.children if isinstance(c, DirectoryNode)]

    @property
    def has_subdirectories(self) -> bool:
        return any(isinstance(c, DirectoryNode) for c in self.children)

    def find_directory(self, name: str) -> "DirectoryNode | None":
        """Return the direct child directory called ``name``, if any."""
        for child in self.directories:
            if child.name == name:
                return child
        return None


Node = Union[DirectoryNode, FileNode]

# -----------------------------------------------------------------------------
# DERIVED VALUES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Aggregate:
    """
    Recursive totals for the subtree rooted at a path.

    Attributes:
        document_count: Number of document files, at any depth.
        content_volume: Sum of document content volumes.
        byte_size: Sum of the sizes of every file (documents or not).
        formatted_size: ``byte_size`` rendered in B/KB/MB.
    """
    document_count: int = 0
    content_volume: int = 0
    byte_size: int = 0
    formatted_size: str = "0 B"


class Role(enum.Enum):
    """Rendering role of a directory within the walk."""
    ROOT = "root"
    DESIGNATED_COLLECTION = "designated_collection"
    INTERMEDIATE = "intermediate"
    LEAF = "leaf"
