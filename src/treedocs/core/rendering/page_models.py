from __future__ import annotations

"""
Page View Models.

Tagged variants carrying exactly the data each template needs. Index pages
have one variant per directory role; sidebars have a root and a node
variant. The models hold no behaviour and are rendered by pure functions.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from treedocs.domain.tree_models import Aggregate

# -----------------------------------------------------------------------------
# ROWS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileRow:
    name: str
    link: str
    content_volume: int
    formatted_size: str


@dataclass(frozen=True)
class DirectoryRow:
    name: str
    link: str
    totals: Aggregate

# -----------------------------------------------------------------------------
# INDEX PAGES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RootPage:
    """Summary of the designated collection and its categories."""
    title: str
    collection: Optional[DirectoryRow] = None
    categories: List[DirectoryRow] = field(default_factory=list)
    contact_lines: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CollectionSection:
    """
    One sub-directory of the designated collection.

    Either ``files`` lists its direct documents, or ``rollup`` summarises a
    directory that only holds further sub-directories. Both are empty for
    an empty directory.
    """
    name: str
    files: List[FileRow] = field(default_factory=list)
    rollup: Optional[DirectoryRow] = None


@dataclass(frozen=True)
class CollectionPage:
    title: str
    file_count: int
    dir_count: int
    overview: DirectoryRow
    sections: List[CollectionSection] = field(default_factory=list)


@dataclass(frozen=True)
class IntermediatePage:
    title: str
    file_count: int
    dir_count: int
    files: List[FileRow] = field(default_factory=list)
    subdirectories: List[DirectoryRow] = field(default_factory=list)


@dataclass(frozen=True)
class LeafPage:
    title: str
    file_count: int
    files: List[FileRow] = field(default_factory=list)


IndexPage = Union[RootPage, CollectionPage, IntermediatePage, LeafPage]

# -----------------------------------------------------------------------------
# SIDEBARS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SidebarLink:
    label: str
    link: str


@dataclass(frozen=True)
class RootSidebar:
    home: str
    collection: Optional[SidebarLink] = None
    categories: List[SidebarLink] = field(default_factory=list)


@dataclass(frozen=True)
class NodeSidebar:
    root: str
    parent: str
    current: SidebarLink
    files: List[SidebarLink] = field(default_factory=list)
    directories: List[SidebarLink] = field(default_factory=list)


Sidebar = Union[RootSidebar, NodeSidebar]
