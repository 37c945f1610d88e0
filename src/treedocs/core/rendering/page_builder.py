from __future__ import annotations

"""
Page Model Builder.

Collects everything a template needs for one directory: rows for its
documents, recursive totals for linked directories and the link targets.
Totals are obtained through the injected aggregate function, keeping the
renderers themselves free of filesystem access.
"""

import os
from typing import Callable, List

from treedocs.core.rendering.links import LinkResolver
from treedocs.core.rendering.page_models import (
    CollectionPage,
    CollectionSection,
    DirectoryRow,
    FileRow,
    IndexPage,
    IntermediatePage,
    LeafPage,
    NodeSidebar,
    RootPage,
    RootSidebar,
    Sidebar,
    SidebarLink,
)
from treedocs.domain.config import GeneratorConfig
from treedocs.domain.tree_models import Aggregate, DirectoryNode, Role

AggregateFn = Callable[[str], Aggregate]


class PageBuilder:
    """
    Builds index and sidebar models for the directories of one run.

    Args:
        config: Run configuration.
        aggregate: Returns recursive totals for a directory path.
        links: Link resolver for the same configuration.
    """

    def __init__(self, config: GeneratorConfig, aggregate: AggregateFn, links: LinkResolver):
        self._config = config
        self._aggregate = aggregate
        self._links = links

    # -------------------------------------------------------------------------
    # INDEX PAGES
    # -------------------------------------------------------------------------

    def build_index(self, node: DirectoryNode, role: Role) -> IndexPage:
        if role is Role.ROOT:
            return self._root_page(node)
        if role is Role.DESIGNATED_COLLECTION:
            return self._collection_page(node)
        if role is Role.INTERMEDIATE:
            return IntermediatePage(
                title=node.name,
                file_count=len(node.files),
                dir_count=len(node.directories),
                files=self._file_rows(node),
                subdirectories=[self._directory_row(node.path, d) for d in node.directories],
            )
        return LeafPage(
            title=node.name,
            file_count=len(node.files),
            files=self._file_rows(node),
        )

    def _root_page(self, root: DirectoryNode) -> RootPage:
        collection = root.find_directory(self._config.collection_name)
        if collection is None:
            return RootPage(
                title=self._config.collection_name,
                contact_lines=self._config.contact_lines,
            )
        return RootPage(
            title=self._config.collection_name,
            collection=self._directory_row(root.path, collection),
            categories=[self._directory_row(root.path, d) for d in collection.directories],
            contact_lines=self._config.contact_lines,
        )

    def _collection_page(self, node: DirectoryNode) -> CollectionPage:
        overview = DirectoryRow(
            name=node.name,
            link=self._links.root_index_link(node.path),
            totals=self._aggregate(node.path),
        )
        sections: List[CollectionSection] = []
        for sub in node.directories:
            if sub.files:
                sections.append(CollectionSection(name=sub.name, files=self._file_rows(sub, node.path)))
            elif sub.has_subdirectories:
                sections.append(CollectionSection(name=sub.name, rollup=self._directory_row(node.path, sub)))
            else:
                sections.append(CollectionSection(name=sub.name))
        return CollectionPage(
            title=node.name,
            file_count=len(node.files),
            dir_count=len(node.directories),
            overview=overview,
            sections=sections,
        )

    def _file_rows(self, node: DirectoryNode, page_dir: str = "") -> List[FileRow]:
        page_dir = page_dir or node.path
        return [
            FileRow(
                name=f.name,
                link=self._links.file_link(page_dir, f.path),
                content_volume=f.content_volume,
                formatted_size=f.formatted_size,
            )
            for f in node.files
        ]

    def _directory_row(self, page_dir: str, target: DirectoryNode) -> DirectoryRow:
        return DirectoryRow(
            name=target.name,
            link=self._links.index_link(page_dir, target.path),
            totals=self._aggregate(target.path),
        )

    # -------------------------------------------------------------------------
    # SIDEBARS
    # -------------------------------------------------------------------------

    def build_sidebar(self, node: DirectoryNode, role: Role) -> Sidebar:
        """
        Root gets the home/collection header; every other role, the
        designated collection included, gets the navigation sidebar.
        """
        if role is Role.ROOT:
            return self._root_sidebar(node)

        page_dir = node.path
        return NodeSidebar(
            root=self._links.root_index_link(page_dir),
            parent=self._links.index_link(page_dir, os.path.dirname(node.path)),
            current=SidebarLink(
                label=self._links.relative_label(node.path),
                link=self._links.index_link(page_dir, node.path),
            ),
            files=[
                SidebarLink(label=f.name, link=self._links.file_link(page_dir, f.path))
                for f in node.files
            ],
            directories=[
                SidebarLink(label=d.name, link=self._links.index_link(page_dir, d.path))
                for d in node.directories
            ],
        )

    def _root_sidebar(self, root: DirectoryNode) -> RootSidebar:
        home = self._links.root_index_link(root.path)
        collection = root.find_directory(self._config.collection_name)
        if collection is None:
            return RootSidebar(home=home)
        return RootSidebar(
            home=home,
            collection=SidebarLink(
                label=collection.name,
                link=self._links.index_link(root.path, collection.path),
            ),
            categories=[
                SidebarLink(label=d.name, link=self._links.index_link(root.path, d.path))
                for d in collection.directories
            ],
        )
