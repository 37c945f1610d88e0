from __future__ import annotations

"""
Sidebar Renderer.

Pure rendering of sidebar models into docsify '_sidebar.md' bullet lists.
"""

from treedocs.core.rendering.markdown import bullet
from treedocs.core.rendering.page_models import NodeSidebar, RootSidebar, Sidebar
from treedocs.utils.i18n import I18n

_SEPARATOR = "\n---\n\n"


def render_sidebar(sidebar: Sidebar, messages: I18n) -> str:
    """
    Render a sidebar.

    Root sidebars list the home page and the designated collection, then one
    entry per collection category. Node sidebars link back to the root, to
    the parent and to the directory itself, then list its documents and
    sub-directories.

    Raises:
        TypeError: If ``sidebar`` is not a known sidebar variant.
    """
    if isinstance(sidebar, RootSidebar):
        return _render_root_sidebar(sidebar, messages)
    if isinstance(sidebar, NodeSidebar):
        return _render_node_sidebar(sidebar, messages)
    raise TypeError(f"No sidebar template for {type(sidebar).__name__}")


def _render_root_sidebar(sidebar: RootSidebar, m: I18n) -> str:
    content = bullet(m.t("sidebar.home"), sidebar.home)
    if sidebar.collection is None:
        return content

    content += bullet(sidebar.collection.label, sidebar.collection.link)
    content += _SEPARATOR
    for item in sidebar.categories:
        content += bullet(item.label, item.link)
    return content


def _render_node_sidebar(sidebar: NodeSidebar, m: I18n) -> str:
    content = bullet(m.t("sidebar.back_root"), sidebar.root)
    content += bullet(m.t("sidebar.back_parent"), sidebar.parent)
    content += bullet(sidebar.current.label, sidebar.current.link)
    content += _SEPARATOR

    for item in sidebar.files:
        content += bullet(item.label, item.link)
    if sidebar.files:
        content += "\n"

    for item in sidebar.directories:
        content += bullet(item.label, item.link)
    return content
