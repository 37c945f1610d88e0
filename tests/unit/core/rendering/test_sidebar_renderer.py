from __future__ import annotations

"""
Unit tests for the Sidebar Renderer.
"""

import pytest

from treedocs.core.rendering.page_models import NodeSidebar, RootSidebar, SidebarLink
from treedocs.core.rendering.sidebar_renderer import render_sidebar
from treedocs.utils.i18n import I18n


@pytest.fixture
def en():
    return I18n("en")


def test_root_sidebar_header_and_categories(en):
    sidebar = RootSidebar(
        home="README.md",
        collection=SidebarLink("C", "C/README.md"),
        categories=[SidebarLink("A", "C/A/README.md"), SidebarLink("B", "C/B/README.md")],
    )

    assert render_sidebar(sidebar, en) == (
        "* [Home](README.md)\n"
        "* [C](C/README.md)\n"
        "\n---\n\n"
        "* [A](C/A/README.md)\n"
        "* [B](C/B/README.md)\n"
    )


def test_root_sidebar_without_collection(en):
    assert render_sidebar(RootSidebar(home="/README.md"), en) == "* [Home](/README.md)\n"


def test_node_sidebar_navigation_then_entries(en):
    sidebar = NodeSidebar(
        root="/README.md",
        parent="C/README.md",
        current=SidebarLink("C/B", "C/B/README.md"),
        files=[SidebarLink("intro", "C/B/intro.md")],
        directories=[SidebarLink("B1", "C/B/B1/README.md")],
    )

    assert render_sidebar(sidebar, en) == (
        "* [Back to root](/README.md)\n"
        "* [Up one level](C/README.md)\n"
        "* [C/B](C/B/README.md)\n"
        "\n---\n\n"
        "* [intro](C/B/intro.md)\n"
        "\n"
        "* [B1](C/B/B1/README.md)\n"
    )


def test_node_sidebar_chinese_labels():
    sidebar = NodeSidebar(root="/README.md", parent="/README.md", current=SidebarLink("佛藏", "佛藏/README.md"))
    text = render_sidebar(sidebar, I18n("zh"))

    assert text.startswith("* [返回根目录](/README.md)\n* [返回上一级](/README.md)\n")
