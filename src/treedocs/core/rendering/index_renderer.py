from __future__ import annotations

"""
Index Page Renderer.

Pure functions turning an index page model into Markdown. A single
dispatch table maps every page variant to its template, so the set of
templates stays exhaustive over the directory roles.
"""

from typing import Callable, Dict, List, Type

from treedocs.core.rendering.markdown import escape_cell, link, table
from treedocs.core.rendering.page_models import (
    CollectionPage,
    CollectionSection,
    DirectoryRow,
    FileRow,
    IndexPage,
    IntermediatePage,
    LeafPage,
    RootPage,
)
from treedocs.utils.i18n import I18n

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_index(page: IndexPage, messages: I18n) -> str:
    """
    Render an index page.

    Args:
        page: Role-specific page model.
        messages: Catalogue supplying headings and labels.

    Returns:
        str: Markdown text of the page.

    Raises:
        TypeError: If ``page`` is not a known page variant.
    """
    renderer = _RENDERERS.get(type(page))
    if renderer is None:
        raise TypeError(f"No index template for {type(page).__name__}")
    return renderer(page, messages)

# -----------------------------------------------------------------------------
# TEMPLATES
# -----------------------------------------------------------------------------

def _render_root(page: RootPage, m: I18n) -> str:
    content = f"# {page.title}\n\n"

    if page.collection is not None:
        header = [m.t("root.col_category"), m.t("root.col_documents"),
                  m.t("root.col_volume"), m.t("root.col_size")]
        rows = [_directory_cells(page.collection, m)]
        rows.extend(_directory_cells(row, m) for row in page.categories)
        content += table(header, rows)

    content += "\n---\n\n"
    content += m.t("page.generated_notice") + "\n"
    content += "\n---\n\n"

    if page.contact_lines:
        content += m.t("footer.contact_title") + "\n\n"
        content += m.t("footer.contact_intro") + "\n\n"
        for line in page.contact_lines:
            content += f"- {line}\n"
        content += "\n"

    content += m.t("footer.license_title") + "\n\n"
    content += m.t("footer.license_body") + "\n"
    return content


def _render_collection(page: CollectionPage, m: I18n) -> str:
    content = _heading_block(page.title, page.file_count, page.dir_count, m)

    content += f"## {m.t('collection.overview')}\n\n"
    header = [m.t("collection.col_name"), m.t("collection.col_documents"),
              m.t("collection.col_volume"), m.t("collection.col_size")]
    content += table(header, [_directory_cells(page.overview, m)])
    content += "\n"

    for section in page.sections:
        content += _render_collection_section(section, m)

    return content + _notice(m)


def _render_collection_section(section: CollectionSection, m: I18n) -> str:
    content = f"## {section.name}\n\n"
    header = [m.t("collection.col_file"), m.t("collection.col_volume"), m.t("collection.col_size")]

    rows: List[List[str]] = [_file_cells(f, m) for f in section.files]
    if not rows and section.rollup is not None:
        totals = section.rollup.totals
        label = m.t("collection.rollup", count=totals.document_count)
        rows.append([
            link(escape_cell(label), section.rollup.link),
            _volume(totals.content_volume, m),
            totals.formatted_size,
        ])

    return content + table(header, rows) + "\n"


def _render_intermediate(page: IntermediatePage, m: I18n) -> str:
    content = _heading_block(page.title, page.file_count, page.dir_count, m)
    content += _files_section(page.files, m)

    if page.subdirectories:
        content += f"## {m.t('directory.subdirs_heading')}\n\n"
        header = [m.t("directory.col_directory"), m.t("directory.col_documents"),
                  m.t("directory.col_volume"), m.t("directory.col_size")]
        content += table(header, [_directory_cells(d, m) for d in page.subdirectories])
        content += "\n"

    return content + _notice(m)


def _render_leaf(page: LeafPage, m: I18n) -> str:
    content = _heading_block(page.title, page.file_count, 0, m)
    content += _files_section(page.files, m)
    return content + _notice(m)


_RENDERERS: Dict[Type, Callable[..., str]] = {
    RootPage: _render_root,
    CollectionPage: _render_collection,
    IntermediatePage: _render_intermediate,
    LeafPage: _render_leaf,
}

# -----------------------------------------------------------------------------
# FRAGMENTS
# -----------------------------------------------------------------------------

def _heading_block(title: str, file_count: int, dir_count: int, m: I18n) -> str:
    summary = m.t("page.contains", files=file_count, dirs=dir_count)
    return f"# {title}\n\n{summary}\n\n"


def _files_section(files: List[FileRow], m: I18n) -> str:
    if not files:
        return ""
    header = [m.t("directory.col_file"), m.t("directory.col_volume"), m.t("directory.col_size")]
    content = f"## {m.t('directory.files_heading')}\n\n"
    return content + table(header, [_file_cells(f, m) for f in files]) + "\n"


def _file_cells(row: FileRow, m: I18n) -> List[str]:
    return [
        link(escape_cell(row.name), row.link),
        _volume(row.content_volume, m),
        row.formatted_size,
    ]


def _directory_cells(row: DirectoryRow, m: I18n) -> List[str]:
    return [
        link(escape_cell(row.name), row.link),
        str(row.totals.document_count),
        _volume(row.totals.content_volume, m),
        row.totals.formatted_size,
    ]


def _volume(count: int, m: I18n) -> str:
    return m.t("page.volume", count=count)


def _notice(m: I18n) -> str:
    return "---\n\n" + m.t("page.generated_notice") + "\n"
