from __future__ import annotations

"""Markdown fragments shared by the index and sidebar templates."""

from typing import Iterable, List, Sequence


def escape_cell(text: str) -> str:
    return text.replace("|", "\\|")


def link(label: str, target: str) -> str:
    return f"[{label}]({target})"


def bullet(label: str, target: str) -> str:
    return f"* {link(label, target)}\n"


def table(header: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Pipe table with a ``---`` delimiter row, one line per row."""
    lines: List[str] = [
        "| " + " | ".join(header) + " |",
        "| " + " | ".join("---" for _ in header) + " |",
    ]
    for row in rows:
        lines.append("| " + " | ".join(row) + " |")
    return "\n".join(lines) + "\n"
