from __future__ import annotations

"""
Generation Result Models.

Defines the immutable result object exchanged between the generation
engine and the interface layer, plus factory helpers for both outcomes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PageFailure:
    """A page that could not be persisted."""
    path: str
    reason: str


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of a complete generation run.

    Attributes:
        ok: True when every page was written (or simulated) successfully.
        error: Fatal error description, empty on success.
        root_path: Absolute scan root.
        collection_name: Designated collection name used for the run.
        collection_found: Whether the designated collection exists under root.
        dry_run: Whether writes were simulated.
        directories: Number of directory nodes visited.
        pages: Paths of the generated (or would-be) pages, in write order.
        failures: Pages that could not be written.
        warnings: Non-fatal conditions reported during the run.
        summary: Root-level aggregate totals.
    """
    ok: bool
    error: str

    root_path: str
    collection_name: str
    collection_found: bool = False
    dry_run: bool = False

    directories: int = 0
    pages: List[str] = field(default_factory=list)
    failures: List[PageFailure] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        root_path: str,
        collection_name: str,
        warnings: Optional[List[str]] = None,
) -> GenerationResult:
    """Build a failed result for a run aborted before any write."""
    return GenerationResult(
        ok=False,
        error=error,
        root_path=root_path,
        collection_name=collection_name,
        warnings=list(warnings or []),
    )


def create_run_result(
        root_path: str,
        collection_name: str,
        collection_found: bool,
        dry_run: bool,
        directories: int,
        pages: List[str],
        failures: List[PageFailure],
        warnings: List[str],
        summary: Dict[str, Any],
) -> GenerationResult:
    """
    Build the result of a completed walk.

    The run is only ``ok`` if no page failed to persist; per-page failures
    never abort the walk itself.
    """
    error = ""
    if failures:
        error = f"{len(failures)} page(s) could not be written."
    return GenerationResult(
        ok=not failures,
        error=error,
        root_path=root_path,
        collection_name=collection_name,
        collection_found=collection_found,
        dry_run=dry_run,
        directories=directories,
        pages=list(pages),
        failures=list(failures),
        warnings=list(warnings),
        summary=dict(summary),
    )
