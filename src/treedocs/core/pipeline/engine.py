from __future__ import annotations

"""
Generation Engine.

Coordinates a complete run:
1. Validates the configuration and resolves the scan root.
2. Scans the collection into an in-memory tree (read-only).
3. Walks the tree depth-first, parent before children, classifying each
   directory, rendering its index page and sidebar, and writing both.
4. Returns a GenerationResult with pages, failures and root totals.
"""

import logging
import os
from dataclasses import replace
from typing import Any, Dict, List, Optional

from treedocs.core.analysis.aggregator import SubtreeAggregator
from treedocs.core.analysis.roles import classify
from treedocs.core.analysis.scanner import scan
from treedocs.core.pipeline.components.writer import write_page
from treedocs.core.pipeline.stages.validator import validate_config
from treedocs.core.rendering.index_renderer import render_index
from treedocs.core.rendering.links import LinkResolver
from treedocs.core.rendering.page_builder import PageBuilder
from treedocs.core.rendering.sidebar_renderer import render_sidebar
from treedocs.domain.config import GeneratorConfig, to_generator_config
from treedocs.domain.errors import PageWriteError, RootNotFoundError
from treedocs.domain.generation_models import (
    GenerationResult,
    PageFailure,
    create_error_result,
    create_run_result,
)
from treedocs.domain.tree_models import DirectoryNode
from treedocs.infra import fs
from treedocs.utils.i18n import I18n

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# EMITTER
# -----------------------------------------------------------------------------

class Emitter:
    """
    Renders and writes the two pages of every directory of a tree.

    Write failures are recorded and logged; the walk continues with the
    remaining siblings and children.
    """

    def __init__(
            self,
            config: GeneratorConfig,
            builder: PageBuilder,
            messages: I18n,
            dry_run: bool = False,
    ):
        self._config = config
        self._builder = builder
        self._messages = messages
        self._dry_run = dry_run
        self.pages: List[str] = []
        self.failures: List[PageFailure] = []
        self.directories = 0

    def emit(self, node: DirectoryNode, is_root: bool = False) -> None:
        """Process ``node`` and then every sub-directory, in pre-order."""
        role = classify(node, is_root, self._config.collection_name)
        self.directories += 1
        logger.info(f"Generating pages for: {node.path} ({role.value})")

        index_text = render_index(self._builder.build_index(node, role), self._messages)
        sidebar_text = render_sidebar(self._builder.build_sidebar(node, role), self._messages)

        self._write(os.path.join(node.path, self._config.index_filename), index_text)
        self._write(os.path.join(node.path, self._config.sidebar_filename), sidebar_text)

        for child in node.directories:
            self.emit(child, is_root=False)

    def _write(self, path: str, content: str) -> None:
        try:
            write_page(path, content, self._config.encoding, dry_run=self._dry_run)
        except PageWriteError as e:
            logger.error(str(e))
            self.failures.append(PageFailure(path=e.path, reason=e.reason))
            return
        self.pages.append(path)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_docs(config: GeneratorConfig, *, dry_run: bool = False) -> GenerationResult:
    """
    Generate index pages and sidebars for the whole tree under the root.

    Args:
        config: Immutable run configuration.
        dry_run: Render everything but write nothing.

    Returns:
        GenerationResult: Outcome of the walk.

    Raises:
        RootNotFoundError: If the root is missing; nothing is written.
    """
    root_path = os.path.abspath(config.root_path)
    if not fs.is_directory(root_path):
        raise RootNotFoundError(root_path)

    logger.info(f"Starting to generate docs from: {root_path}")
    warnings: List[str] = []
    tree = scan(root_path, config, warnings=warnings)

    aggregator = SubtreeAggregator(config)
    builder = PageBuilder(config, aggregator.aggregate, LinkResolver(config))
    emitter = Emitter(config, builder, I18n(config.locale), dry_run=dry_run)
    emitter.emit(tree, is_root=True)

    collection_found = tree.find_directory(config.collection_name) is not None
    if not collection_found:
        msg = f"Designated collection '{config.collection_name}' not found under {root_path}."
        logger.warning(msg)
        warnings.append(msg)

    totals = aggregator.aggregate(root_path)
    summary: Dict[str, Any] = {
        "documents": totals.document_count,
        "content_volume": totals.content_volume,
        "byte_size": totals.byte_size,
        "formatted_size": totals.formatted_size,
    }

    if emitter.failures:
        logger.warning(f"Document generation finished with {len(emitter.failures)} failed page(s).")
    else:
        logger.info("Document generation completed.")

    return create_run_result(
        root_path=root_path,
        collection_name=config.collection_name,
        collection_found=collection_found,
        dry_run=dry_run,
        directories=emitter.directories,
        pages=emitter.pages,
        failures=emitter.failures,
        warnings=warnings,
        summary=summary,
    )


def run_pipeline(config: Optional[Dict[str, Any]], *, dry_run: bool = False) -> GenerationResult:
    """
    Validate a raw configuration dictionary and run the generation.

    A missing root is reported as an error result instead of raising.

    Args:
        config: Raw or partial configuration dictionary.
        dry_run: Render everything but write nothing.

    Returns:
        GenerationResult: Object containing status, pages and totals.
    """
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    gen_config = to_generator_config(cfg)
    try:
        result = generate_docs(gen_config, dry_run=dry_run)
    except RootNotFoundError as e:
        logger.error(str(e))
        return create_error_result(str(e), e.path, gen_config.collection_name, warnings)

    if warnings:
        return replace(result, warnings=warnings + result.warnings)
    return result
