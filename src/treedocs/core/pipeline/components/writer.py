from __future__ import annotations

"""
Page Persistence.

Writes generated pages to disk, overwriting any existing file. Failures
are raised as PageWriteError carrying the offending path so the emitter can
report them and carry on with the rest of the tree.
"""

import logging

from treedocs.domain.errors import PageWriteError
from treedocs.infra import fs

logger = logging.getLogger(__name__)


def write_page(path: str, content: str, encoding: str, dry_run: bool = False) -> None:
    """
    Persist one generated page.

    Args:
        path: Absolute destination path.
        content: Page text.
        encoding: Output text encoding.
        dry_run: Only log what would be written.

    Raises:
        PageWriteError: If the file cannot be created or overwritten.
    """
    if dry_run:
        logger.info(f"Dry run: would write {path}")
        return

    try:
        fs.write_text(path, content, encoding)
    except (OSError, UnicodeEncodeError) as e:
        raise PageWriteError(path, str(e)) from e

    logger.info(f"Created: {path}")
