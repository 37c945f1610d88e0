from __future__ import annotations

"""
Content Metrics.

Per-file statistics: raw byte size, a human-scaled size string and a coarse
content-volume estimate. Every function degrades to zero on filesystem
errors; statistics are best-effort and never abort generation.
"""

import logging
import math
from dataclasses import dataclass

from treedocs.domain.constants import BYTES_PER_CONTENT_UNIT, DEFAULT_ENCODING, KIB, MIB
from treedocs.infra import fs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileMetrics:
    byte_size: int = 0
    formatted_size: str = "0 B"
    content_volume: int = 0


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_size(n: int) -> str:
    """
    Render a byte count in B, KB or MB.

    Values are rounded half-up to two decimals with trailing zeros dropped
    ("2.5 KB", "1 KB"). A value that rounds up to 1024 of its unit is
    promoted to the next band, so "1024 KB" is never produced.

    Args:
        n: Byte count.

    Returns:
        str: Formatted size.
    """
    if n < KIB:
        return f"{n} B"

    kb = _round2(n / KIB)
    if n < MIB and kb < KIB:
        return f"{_trim(kb)} KB"

    return f"{_trim(_round2(n / MIB))} MB"


def content_volume(data: bytes, encoding: str = DEFAULT_ENCODING) -> int:
    """
    Estimate the content units of a document.

    The decoded text is measured in UTF-8 bytes and divided by three, the
    average width of a CJK character. This is a proxy, not a word count.
    Undecodable bytes are replaced before measuring.

    Args:
        data: Raw file content.
        encoding: Encoding the file is stored in.

    Returns:
        int: ``round(utf8_length / 3)``.
    """
    text = data.decode(encoding, errors="replace")
    utf8_length = len(text.encode("utf-8"))
    return int(math.floor(utf8_length / BYTES_PER_CONTENT_UNIT + 0.5))


def measure_file(path: str, encoding: str = DEFAULT_ENCODING) -> FileMetrics:
    """
    Collect the metrics of a single file.

    Args:
        path: File to measure.
        encoding: Text encoding of the file.

    Returns:
        FileMetrics: All-zero metrics if the file is missing or unreadable.
    """
    try:
        size = fs.byte_size(path)
        data = fs.read_bytes(path)
    except OSError as e:
        logger.debug(f"Metrics unavailable for '{path}': {e}")
        return FileMetrics()

    return FileMetrics(
        byte_size=size,
        formatted_size=format_size(size),
        content_volume=content_volume(data, encoding),
    )


def file_size(path: str) -> int:
    """Byte size from metadata, zero if the file cannot be stat'ed."""
    try:
        return fs.byte_size(path)
    except OSError as e:
        logger.debug(f"Size unavailable for '{path}': {e}")
        return 0


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _round2(value: float) -> float:
    """Half-up rounding to two decimals."""
    return math.floor(value * 100 + 0.5) / 100


def _trim(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")
