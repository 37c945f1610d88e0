from __future__ import annotations

"""
Logging Configuration Models.

Run-log settings chosen on the command line (verbosity and an optional
log file), plus the fixed line formats and the mapping from textual
severity names to native logging levels.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

RUN_LOG_MAX_BYTES = 512 * 1024
RUN_LOG_BACKUPS = 2


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging subsystem settings.

    Attributes:
        level: Minimum severity captured (``--debug`` selects DEBUG).
        console: Emit records on stderr.
        log_file: Optional path of a rotating run log (``--log-file``).
        max_bytes: Rollover threshold of the run log.
        backup_count: Number of rotated run logs kept.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = RUN_LOG_MAX_BYTES
    backup_count: int = RUN_LOG_BACKUPS
