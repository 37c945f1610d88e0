from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the asynchronous QueueListener architecture, idempotency
of configuration, and log file rotation logic.
"""

import logging
from logging.handlers import QueueListener
from pathlib import Path

import pytest

from treedocs.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up root logger handlers before and after each test."""
    yield
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener and isinstance(listener, QueueListener):
        shutdown_logging()

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count, "Handlers were duplicated."


def test_force_replaces_listener() -> None:
    cfg = LoggingConfig(level="INFO", console=True)
    root = configure_logging(cfg)
    first = getattr(root, _QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG", console=True), force=True)

    assert getattr(root, _QUEUE_LISTENER_ATTR) is not first
    assert root.level == logging.DEBUG
    assert len([h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]) == 1


def test_log_rotation(tmp_path: Path) -> None:
    """TC-02: Verify file rotation when size limit is exceeded."""
    log_file = tmp_path / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Stopping the listener drains the queue
    shutdown_logging()

    assert log_file.exists()
    assert (tmp_path / "test_rotate.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-03: Verify that the root logger uses a QueueHandler-based architecture."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    queue_handlers = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    assert len(queue_handlers) > 0
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_shutdown_detaches_handlers() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))
    shutdown_logging()

    root = logging.getLogger()
    assert not [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]
    assert getattr(root, _QUEUE_LISTENER_ATTR) is None
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is False


def test_unwritable_log_file_falls_back_to_console(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    root = configure_logging(LoggingConfig(console=True, log_file=str(blocker / "run.log")))

    listener = getattr(root, _QUEUE_LISTENER_ATTR)
    assert len(listener.handlers) == 1


def test_run_log_format_and_defaults(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    cfg = LoggingConfig(console=False, log_file=str(log_file))

    configure_logging(cfg)
    logging.getLogger("treedocs.sample").info("Created: /site/README.md")
    shutdown_logging()

    line = log_file.read_text(encoding="utf-8").strip()
    assert line.endswith("| INFO | treedocs.sample | Created: /site/README.md")
    assert cfg.max_bytes == 512 * 1024
    assert cfg.backup_count == 2
