from __future__ import annotations

"""
Domain Exceptions.

Typed failures raised by the generation engine. Statistics gathering never
raises; only a missing scan root and page persistence are reported.
"""


class TreeDocsError(Exception):
    """Base class for all generator failures."""


class RootNotFoundError(TreeDocsError):
    """The top-level scan target does not exist or is not a directory."""

    def __init__(self, path: str):
        super().__init__(f"Target directory does not exist: {path}")
        self.path = path


class PageWriteError(TreeDocsError):
    """
    An index or sidebar page could not be created or overwritten.

    Attributes:
        path: Absolute path of the page that failed.
        reason: Underlying operating system message.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to write '{path}': {reason}")
        self.path = path
        self.reason = reason
