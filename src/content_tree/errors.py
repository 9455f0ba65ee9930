"""Exceptions raised by content-tree.

The tree transforms themselves never raise on malformed content; these
exceptions cover programming errors at the API edge and failures of the
optional I/O backends.
"""

from __future__ import annotations

__all__ = ["PathSyntaxError", "TranslationServiceError"]


class PathSyntaxError(ValueError):
    """A string does not follow the leaf-path grammar."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"invalid leaf path {path!r}: {reason}")


class TranslationServiceError(RuntimeError):
    """A translation backend answered with a non-retryable failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
