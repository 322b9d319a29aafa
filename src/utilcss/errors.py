"""Error types for utilcss."""

from __future__ import annotations

from pathlib import Path


class UtilCSSError(Exception):
    """Base error for all utilcss errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigLoadError(UtilCSSError):
    """Raised when a style table cannot be read or decoded.

    Loading is all-or-nothing: when this is raised no tables are returned.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.path = Path(path) if path is not None else None
