"""
Error types raised while loading bundled resources.

All failures surface through ResourceError so callers of the accessor
functions only need to handle a single exception family.
"""

from __future__ import annotations

from typing import Optional


class ResourceError(RuntimeError):
    """Raised when a bundled resource cannot be turned into a lookup table."""

    def __init__(self, detail: str, *, source: Optional[str] = None) -> None:
        message = f"{source}: {detail}" if source else detail
        super().__init__(message)
        self.detail = detail
        self.source = source


class ResourceIOError(ResourceError):
    """Raised when the underlying byte stream cannot be read."""


class ResourceNotFoundError(ResourceIOError):
    """Raised when a provider has no resource for the requested key."""


class ParseError(ResourceError):
    """Raised when a record does not decode into the expected shape."""

    def __init__(
        self,
        detail: str,
        *,
        source: Optional[str] = None,
        line: Optional[int] = None,
    ) -> None:
        if line is not None:
            detail = f"line {line}: {detail}"
        super().__init__(detail, source=source)
        self.line = line


class UnknownResourceError(ResourceError, LookupError):
    """Raised when a language or resource name is not in the catalogue."""
