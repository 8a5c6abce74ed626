"""Exceptions raised by gradlepropls."""

from __future__ import annotations


class GradlePropertiesError(Exception):
    """Base class for all gradlepropls errors."""


class PositionOutOfRange(GradlePropertiesError, IndexError):
    """The cursor line does not exist in the document."""

    def __init__(self, line: int, line_count: int) -> None:
        super().__init__(
            f"Line {line} is out of range for a document with {line_count} line(s)"
        )
        self.line = line
        self.line_count = line_count


class CatalogError(GradlePropertiesError):
    """The property catalog could not be built."""


class CatalogUnavailable(CatalogError):
    """The catalog source is missing or unreadable."""
