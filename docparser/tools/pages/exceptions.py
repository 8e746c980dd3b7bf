"""Custom exceptions raised by :mod:`docparser.tools.pages`."""

from __future__ import annotations

from typing import Iterable

from ...core.exceptions import DocParserError, MalformedDocumentError


class PageExtractionError(DocParserError):
    """Base exception for all page extraction failures."""


class EmptySelectionError(PageExtractionError):
    """Raised when none of the requested page numbers exists in the document."""

    def __init__(self, pages: Iterable[object], available: int) -> None:
        self.pages = list(pages)
        self.available = available
        message = (
            f"No valid page numbers given: {self.pages!r} "
            f"(document has {available} page{'s' if available != 1 else ''})"
        )
        super().__init__(message)


class InvalidPDFError(PageExtractionError):
    """Raised when the source bytes cannot be read as a PDF document."""


class ConversionFailedError(PageExtractionError):
    """Raised when converting a DOCX file to PDF fails."""


__all__ = [
    "PageExtractionError",
    "MalformedDocumentError",
    "EmptySelectionError",
    "InvalidPDFError",
    "ConversionFailedError",
]
