"""Exception hierarchy shared by every docparser tool."""

from __future__ import annotations

from typing import Iterable


class DocParserError(Exception):
    """Base exception for all errors raised by :mod:`docparser`."""


class UnsupportedDocumentError(DocParserError):
    """Raised when no extractor handles the given file type."""


class InvalidPageNumberError(DocParserError):
    """Raised when a page value cannot be read as an integer."""

    def __init__(self, pages: Iterable[object]) -> None:
        self.pages = list(pages)
        super().__init__(f"Page numbers must be integers: {self.pages!r}")


class ExternalCommandError(DocParserError):
    """Raised when an external program cannot be started."""

    def __init__(self, command: Iterable[str], message: str) -> None:
        self.command = list(command)
        super().__init__(message)


class MalformedDocumentError(DocParserError):
    """Raised when a document lacks an expected structural element."""
