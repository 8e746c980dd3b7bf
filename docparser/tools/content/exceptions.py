"""Custom exceptions raised by :mod:`docparser.tools.content`."""

from __future__ import annotations

from typing import Iterable

from ...core.exceptions import DocParserError


class ContentExtractionError(DocParserError):
    """Base exception for content extraction failures."""


class ExternalToolError(ContentExtractionError):
    """Raised when an external extraction program fails."""

    def __init__(self, command: Iterable[str], message: str) -> None:
        self.command = list(command)
        super().__init__(message)
