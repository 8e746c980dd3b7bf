"""Custom exceptions raised by :mod:`docparser.tools.archive`."""

from __future__ import annotations

from ...core.exceptions import DocParserError


class ContainerError(DocParserError):
    """Base exception for container access failures."""


class InvalidContainerError(ContainerError):
    """Raised when the source bytes are not a readable ZIP archive."""


class MissingEntryError(ContainerError):
    """Raised when a required entry is absent from the container."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Container entry not found: {path}")
