"""ZIP container access used by the DOCX and EPUB tools."""

from __future__ import annotations

from .container import Container
from .exceptions import ContainerError, InvalidContainerError, MissingEntryError

__all__ = ["Container", "ContainerError", "InvalidContainerError", "MissingEntryError"]
