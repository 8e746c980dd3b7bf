"""Core helpers shared by docparser tools."""

from __future__ import annotations

from .config import Settings
from .exceptions import DocParserError
from .model import ExtractionResult, PageContent
from .utils import configure_logging, get_logger, resolve_path

__all__ = [
    "Settings",
    "DocParserError",
    "ExtractionResult",
    "PageContent",
    "configure_logging",
    "get_logger",
    "resolve_path",
]
