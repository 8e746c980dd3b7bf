"""Shared domain models used across docparser tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class PageContent:
    """Content extracted from a single page, chapter or document."""

    images: list[str] = field(default_factory=list)
    paragraphs: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"images": list(self.images), "paragraphs": list(self.paragraphs)}


@dataclass(slots=True)
class ExtractionResult:
    """Ordered list of page contents produced by a content extractor."""

    pages: list[PageContent] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def to_dict(self) -> dict[str, Any]:
        return {"pages": [page.to_dict() for page in self.pages]}
