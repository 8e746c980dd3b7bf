"""Plugin exposing content extraction through the tool registry."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict

from ...core.exceptions import UnsupportedDocumentError
from ...core.model import ExtractionResult
from ...core.utils import resolve_path
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool
from .epub import extract_epub_content
from .pdf import extract_pdf_content
from .word import extract_docx_content

EXTRACTORS: Dict[str, Callable[..., ExtractionResult]] = {
    "pdf": extract_pdf_content,
    "epub": extract_epub_content,
    "docx": extract_docx_content,
}


def extract_document_content(path: str | Path, output_dir: str | Path, **options) -> ExtractionResult:
    """Dispatch to the content extractor matching the suffix of ``path``."""

    source = resolve_path(path)
    kind = source.suffix.lower().lstrip(".")
    try:
        extractor = EXTRACTORS[kind]
    except KeyError as exc:
        raise UnsupportedDocumentError(f"Unsupported file type: {source.suffix or source.name}") from exc
    return extractor(source, output_dir, **options)


@register_tool("extract_content")
class ExtractContentTool(BaseTool):
    name = "extract_content"

    def run(self) -> ExtractionResult:
        context = self.context
        source = context.require_input()
        if context.output_path is None:
            raise ValueError("Content extraction requires an output directory")

        options = {}
        if context.config.get("runner") is not None and context.document_kind() == "pdf":
            options["runner"] = context.config["runner"]
        result = extract_document_content(source, context.output_path, **options)
        context.resources["result"] = result
        return result


__all__ = ["EXTRACTORS", "ExtractContentTool", "extract_document_content"]
