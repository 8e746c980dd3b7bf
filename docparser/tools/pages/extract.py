"""Plugin exposing page extraction through the tool registry."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Sequence

from ...core.exceptions import UnsupportedDocumentError
from ...core.tempfiles import remove_quietly
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool
from .docx_pages import extract_pages_from_docx
from .docx_via_pdf import extract_pages_via_pdf
from .pdf_pages import extract_pages_from_pdf
from .selection import coerce_page_numbers

LOGGER = get_logger("docparser.tools.pages")

STRATEGIES = ("markup", "pdf")


@register_tool("extract_pages")
class ExtractPagesTool(BaseTool):
    name = "extract_pages"

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        raw_pages: Sequence[int | str] | None = context.config.get("pages")
        if raw_pages is None:
            raise ValueError("pages configuration is required for extraction")
        pages = coerce_page_numbers(raw_pages)

        kind = context.document_kind()
        if kind == "pdf":
            result = extract_pages_from_pdf(source, pages, password=context.config.get("password"))
        elif kind == "docx":
            strategy = context.config.get("strategy") or "markup"
            if strategy not in STRATEGIES:
                raise ValueError(f"Unsupported DOCX strategy: {strategy}")
            if strategy == "pdf":
                result = extract_pages_via_pdf(
                    source,
                    pages,
                    context.config.get("convert"),
                    runner=context.config.get("runner"),
                )
            else:
                result = extract_pages_from_docx(source, pages)
        else:
            raise UnsupportedDocumentError(f"Page extraction does not support .{kind} files")

        if context.output_path is not None:
            LOGGER.debug("Moving %s to %s", result, context.output_path)
            try:
                context.output_path.parent.mkdir(parents=True, exist_ok=True)
                result = Path(shutil.move(str(result), str(context.output_path)))
            except OSError:
                remove_quietly(result)
                raise

        context.resources["result"] = result
        return result


__all__ = ["ExtractPagesTool", "STRATEGIES"]
