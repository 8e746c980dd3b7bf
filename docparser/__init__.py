"""Document parsing toolkit: page extraction and content extraction for PDF, EPUB and DOCX."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .core.config import Settings
from .core.exceptions import (
    DocParserError,
    InvalidPageNumberError,
    MalformedDocumentError,
    UnsupportedDocumentError,
)
from .core.model import ExtractionResult, PageContent
from .tools import load_builtin_plugins
from .tools.archive import Container, InvalidContainerError, MissingEntryError
from .tools.common.interfaces import ExtractionContext
from .tools.common.pipeline import ToolRegistry, register_tool, registry
from .tools.content import (
    ContentExtractionError,
    ExternalToolError,
    extract_docx_content,
    extract_epub_content,
    extract_pdf_content,
)
from .tools.pages import (
    ConversionFailedError,
    EmptySelectionError,
    InvalidPDFError,
    PageExtractionError,
    extract_pages_from_docx,
    extract_pages_from_pdf,
    extract_pages_via_pdf,
    select_body_pages,
    select_pdf_pages,
)

__version__ = "0.1.0"

load_builtin_plugins()

__all__ = [
    "__version__",
    "extract_document_pages",
    "extract_document_content",
    "extract_pages_from_docx",
    "extract_pages_from_pdf",
    "extract_pages_via_pdf",
    "extract_pdf_content",
    "extract_epub_content",
    "extract_docx_content",
    "select_body_pages",
    "select_pdf_pages",
    "Container",
    "ExtractionContext",
    "ExtractionResult",
    "PageContent",
    "Settings",
    "ToolRegistry",
    "registry",
    "register_tool",
    "DocParserError",
    "InvalidContainerError",
    "MissingEntryError",
    "MalformedDocumentError",
    "EmptySelectionError",
    "InvalidPDFError",
    "ConversionFailedError",
    "PageExtractionError",
    "ContentExtractionError",
    "ExternalToolError",
    "InvalidPageNumberError",
    "UnsupportedDocumentError",
]


def extract_document_pages(
    input: str | Path,
    page_numbers: Sequence[int | str],
    output: str | Path | None = None,
    *,
    strategy: str = "markup",
    **config,
) -> Path:
    """Convenience wrapper around the page extraction plugin.

    ``strategy`` only applies to DOCX input: ``"markup"`` splits on explicit
    page breaks, ``"pdf"`` renders the document to PDF first.
    """

    context = ExtractionContext(
        input_path=input,
        output_path=output,
        config={"pages": page_numbers, "strategy": strategy, **config},
    )
    return registry.run("extract_pages", context)


def extract_document_content(input: str | Path, output_dir: str | Path, **config) -> ExtractionResult:
    """Convenience wrapper around the content extraction plugin."""

    context = ExtractionContext(input_path=input, output_path=output_dir, config=dict(config))
    return registry.run("extract_content", context)
