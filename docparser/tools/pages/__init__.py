"""Page extraction for PDF and DOCX documents."""

from __future__ import annotations

from .docx_pages import count_docx_pages, extract_pages_from_docx, select_body_pages, select_docx_pages
from .docx_via_pdf import convert_docx_to_pdf, extract_pages_via_pdf
from .exceptions import (
    ConversionFailedError,
    EmptySelectionError,
    InvalidPDFError,
    MalformedDocumentError,
    PageExtractionError,
)
from .pdf_pages import extract_pages_from_pdf, select_pdf_pages
from .selection import coerce_page_numbers, valid_indices

__all__ = [
    "extract_pages_from_docx",
    "extract_pages_from_pdf",
    "extract_pages_via_pdf",
    "convert_docx_to_pdf",
    "select_body_pages",
    "select_docx_pages",
    "select_pdf_pages",
    "count_docx_pages",
    "coerce_page_numbers",
    "valid_indices",
    "PageExtractionError",
    "MalformedDocumentError",
    "EmptySelectionError",
    "InvalidPDFError",
    "ConversionFailedError",
]
