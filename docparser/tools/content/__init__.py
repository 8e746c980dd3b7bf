"""Paragraph and image extraction for PDF, EPUB and DOCX documents."""

from __future__ import annotations

from .epub import extract_epub_content
from .exceptions import ContentExtractionError, ExternalToolError
from .pdf import extract_pdf_content, split_paragraphs
from .word import extract_docx_content

__all__ = [
    "extract_pdf_content",
    "extract_epub_content",
    "extract_docx_content",
    "split_paragraphs",
    "ContentExtractionError",
    "ExternalToolError",
]
