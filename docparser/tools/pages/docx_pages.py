"""Extract pages from a DOCX file by splitting its body on page breaks.

Pages are the segments of ``word/document.xml`` separated by explicit page
break paragraphs. This is a structural approximation: the segments follow the
physical order of the body content and do not reflect the pagination Word
computes when rendering.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ...core.tempfiles import write_temp_file
from ...core.utils import get_logger, resolve_path
from ..archive import Container
from .exceptions import EmptySelectionError, MalformedDocumentError
from .markup import locate_body
from .selection import project

LOGGER = get_logger("docparser.tools.pages.docx")

DOCUMENT_PART = "word/document.xml"


def count_docx_pages(markup: str) -> int:
    """Return the number of page segments in ``markup``."""

    return len(locate_body(markup).segments())


def select_body_pages(markup: str, pages: Sequence[int]) -> str:
    """Return ``markup`` with the body reduced to the requested pages.

    Segments are emitted in request order, duplicates included, joined by a
    single canonical page break paragraph. Everything outside the body
    content, including the body tags themselves, is kept verbatim.

    Raises:
        MalformedDocumentError: If the markup has no body element.
        EmptySelectionError: If no requested page exists.
    """

    pages = list(pages)
    body = locate_body(markup)
    segments = body.segments()
    selected = project(segments, pages)
    if not selected:
        raise EmptySelectionError(pages, len(segments))

    LOGGER.debug("Selected %d of %d segments for pages %s", len(selected), len(segments), pages)
    return body.render(body.namespaces.marker().join(selected))


def _rewrite(container: Container, pages: Sequence[int]) -> bytes:
    try:
        markup = container.read_text(DOCUMENT_PART)
    except UnicodeDecodeError as exc:
        raise MalformedDocumentError(f"Invalid DOCX: {DOCUMENT_PART} is not UTF-8 text") from exc
    container.replace_entry(DOCUMENT_PART, select_body_pages(markup, pages))
    return container.serialize()


def select_docx_pages(source: bytes, pages: Sequence[int]) -> bytes:
    """Return a DOCX package containing only the requested pages of ``source``."""

    return _rewrite(Container.load(source), pages)


def extract_pages_from_docx(docx_path: str | Path, pages: Sequence[int]) -> Path:
    """Write the requested pages of ``docx_path`` to a new temporary file.

    Args:
        docx_path: Source DOCX document.
        pages: 1-based page numbers, in output order. Out-of-range numbers are
            skipped; repeated numbers repeat the page.

    Returns:
        Path of the temporary file. It carries the source suffix and is owned
        by the caller.
    """

    pages = list(pages)
    source = resolve_path(docx_path)
    payload = _rewrite(Container.from_path(source), pages)
    output = write_temp_file(payload, suffix=source.suffix or ".docx")
    LOGGER.info("Extracted pages %s from %s to %s", pages, source, output)
    return output


__all__ = ["DOCUMENT_PART", "count_docx_pages", "select_body_pages", "select_docx_pages", "extract_pages_from_docx"]
