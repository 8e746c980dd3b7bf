"""Extract pages from a PDF document into a new document."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Sequence

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ...core.tempfiles import write_temp_file
from ...core.utils import get_logger, resolve_path
from .exceptions import InvalidPDFError
from .selection import valid_indices

LOGGER = get_logger("docparser.tools.pages.pdf")


def load_pdf(source: bytes, *, password: str | None = None) -> PdfReader:
    """Parse ``source`` and decrypt it when required."""

    try:
        reader = PdfReader(io.BytesIO(source))
        if reader.is_encrypted:
            if reader.decrypt(password or "") == 0:
                raise InvalidPDFError("PDF is encrypted and the supplied password is wrong.")
        # Force the page tree to load so structural errors surface here.
        len(reader.pages)
    except InvalidPDFError:
        raise
    except PdfReadError as exc:
        raise InvalidPDFError(f"Corrupted or invalid PDF: {exc}") from exc
    except Exception as exc:
        raise InvalidPDFError(f"Unexpected error reading PDF: {exc}") from exc
    return reader


def _copy_metadata(reader: PdfReader, writer: PdfWriter) -> None:
    metadata = reader.metadata
    if not metadata:
        return
    entries = {key: value for key, value in metadata.items() if isinstance(value, str)}
    if entries:
        writer.add_metadata(entries)


def select_pdf_pages(source: bytes, pages: Sequence[int], *, password: str | None = None) -> bytes:
    """Return a PDF holding the requested pages of ``source``.

    Pages are copied in request order and repeated as often as requested.
    Numbers outside ``1..page_count`` are skipped. When nothing is selected
    the result is a valid document with zero pages.
    """

    reader = load_pdf(source, password=password)
    writer = PdfWriter()
    for index in valid_indices(pages, len(reader.pages)):
        writer.add_page(reader.pages[index])
    _copy_metadata(reader, writer)

    if not writer.pages:
        LOGGER.warning("No requested page exists in the source; writing an empty PDF")

    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def extract_pages_from_pdf(
    pdf_path: str | Path,
    pages: Sequence[int],
    *,
    password: str | None = None,
) -> Path:
    """Write the requested pages of ``pdf_path`` to a new temporary ``.pdf`` file."""

    pages = list(pages)
    source = resolve_path(pdf_path)
    try:
        data = source.read_bytes()
    except OSError as exc:
        raise InvalidPDFError(f"Unable to read PDF file: {source}. Error: {exc}") from exc

    output = write_temp_file(select_pdf_pages(data, pages, password=password), suffix=".pdf")
    LOGGER.info("Extracted pages %s from %s to %s", pages, source, output)
    return output


__all__ = ["load_pdf", "select_pdf_pages", "extract_pages_from_pdf"]
