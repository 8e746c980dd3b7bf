"""Paragraph and image extraction for DOCX documents.

The whole document is reported as a single page.
"""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import List

import docx
from docx.oxml.ns import qn
from docx.text.paragraph import Paragraph

from ...core.model import ExtractionResult, PageContent
from ...core.utils import get_logger, resolve_path
from ..archive import InvalidContainerError

LOGGER = get_logger("docparser.tools.content.docx")


def _open_document(path: Path):
    try:
        return docx.Document(str(path))
    except Exception as exc:
        raise InvalidContainerError(f"Unable to open DOCX {path}: {exc}") from exc


def _image_extension(content_type: str) -> str:
    return content_type.split("/")[-1] or "bin"


def extract_docx_content(docx_path: str | Path, output_dir: str | Path) -> ExtractionResult:
    """Extract paragraphs and embedded images from ``docx_path``.

    Paragraphs are returned in document order, table cells included, with
    empty paragraphs dropped. Every embedded picture occurrence is written to
    ``output_dir`` under a random ``img-<uuid>.<ext>`` name.
    """

    source = resolve_path(docx_path)
    destination = resolve_path(output_dir)
    destination.mkdir(parents=True, exist_ok=True)

    document = _open_document(source)
    body = document.element.body

    paragraphs: List[str] = []
    for element in body.iter(qn("w:p")):
        text = Paragraph(element, document).text.strip()
        if text:
            paragraphs.append(text)

    images: List[str] = []
    relationships = document.part.rels
    for blip in body.iter(qn("a:blip")):
        relationship = relationships.get(blip.get(qn("r:embed")) or "")
        if relationship is None or relationship.is_external:
            continue
        part = relationship.target_part
        target = destination / f"img-{uuid.uuid4()}.{_image_extension(part.content_type)}"
        target.write_bytes(part.blob)
        images.append(str(target))

    LOGGER.info("Extracted %d paragraphs and %d images from %s", len(paragraphs), len(images), source)
    return ExtractionResult(pages=[PageContent(images=images, paragraphs=paragraphs)])


__all__ = ["extract_docx_content"]
