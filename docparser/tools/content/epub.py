"""Paragraph and image extraction for EPUB books.

Every HTML document of the spine becomes one page. Package documents are
parsed with :mod:`xml.etree.ElementTree`; chapter markup is parsed with
BeautifulSoup because EPUB content in the wild is often not well-formed XML.
"""

from __future__ import annotations

import posixpath
from pathlib import Path
from typing import Dict, List, NamedTuple
from urllib.parse import unquote, urlsplit
import xml.etree.ElementTree as ET

from bs4 import BeautifulSoup

from ...core.exceptions import MalformedDocumentError
from ...core.model import ExtractionResult, PageContent
from ...core.utils import get_logger, resolve_path
from ..archive import Container

LOGGER = get_logger("docparser.tools.content.epub")

CONTAINER_PATH = "META-INF/container.xml"


class ManifestItem(NamedTuple):
    href: str
    media_type: str


def _local_name(tag: object) -> str:
    return str(tag).rsplit("}", 1)[-1]


def _parse_xml(container: Container, path: str) -> ET.Element:
    payload = container.read_entry(path)
    try:
        return ET.fromstring(payload)
    except ET.ParseError as exc:
        raise MalformedDocumentError(f"Failed to parse XML ({path}): {exc}") from exc


def _iter_named(root: ET.Element, name: str):
    for element in root.iter():
        if _local_name(element.tag) == name:
            yield element


def _resolve_href(base_path: str, href: str) -> str | None:
    parts = urlsplit(href)
    if parts.scheme or parts.netloc or not parts.path:
        return None
    joined = posixpath.join(posixpath.dirname(base_path), unquote(parts.path))
    return posixpath.normpath(joined)


def read_package_path(container: Container) -> str:
    """Return the OPF package path declared in ``META-INF/container.xml``."""

    root = _parse_xml(container, CONTAINER_PATH)
    for rootfile in _iter_named(root, "rootfile"):
        full_path = rootfile.get("full-path")
        if full_path:
            return full_path
    raise MalformedDocumentError("container.xml missing rootfile/full-path")


def read_manifest(package: ET.Element) -> Dict[str, ManifestItem]:
    manifest: Dict[str, ManifestItem] = {}
    for item in _iter_named(package, "item"):
        item_id = item.get("id")
        href = item.get("href")
        if not item_id or not href:
            continue
        manifest[item_id] = ManifestItem(href=href, media_type=item.get("media-type", ""))
    return manifest


def read_spine(package: ET.Element) -> List[str]:
    return [ref.get("idref", "") for ref in _iter_named(package, "itemref") if ref.get("idref")]


def extract_epub_content(epub_path: str | Path, output_dir: str | Path) -> ExtractionResult:
    """Extract paragraphs and images for every HTML document in the spine.

    Images are written to ``output_dir`` as ``page-<n>-<name>`` where ``n`` is
    the 1-based spine position. Spine entries that are missing from the
    manifest or the archive are skipped.
    """

    source = resolve_path(epub_path)
    destination = resolve_path(output_dir)
    destination.mkdir(parents=True, exist_ok=True)

    container = Container.from_path(source)
    package_path = read_package_path(container)
    package = _parse_xml(container, package_path)
    manifest = read_manifest(package)

    pages: List[PageContent] = []
    for index, item_id in enumerate(read_spine(package)):
        item = manifest.get(item_id)
        if item is None or "html" not in item.media_type:
            continue
        chapter_path = _resolve_href(package_path, item.href)
        if chapter_path is None or chapter_path not in container:
            LOGGER.debug("Skipping missing spine document %s", item.href)
            continue

        soup = BeautifulSoup(container.read_entry(chapter_path), "html.parser")
        paragraphs = [text for text in (p.get_text().strip() for p in soup.find_all("p")) if text]

        images: List[str] = []
        for img in soup.find_all("img"):
            src = img.get("src")
            if not src:
                continue
            image_path = _resolve_href(chapter_path, src)
            if image_path is None or image_path not in container:
                continue
            target = destination / f"page-{index + 1}-{posixpath.basename(image_path)}"
            target.write_bytes(container.read_entry(image_path))
            images.append(str(target))

        pages.append(PageContent(images=images, paragraphs=paragraphs))

    LOGGER.info("Extracted %d spine documents from %s", len(pages), source)
    return ExtractionResult(pages=pages)


__all__ = ["extract_epub_content", "read_package_path", "read_manifest", "read_spine", "ManifestItem"]
