"""Paragraph and image extraction for PDF documents.

Text comes from ``mutool draw -F txt`` (one file per page) and images from
poppler's ``pdfimages -p -all``, whose file names carry the page number.
"""

from __future__ import annotations

import re
import shutil
from pathlib import Path
from typing import Dict, List, Sequence

from ...core.config import Settings
from ...core.exceptions import ExternalCommandError
from ...core.model import ExtractionResult, PageContent
from ...core.process import CommandRunner, describe_failure, resolve_executable, run_command
from ...core.tempfiles import scoped_temp_dir
from ...core.utils import get_logger, resolve_path
from .exceptions import ExternalToolError

LOGGER = get_logger("docparser.tools.content.pdf")

IMAGE_NAME_RE = re.compile(r"^img-(\d+)-(\d+)\.[^.]+$")
PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


def split_paragraphs(text: str) -> List[str]:
    """Split page text on blank lines, dropping empty blocks."""

    return [block.strip() for block in PARAGRAPH_BREAK_RE.split(text) if block.strip()]


def _run_tool(runner: CommandRunner, command: Sequence[str]) -> None:
    try:
        completed = runner(command)
    except ExternalCommandError as exc:
        raise ExternalToolError(command, str(exc)) from exc
    if completed.returncode != 0:
        raise ExternalToolError(command, f"{Path(command[0]).name} failed with {describe_failure(completed)}")


def _collect_images(image_dir: Path, output_dir: Path) -> Dict[int, List[str]]:
    found: list[tuple[int, int, Path]] = []
    for entry in image_dir.iterdir():
        if not entry.is_file():
            continue
        match = IMAGE_NAME_RE.match(entry.name)
        if match is None:
            continue
        found.append((int(match.group(1)), int(match.group(2)), entry))

    page_images: Dict[int, List[str]] = {}
    for page_number, _, entry in sorted(found):
        destination = output_dir / entry.name
        shutil.move(str(entry), str(destination))
        page_images.setdefault(page_number, []).append(str(destination))
    return page_images


def extract_pdf_content(
    pdf_path: str | Path,
    output_dir: str | Path,
    *,
    runner: CommandRunner | None = None,
) -> ExtractionResult:
    """Extract per-page paragraphs and images from ``pdf_path``.

    Images are moved into ``output_dir``; intermediate text files live in a
    scoped working directory that is removed afterwards.

    Raises:
        ExternalToolError: If ``mutool`` or ``pdfimages`` fails.
    """

    source = resolve_path(pdf_path)
    destination = resolve_path(output_dir)
    destination.mkdir(parents=True, exist_ok=True)

    settings = Settings.from_env()
    execute = runner or run_command

    with scoped_temp_dir(prefix="docparser-text-") as text_dir, scoped_temp_dir(
        prefix="docparser-images-"
    ) as image_dir:
        _run_tool(
            execute,
            [
                resolve_executable(settings.mutool),
                "draw",
                "-F",
                "txt",
                "-o",
                str(text_dir / "page-%d.txt"),
                str(source),
            ],
        )
        _run_tool(
            execute,
            [resolve_executable(settings.pdfimages), "-p", "-all", str(source), str(image_dir / "img")],
        )

        page_images = _collect_images(image_dir, destination)

        pages: List[PageContent] = []
        page_number = 1
        while True:
            text_path = text_dir / f"page-{page_number}.txt"
            if not text_path.exists():
                break
            text = text_path.read_text(encoding="utf-8", errors="replace")
            pages.append(
                PageContent(
                    images=page_images.get(page_number, []),
                    paragraphs=split_paragraphs(text),
                )
            )
            page_number += 1

    LOGGER.info("Extracted %d pages from %s", len(pages), source)
    return ExtractionResult(pages=pages)


__all__ = ["extract_pdf_content", "split_paragraphs"]
