"""Extract DOCX pages by rendering the document to PDF first.

Splitting on explicit page breaks only approximates Word's pagination. When
real rendered pages are needed the DOCX is converted to PDF by an external
converter (LibreOffice by default) and the PDF page selector does the rest.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

from ...core.config import Settings
from ...core.exceptions import ExternalCommandError
from ...core.process import CommandRunner, describe_failure, resolve_executable, run_command
from ...core.tempfiles import scoped_temp_dir
from ...core.utils import get_logger, resolve_path
from .exceptions import ConversionFailedError
from .pdf_pages import extract_pages_from_pdf

LOGGER = get_logger("docparser.tools.pages.docx_via_pdf")

Converter = Callable[[Path], "str | Path"]


def convert_docx_to_pdf(
    docx_path: str | Path,
    output_dir: str | Path,
    *,
    runner: CommandRunner | None = None,
    executable: str | None = None,
) -> Path:
    """Convert ``docx_path`` to PDF inside ``output_dir`` using LibreOffice.

    Raises:
        ConversionFailedError: If the converter cannot be started, exits with a
            non-zero status, or does not produce the expected file.
    """

    source = resolve_path(docx_path)
    destination_dir = resolve_path(output_dir)
    program = resolve_executable(executable or Settings.from_env().soffice)
    command = [
        program,
        "--headless",
        "--convert-to",
        "pdf",
        "--outdir",
        str(destination_dir),
        str(source),
    ]

    execute = runner or run_command
    try:
        completed = execute(command)
    except ExternalCommandError as exc:
        raise ConversionFailedError(str(exc)) from exc

    if completed.returncode != 0:
        raise ConversionFailedError(
            f"Converting {source.name} to PDF failed with {describe_failure(completed)}"
        )

    pdf_path = destination_dir / f"{source.stem}.pdf"
    if not pdf_path.is_file():
        raise ConversionFailedError(f"Converter did not produce {pdf_path.name}")
    LOGGER.debug("Converted %s to %s", source, pdf_path)
    return pdf_path


def extract_pages_via_pdf(
    docx_path: str | Path,
    pages: Sequence[int],
    convert: Converter | None = None,
    *,
    runner: CommandRunner | None = None,
) -> Path:
    """Render ``docx_path`` to PDF and extract ``pages`` from the rendering.

    Args:
        docx_path: Source DOCX document.
        pages: 1-based page numbers of the rendered document.
        convert: Optional replacement converter taking the DOCX path and
            returning a PDF path. Its output is owned by the caller and is not
            removed.
        runner: Command runner used by the default converter.

    Returns:
        Path of a temporary PDF file holding the selected pages.
    """

    source = resolve_path(docx_path)
    if convert is not None:
        pdf_path = Path(convert(source))
        return extract_pages_from_pdf(pdf_path, pages)

    with scoped_temp_dir(prefix="docparser-convert-") as workdir:
        pdf_path = convert_docx_to_pdf(source, workdir, runner=runner)
        return extract_pages_from_pdf(pdf_path, pages)


__all__ = ["Converter", "convert_docx_to_pdf", "extract_pages_via_pdf"]
