"""Command line interface for docparser."""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__, extract_document_content, extract_document_pages
from ..core.config import Settings
from ..core.exceptions import DocParserError
from ..core.utils import configure_logging

console = Console(stderr=True)

PAGES_USAGE = "Usage: docparser-pages [OPTIONS] <document> <page> [page...]"


def _setup_logging(verbose: bool) -> None:
    configure_logging("DEBUG" if verbose else Settings.from_env().log_level)


def _fail(message: object) -> None:
    console.print(f"[bold red]✗ Error:[/bold red] {escape(str(message))}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    docparser - extract pages, paragraphs and images from PDF, EPUB and DOCX files.
    """
    pass


@click.command(name="pages", context_settings={"ignore_unknown_options": True})
@click.argument("arguments", nargs=-1)
@click.option(
    "--via-pdf",
    is_flag=True,
    default=False,
    help="Render DOCX input to PDF with LibreOffice before selecting pages",
)
@click.option(
    "--output", "-o",
    default=None,
    help="Move the extracted document to this path",
    type=click.Path(dir_okay=False),
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def pages_command(arguments, via_pdf, output, verbose):
    """
    Extract pages from a PDF or DOCX file into a new document.

    Pages are 1-based and written in the order given; repeating a number
    repeats the page. The path of the new file is printed.

    Examples:

        docparser-pages report.pdf 5 1

        docparser-pages book.docx 1 3 --via-pdf
    """
    if len(arguments) < 2:
        click.echo(PAGES_USAGE)
        sys.exit(1)

    _setup_logging(verbose)
    document, *pages = arguments
    try:
        result = extract_document_pages(
            document,
            pages,
            output,
            strategy="pdf" if via_pdf else "markup",
        )
    except (DocParserError, OSError) as exc:
        _fail(exc)
        return

    click.echo(str(result))


@click.command(name="content")
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output-dir", "-o",
    default="./extract-output",
    help="Directory where extracted images are written",
    type=click.Path(file_okay=False),
)
@click.option("--table", "show_table", is_flag=True, default=False, help="Print a summary table instead of JSON")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def content_command(document, output_dir, show_table, verbose):
    """
    Extract paragraphs and images from a PDF, EPUB or DOCX file.

    Example:

        docparser content novel.epub -o ./out
    """
    _setup_logging(verbose)
    try:
        result = extract_document_content(document, output_dir)
    except (DocParserError, OSError) as exc:
        _fail(exc)
        return

    if not show_table:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    table = Table(title="Extracted Content")
    table.add_column("Page", style="cyan", justify="right")
    table.add_column("Paragraphs", style="green", justify="right")
    table.add_column("Images", style="green", justify="right")
    for number, page in enumerate(result.pages, start=1):
        table.add_row(str(number), str(len(page.paragraphs)), str(len(page.images)))
    Console().print(table)


cli.add_command(pages_command)
cli.add_command(content_command)


if __name__ == "__main__":  # pragma: no cover
    cli()
