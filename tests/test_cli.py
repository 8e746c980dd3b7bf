from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from pypdf import PdfReader

from docparser import __version__
from docparser.cli.main import PAGES_USAGE, cli, pages_command


def test_pages_without_arguments_prints_usage() -> None:
    runner = CliRunner()
    result = runner.invoke(pages_command, [])
    assert result.exit_code == 1
    assert PAGES_USAGE in result.output


def test_pages_with_only_document_prints_usage(sample_pdf: Path) -> None:
    result = CliRunner().invoke(pages_command, [str(sample_pdf)])
    assert result.exit_code == 1
    assert PAGES_USAGE in result.output


def test_pages_prints_output_path(sample_pdf: Path) -> None:
    result = CliRunner().invoke(pages_command, [str(sample_pdf), "5", "1"])

    assert result.exit_code == 0, result.output
    output = Path(result.output.strip().splitlines()[-1])
    assert output.exists()
    assert [float(page.mediabox.width) for page in PdfReader(str(output)).pages] == [500.0, 100.0]


def test_pages_with_output_option(docx_factory, tmp_path: Path) -> None:
    target = tmp_path / "picked.docx"
    source = docx_factory([["one"], ["two"]])
    result = CliRunner().invoke(cli, ["pages", str(source), "2", "-o", str(target)])

    assert result.exit_code == 0, result.output
    assert result.output.strip().splitlines()[-1] == str(target.resolve())
    assert target.exists()


def test_pages_error_exits_with_status_one(docx_factory) -> None:
    result = CliRunner().invoke(pages_command, [str(docx_factory([["one"]])), "7"])
    assert result.exit_code == 1
    assert "No valid page numbers" in result.output


def test_pages_rejects_non_integer_pages(sample_pdf: Path) -> None:
    result = CliRunner().invoke(pages_command, [str(sample_pdf), "two"])
    assert result.exit_code == 1
    assert "integers" in result.output


def test_pages_unsupported_type(tmp_path: Path) -> None:
    source = tmp_path / "notes.txt"
    source.write_text("hello")
    result = CliRunner().invoke(pages_command, [str(source), "1"])
    assert result.exit_code == 1


def test_content_prints_json(docx_factory, tmp_path: Path) -> None:
    source = docx_factory([["Hello"], ["World"]])
    result = CliRunner().invoke(cli, ["content", str(source), "-o", str(tmp_path / "out")])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload == {"pages": [{"images": [], "paragraphs": ["Hello", "World"]}]}


def test_content_table(docx_factory, tmp_path: Path) -> None:
    source = docx_factory([["Hello"]])
    result = CliRunner().invoke(cli, ["content", str(source), "-o", str(tmp_path / "out"), "--table"])
    assert result.exit_code == 0, result.output


def test_content_unsupported_type(tmp_path: Path) -> None:
    source = tmp_path / "notes.txt"
    source.write_text("hello")
    result = CliRunner().invoke(cli, ["content", str(source), "-o", str(tmp_path / "out")])
    assert result.exit_code == 1
    assert "Unsupported file type" in result.output


def test_version_option() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
