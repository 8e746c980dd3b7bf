from __future__ import annotations

import base64
import subprocess
import sys
import zipfile
from pathlib import Path
from typing import Callable, Sequence

import pytest
from docx import Document
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
PAGE_BREAK = '<w:p><w:r><w:br w:type="page"/></w:r></w:p>'

# 1x1 transparent PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '<Override PartName="/word/document.xml" '
    'ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>'
    "</Types>"
)


@pytest.fixture(autouse=True)
def isolated_temp_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    temp_dir = tmp_path / "docparser-tmp"
    monkeypatch.setenv("DOCPARSER_TMPDIR", str(temp_dir))
    return temp_dir


@pytest.fixture()
def sample_pdf(tmp_path: Path) -> Path:
    """Five blank pages; page ``n`` is ``100 * n`` points wide."""

    pdf_path = tmp_path / "sample.pdf"
    writer = PdfWriter()
    for index in range(5):
        writer.add_blank_page(width=100 * (index + 1), height=200)
    writer.add_metadata({"/Producer": "docparser-tests", "/Title": "Sample"})
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path


@pytest.fixture()
def docx_factory(tmp_path: Path) -> Callable[..., Path]:
    """Build a DOCX whose pages are separated by python-docx page breaks."""

    def _create(pages: Sequence[Sequence[str]], filename: str = "sample.docx") -> Path:
        document = Document()
        for index, paragraphs in enumerate(pages):
            if index:
                document.add_page_break()
            for text in paragraphs:
                document.add_paragraph(text)
        path = tmp_path / filename
        document.save(str(path))
        return path

    return _create


def document_xml(body_inner: str, body_attrs: str = "") -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
        f'<w:document xmlns:w="{W_NS}"><w:body{body_attrs}>{body_inner}</w:body></w:document>'
    )


def paragraph(text: str) -> str:
    return f"<w:p><w:r><w:t>{text}</w:t></w:r></w:p>"


@pytest.fixture()
def raw_docx(tmp_path: Path) -> Callable[..., Path]:
    """Write a minimal DOCX package around hand-written document markup."""

    def _create(markup: str, filename: str = "raw.docx", extra: dict[str, bytes] | None = None) -> Path:
        path = tmp_path / filename
        with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as archive:
            archive.writestr("[Content_Types].xml", CONTENT_TYPES)
            archive.writestr("word/document.xml", markup)
            for name, payload in (extra or {}).items():
                archive.writestr(name, payload)
        return path

    return _create


@pytest.fixture()
def fake_runner() -> Callable[..., Callable]:
    """Return a command runner that records calls and runs ``action`` instead."""

    def _build(action: Callable[[list[str]], None] | None = None, returncode: int = 0, stderr: bytes = b""):
        calls: list[list[str]] = []

        def _run(command):
            command = [str(part) for part in command]
            calls.append(command)
            if action is not None and returncode == 0:
                action(command)
            return subprocess.CompletedProcess(command, returncode, b"", stderr)

        _run.calls = calls  # type: ignore[attr-defined]
        return _run

    return _build
