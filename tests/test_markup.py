from __future__ import annotations

import pytest

from docparser.tools.pages import EmptySelectionError, MalformedDocumentError, select_body_pages
from docparser.tools.pages.markup import (
    WORDPROCESSING_NS,
    Namespaces,
    locate_body,
    page_break_marker,
    split_segments,
    tokenize,
)

from conftest import PAGE_BREAK, document_xml, paragraph


def _three_pages() -> str:
    return document_xml(PAGE_BREAK.join([paragraph("one"), paragraph("two"), paragraph("three")]))


def test_canonical_marker() -> None:
    assert page_break_marker() == PAGE_BREAK
    assert page_break_marker("ns0") == '<ns0:p><ns0:r><ns0:br ns0:type="page"/></ns0:r></ns0:p>'


def test_tokenize_keeps_quoted_angle_brackets_inside_attributes() -> None:
    tokens = list(tokenize('<w:t a="1 > 0">x</w:t>'))
    assert [token.kind for token in tokens] == ["start", "text", "end"]
    assert tokens[0].attrs == {"a": "1 > 0"}
    assert tokens[1].raw == "x"


def test_namespace_prefix_detection() -> None:
    assert Namespaces.from_markup(_three_pages()).prefix == "w"
    custom = f'<ns0:document xmlns:ns0="{WORDPROCESSING_NS}"/>'
    assert Namespaces.from_markup(custom).prefix == "ns0"
    assert Namespaces.from_markup("<document/>").prefix == "w"
    assert Namespaces.from_markup(f'<document xmlns="{WORDPROCESSING_NS}"/>').prefix is None


def test_split_on_tolerant_markers() -> None:
    variants = [
        PAGE_BREAK,
        '<w:p w:rsidR="00A1"> <w:r>\n  <w:br w:type="page" /> </w:r>\n</w:p>',
        "<w:p><w:r><w:br w:clear='all' w:type='page'/></w:r></w:p>",
        '<w:p><w:r><w:br w:type="page"></w:br></w:r></w:p>',
    ]
    for marker in variants:
        inner = paragraph("a") + marker + paragraph("b")
        assert split_segments(inner) == [paragraph("a"), paragraph("b")], marker


def test_non_marker_paragraphs_do_not_split() -> None:
    not_markers = [
        '<w:p><w:r><w:br/></w:r></w:p>',
        '<w:p><w:r><w:br w:type="column"/></w:r></w:p>',
        '<w:p><w:r><w:t>x</w:t><w:br w:type="page"/></w:r></w:p>',
        '<w:p><w:r><w:br w:type="page"/></w:r><w:r><w:t>x</w:t></w:r></w:p>',
        '<w:p><w:r><!-- note --><w:br w:type="page"/></w:r></w:p>',
    ]
    for candidate in not_markers:
        inner = paragraph("a") + candidate + paragraph("b")
        assert split_segments(inner) == [inner], candidate


def test_markers_nested_in_tables_are_not_page_boundaries() -> None:
    table = f"<w:tbl><w:tr><w:tc>{PAGE_BREAK}</w:tc></w:tr></w:tbl>"
    inner = paragraph("a") + table + PAGE_BREAK + paragraph("b")
    assert split_segments(inner) == [paragraph("a") + table, paragraph("b")]


def test_no_markers_yields_single_segment() -> None:
    body = locate_body(document_xml(paragraph("only")))
    assert body.segments() == [paragraph("only")]


def test_locate_body_preserves_surrounding_markup() -> None:
    markup = document_xml(paragraph("x"), body_attrs=' w:custom="1"')
    body = locate_body(markup)
    assert body.head.endswith('<w:body w:custom="1">')
    assert body.tail.startswith("</w:body>")
    assert body.render(body.inner) == markup


def test_locate_body_ignores_similarly_named_elements() -> None:
    markup = f'<w:document xmlns:w="x"><w:bodyPr/><w:body>{paragraph("x")}</w:body></w:document>'
    assert locate_body(markup).inner == paragraph("x")


@pytest.mark.parametrize(
    "markup",
    [
        "<w:document></w:document>",
        "<w:document><w:body/></w:document>",
        f"<w:document><w:body>{paragraph('x')}</w:document>",
    ],
)
def test_locate_body_rejects_missing_body(markup: str) -> None:
    with pytest.raises(MalformedDocumentError):
        locate_body(markup)


def test_select_keeps_request_order() -> None:
    result = select_body_pages(_three_pages(), [3, 1])
    expected_inner = paragraph("three") + PAGE_BREAK + paragraph("one")
    assert locate_body(result).inner == expected_inner


def test_select_repeats_duplicates() -> None:
    result = select_body_pages(_three_pages(), [2, 2])
    assert locate_body(result).inner == paragraph("two") + PAGE_BREAK + paragraph("two")


def test_select_skips_out_of_range_pages() -> None:
    result = select_body_pages(_three_pages(), [0, 2, 99, -1])
    assert locate_body(result).inner == paragraph("two")


def test_select_only_invalid_pages_raises() -> None:
    with pytest.raises(EmptySelectionError) as excinfo:
        select_body_pages(_three_pages(), [0, 4, 99])
    assert excinfo.value.pages == [0, 4, 99]
    assert excinfo.value.available == 3


def test_select_page_one_without_markers_returns_body_unchanged() -> None:
    markup = document_xml(paragraph("a") + paragraph("b"))
    assert select_body_pages(markup, [1]) == markup


def test_separate_selections_concatenate_to_combined_selection() -> None:
    markup = document_xml(paragraph("first") + PAGE_BREAK + paragraph("second"))
    first = locate_body(select_body_pages(markup, [1])).inner
    second = locate_body(select_body_pages(markup, [2])).inner
    combined = locate_body(select_body_pages(markup, [1, 2])).inner
    assert first + PAGE_BREAK + second == combined


def test_select_with_custom_prefix_emits_matching_marker() -> None:
    ns = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
    marker = '<ns0:p><ns0:r><ns0:br ns0:type="page"/></ns0:r></ns0:p>'
    para = "<ns0:p><ns0:r><ns0:t>{}</ns0:t></ns0:r></ns0:p>"
    markup = (
        f'<ns0:document xmlns:ns0="{ns}"><ns0:body>'
        f'{para.format("a")}{marker}{para.format("b")}'
        "</ns0:body></ns0:document>"
    )
    result = select_body_pages(markup, [2, 1])
    assert para.format("b") + marker + para.format("a") in result


def test_default_namespace_document_with_prefixed_binding() -> None:
    para = "<p><r><t>{}</t></r></p>"
    markup = (
        f'<document xmlns="{WORDPROCESSING_NS}" xmlns:w="{WORDPROCESSING_NS}"><body>'
        f'{para.format("a")}<p><r><br w:type="page"/></r></p>{para.format("b")}'
        "</body></document>"
    )

    assert locate_body(markup).segments() == [para.format("a"), para.format("b")]
    result = select_body_pages(markup, [2, 1])
    assert locate_body(result).inner == para.format("b") + PAGE_BREAK + para.format("a")


def test_default_namespace_only_document_gets_declared_marker() -> None:
    para = "<p><r><t>{}</t></r></p>"
    marker = f'<p><r><br xmlns:w="{WORDPROCESSING_NS}" w:type="page"/></r></p>'
    markup = (
        f'<document xmlns="{WORDPROCESSING_NS}"><body>'
        f'{para.format("a")}{marker}{para.format("b")}'
        "</body></document>"
    )

    assert Namespaces.from_markup(markup).marker() == marker
    result = select_body_pages(markup, [1, 1])
    assert locate_body(result).inner == para.format("a") + marker + para.format("a")


def test_unqualified_type_attribute_is_not_a_page_break() -> None:
    inner = paragraph("a") + '<w:p><w:r><w:br type="page"/></w:r></w:p>' + paragraph("b")
    assert split_segments(inner) == [inner]


def test_marker_requires_a_prefix() -> None:
    with pytest.raises(ValueError):
        page_break_marker("")
