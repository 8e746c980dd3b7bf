"""Structural view of WordprocessingML body markup.

The body of ``word/document.xml`` is tokenized rather than parsed into a tree
so that every byte outside the replaced region is written back untouched.
Only top-level body paragraphs are considered as page boundaries; a page
break paragraph nested inside a table cell or text box does not split the
document.

A page break marker is a paragraph whose only element content is a single
run whose only element content is a single ``<w:br>`` with ``w:type="page"``.
Attribute order, quoting, additional attributes and whitespace between the
elements are tolerated. Element and attribute names are compared by
namespace and local name, so the prefix a document uses does not matter.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Tuple

from .exceptions import MalformedDocumentError

__all__ = [
    "WORDPROCESSING_NS",
    "Token",
    "Namespaces",
    "BodyMarkup",
    "tokenize",
    "page_break_marker",
    "locate_body",
    "split_segments",
]

WORDPROCESSING_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

_TOKEN_RE = re.compile(
    r"<!--.*?-->"
    r"|<!\[CDATA\[.*?\]\]>"
    r"|<\?.*?\?>"
    r"|<(?:[^>\"']|\"[^\"]*\"|'[^']*')*>"
    r"|[^<]+"
    r"|<",
    re.DOTALL,
)
_ATTR_RE = re.compile(r"([^\s=/]+)\s*=\s*(?:\"([^\"]*)\"|'([^']*)')")
_NS_DECL_RE = re.compile(r"xmlns(?::([\w.\-]+))?\s*=\s*(?:\"([^\"]*)\"|'([^']*)')")

START = "start"
END = "end"
EMPTY = "empty"
TEXT = "text"
OTHER = "other"


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexical unit of the markup with its source offsets."""

    kind: str
    raw: str
    start: int
    end: int
    name: str = ""
    attrs: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_blank(self) -> bool:
        return self.kind == TEXT and not self.raw.strip()


def _classify(raw: str, start: int, end: int) -> Token:
    if not raw.startswith("<") or raw == "<":
        return Token(TEXT, raw, start, end)
    if raw.startswith(("<!", "<?")):
        return Token(OTHER, raw, start, end)

    body = raw[1:-1].strip()
    if body.startswith("/"):
        return Token(END, raw, start, end, name=body[1:].strip())

    kind = START
    if body.endswith("/"):
        kind = EMPTY
        body = body[:-1]
    parts = body.split(None, 1)
    if not parts:
        return Token(TEXT, raw, start, end)
    attrs = {}
    if len(parts) > 1:
        for match in _ATTR_RE.finditer(parts[1]):
            value = match.group(2) if match.group(2) is not None else match.group(3)
            attrs[match.group(1)] = value
    return Token(kind, raw, start, end, name=parts[0], attrs=attrs)


def tokenize(markup: str, start: int = 0, end: int | None = None) -> Iterator[Token]:
    """Yield the tokens of ``markup[start:end]`` with absolute offsets."""

    stop = len(markup) if end is None else end
    for match in _TOKEN_RE.finditer(markup, start, stop):
        yield _classify(match.group(0), match.start(), match.end())


def _qualify(prefix: str, local: str) -> str:
    return f"{prefix}:{local}" if prefix else local


def page_break_marker(prefix: str = "w") -> str:
    """Return the canonical page break paragraph for a WordprocessingML ``prefix``."""

    if not prefix:
        raise ValueError("page break attributes need a namespace prefix")
    p, r, br, type_attr = (_qualify(prefix, local) for local in ("p", "r", "br", "type"))
    return f'<{p}><{r}><{br} {type_attr}="page"/></{r}></{p}>'


@dataclass(frozen=True, slots=True)
class Namespaces:
    """Namespace bindings used to resolve qualified names in document markup.

    Document level bindings are the declarations on the root element;
    ``""`` is the default namespace. Declarations further down are applied
    per element with :meth:`declared`. A root that does not bind
    WordprocessingML is read as if ``w`` were bound to it.
    """

    bindings: Mapping[str, str] = field(default_factory=lambda: {"w": WORDPROCESSING_NS})

    @classmethod
    def from_markup(cls, markup: str) -> "Namespaces":
        root = next((token for token in tokenize(markup) if token.kind in (START, EMPTY)), None)
        bindings: Dict[str, str] = {}
        if root is not None:
            for match in _NS_DECL_RE.finditer(root.raw):
                uri = match.group(2) if match.group(2) is not None else match.group(3)
                bindings.setdefault(match.group(1) or "", uri)
        if WORDPROCESSING_NS not in bindings.values():
            return cls()
        return cls(bindings)

    def declared(self, attrs: Mapping[str, str]) -> "Namespaces":
        """Return the bindings in effect inside an element carrying ``attrs``."""

        local: Dict[str, str] = {}
        for name, value in attrs.items():
            if name == "xmlns":
                local[""] = value
            elif name.startswith("xmlns:"):
                local[name[len("xmlns:") :]] = value
        if not local:
            return self
        return Namespaces({**self.bindings, **local})

    def resolve(self, qname: str, *, attribute: bool = False) -> Tuple[str | None, str]:
        """Return ``(namespace, local name)`` for ``qname``.

        Unprefixed attributes belong to no namespace; unprefixed elements
        belong to the default namespace.
        """

        prefix, sep, local = qname.rpartition(":")
        if not sep:
            return (None if attribute else self.bindings.get("")), qname
        return self.bindings.get(prefix), local

    def is_wordprocessing(self, qname: str, local: str, *, attribute: bool = False) -> bool:
        return self.resolve(qname, attribute=attribute) == (WORDPROCESSING_NS, local)

    @property
    def prefix(self) -> str | None:
        """A prefix bound to WordprocessingML, ``w`` first; ``None`` if only the default is."""

        if self.bindings.get("w") == WORDPROCESSING_NS:
            return "w"
        for prefix, uri in self.bindings.items():
            if prefix and uri == WORDPROCESSING_NS:
                return prefix
        return None

    def marker(self) -> str:
        """Return a page break paragraph valid under these bindings."""

        prefix = self.prefix
        if prefix is not None:
            return page_break_marker(prefix)
        # Only the default namespace is bound; the type attribute still needs a prefix.
        return f'<p><r><br xmlns:w="{WORDPROCESSING_NS}" w:type="page"/></r></p>'


@dataclass(slots=True)
class BodyMarkup:
    """Document markup split around the inner content of the body element."""

    head: str
    inner: str
    tail: str
    namespaces: Namespaces = field(default_factory=Namespaces)

    def render(self, inner: str) -> str:
        """Return the full markup with the body content replaced by ``inner``."""

        return f"{self.head}{inner}{self.tail}"

    def segments(self) -> List[str]:
        return split_segments(self.inner, self.namespaces)


def locate_body(markup: str) -> BodyMarkup:
    """Find the body element and split the markup around its content.

    Raises:
        MalformedDocumentError: If no body element with a matching closing tag
            is present.
    """

    namespaces = Namespaces.from_markup(markup)

    opening: Token | None = None
    depth = 0
    for token in tokenize(markup):
        if token.kind not in (START, END, EMPTY) or not namespaces.is_wordprocessing(token.name, "body"):
            continue
        if opening is None:
            if token.kind == START:
                opening = token
                depth = 1
            elif token.kind == EMPTY:
                raise MalformedDocumentError("Invalid DOCX: <w:body> is empty")
            continue
        if token.kind == START:
            depth += 1
        elif token.kind == END:
            depth -= 1
            if depth == 0:
                return BodyMarkup(
                    head=markup[: opening.end],
                    inner=markup[opening.end : token.start],
                    tail=markup[token.start :],
                    namespaces=namespaces,
                )

    if opening is None:
        raise MalformedDocumentError("Invalid DOCX: <w:body> not found")
    raise MalformedDocumentError("Invalid DOCX: <w:body> is not terminated")


def _is_page_break_paragraph(tokens: List[Token], namespaces: Namespaces) -> bool:
    significant = [token for token in tokens if not token.is_blank]

    # <p> <r> <br/> </r> </p>  or  <p> <r> <br></br> </r> </p>
    if len(significant) == 6:
        br_token, br_end = significant[2], significant[3]
        if br_token.kind != START or br_end.kind != END or br_end.name != br_token.name:
            return False
        del significant[3]
    elif len(significant) == 5:
        br_token = significant[2]
        if br_token.kind != EMPTY:
            return False
    else:
        return False

    paragraph, opening_run, closing_run = significant[0], significant[1], significant[3]
    if opening_run.kind != START or closing_run.kind != END or closing_run.name != opening_run.name:
        return False

    in_paragraph = namespaces.declared(paragraph.attrs)
    in_run = in_paragraph.declared(opening_run.attrs)
    in_break = in_run.declared(br_token.attrs)
    if not in_run.is_wordprocessing(opening_run.name, "r"):
        return False
    if not in_break.is_wordprocessing(br_token.name, "br"):
        return False
    return any(
        value == "page" and in_break.is_wordprocessing(name, "type", attribute=True)
        for name, value in br_token.attrs.items()
    )


def split_segments(inner: str, namespaces: Namespaces | None = None) -> List[str]:
    """Split body content on top-level page break paragraphs.

    The marker paragraphs themselves are discarded. Content without markers
    yields a single segment.
    """

    namespaces = namespaces or Namespaces()
    segments: List[str] = []
    segment_start = 0
    depth = 0
    collecting: List[Token] | None = None
    paragraph_depth = 0

    def is_paragraph(token: Token) -> bool:
        return namespaces.is_wordprocessing(token.name, "p")

    for token in tokenize(inner):
        if collecting is not None:
            collecting.append(token)
            if token.kind == START and is_paragraph(token):
                paragraph_depth += 1
            elif token.kind == END and is_paragraph(token):
                paragraph_depth -= 1
                if paragraph_depth == 0:
                    if _is_page_break_paragraph(collecting, namespaces):
                        segments.append(inner[segment_start : collecting[0].start])
                        segment_start = token.end
                    collecting = None
                    depth -= 1
                    continue
            if token.kind == START:
                depth += 1
            elif token.kind == END:
                depth -= 1
            continue

        if token.kind == START:
            if depth == 0 and is_paragraph(token):
                collecting = [token]
                paragraph_depth = 1
            depth += 1
        elif token.kind == END:
            depth = max(depth - 1, 0)

    segments.append(inner[segment_start:])
    return segments
