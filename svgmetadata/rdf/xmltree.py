"""XML parser and renderer for the simplified node tree.

Parsing uses expat without namespace processing, so element and attribute
names arrive exactly as spelled in the document and undeclared prefixes (which
real-world SVG exporters produce) do not make the document unreadable.

Rendering escapes every text and attribute value through escape_entities(),
so builders never concatenate markup by hand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from xml.parsers import expat

from svgmetadata.core.exceptions import XMLParseError
from svgmetadata.core.logging import get_logger
from svgmetadata.rdf.nodes import Comment, Element, Node, Text

logger = get_logger(__name__)

_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

_ATTR_WHITESPACE = (
    ("\n", "&#10;"),
    ("\r", "&#13;"),
    ("\t", "&#9;"),
)


def escape_entities(text: str) -> str:
    """
    Replace the five XML special characters with entity references.

    Example:
        >>> escape_entities('</dc:title><script>')
        '&lt;/dc:title&gt;&lt;script&gt;'
    """
    for raw, entity in _ENTITIES:
        text = text.replace(raw, entity)
    return text


def _escape_attr(value: str) -> str:
    value = escape_entities(value)
    for raw, ref in _ATTR_WHITESPACE:
        value = value.replace(raw, ref)
    return value


@dataclass
class ParsedDocument:
    """Root element plus the verbatim text that preceded it."""

    root: Element
    preamble: str = ""


class _TreeBuilder:
    """Collects expat events into nodes."""

    def __init__(self, parser: "expat.XMLParserType") -> None:
        self._parser = parser
        self._stack: list[Element] = []
        self.root: Optional[Element] = None
        self.root_offset = 0

    def start(self, name: str, attrs: dict[str, str]) -> None:
        element = Element(name=name, attrs=dict(attrs))
        if self._stack:
            self._stack[-1].append(element)
        elif self.root is None:
            self.root = element
            self.root_offset = self._parser.CurrentByteIndex
        self._stack.append(element)

    def end(self, name: str) -> None:
        self._stack.pop()

    def data(self, text: str) -> None:
        # Character data outside the root element is not part of the tree
        if self._stack:
            self._stack[-1].append(Text(text))

    def comment(self, text: str) -> None:
        if self._stack:
            self._stack[-1].append(Comment(text))


def _decode(data: bytes, encoding: Optional[str] = None) -> str:
    if encoding is not None:
        return data.decode(encoding)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def parse_document(data: bytes, encoding: Optional[str] = None) -> ParsedDocument:
    """
    Parse a complete XML document.

    Args:
        data: Raw document bytes
        encoding: Encoding of data, overriding the XML declaration. Set it
            when data is text that was already decoded and re-encoded.

    Returns:
        ParsedDocument with the root element and pre-root preamble

    Raises:
        XMLParseError: If the document is not well-formed
    """
    parser = expat.ParserCreate(encoding=encoding)
    parser.buffer_text = True
    builder = _TreeBuilder(parser)
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    parser.CommentHandler = builder.comment

    try:
        parser.Parse(data, True)
    except expat.ExpatError as e:
        raise XMLParseError(
            f"Error parsing document: {expat.ErrorString(e.code)} "
            f"(line {e.lineno}, column {e.offset})",
            line=e.lineno,
            column=e.offset,
        ) from e

    if builder.root is None:
        raise XMLParseError("Error parsing document: no root element")

    preamble = _decode(data[: builder.root_offset], encoding).lstrip("\ufeff")
    logger.debug("Parsed document", root=builder.root.name, preamble_len=len(preamble))
    return ParsedDocument(root=builder.root, preamble=preamble)


def parse_fragment(text: str) -> Element:
    """Parse a standalone fragment such as serializer output."""
    return parse_document(text.encode("utf-8"), encoding="utf-8").root


def render(node: Node, indent: Optional[str] = None) -> str:
    """
    Render a node tree as XML text.

    With indent=None the tree is written as-is, keeping every text node
    (whitespace included). With an indent string, whitespace-only text is
    dropped and element-only content is laid out one child per line; elements
    holding text stay on a single line.

    Args:
        node: Root of the subtree to render
        indent: Indentation unit for pretty printing, or None

    Returns:
        XML text (no trailing newline)
    """
    parts: list[str] = []
    _render(node, parts, indent, 0)
    return "".join(parts)


def _render(node: Node, parts: list[str], indent: Optional[str], depth: int) -> None:
    if isinstance(node, Text):
        parts.append(escape_entities(node.value))
        return
    if isinstance(node, Comment):
        parts.append(f"<!--{node.value}-->")
        return

    attrs = "".join(f' {k}="{_escape_attr(v)}"' for k, v in node.attrs.items())
    children = node.children
    if indent is not None:
        children = [
            c for c in children if not (isinstance(c, Text) and not c.value.strip())
        ]

    if not children:
        parts.append(f"<{node.name}{attrs} />")
        return

    parts.append(f"<{node.name}{attrs}>")
    if indent is not None and not any(isinstance(c, Text) for c in children):
        for child in children:
            parts.append("\n" + indent * (depth + 1))
            _render(child, parts, indent, depth + 1)
        parts.append("\n" + indent * depth)
    else:
        for child in children:
            _render(child, parts, None, depth + 1)
    parts.append(f"</{node.name}>")
