"""Tests for the node tree parser and renderer."""

import pytest

from svgmetadata.core.exceptions import XMLParseError
from svgmetadata.rdf.nodes import Comment, Element, Text, text_content
from svgmetadata.rdf.xmltree import (
    escape_entities,
    parse_document,
    parse_fragment,
    render,
)


class TestEscapeEntities:
    """Tests for escape_entities."""

    def test_escapes_all_five_characters(self) -> None:
        """Test that & < > \" ' become entity references."""
        assert escape_entities("<a href=\"x\">Tom & Jerry's</a>") == (
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&apos;s&lt;/a&gt;"
        )

    def test_ampersand_escaped_first(self) -> None:
        """Test that existing entities are not left half-escaped."""
        assert escape_entities("&lt;") == "&amp;lt;"

    def test_plain_text_unchanged(self) -> None:
        assert escape_entities("Apple") == "Apple"


class TestParseDocument:
    """Tests for parse_document."""

    def test_prefixed_names_kept_literally(self) -> None:
        """Test that names keep their prefix without namespace processing."""
        parsed = parse_document(b"<svg><rdf:RDF><cc:Work /></rdf:RDF></svg>")

        rdf = parsed.root.child(["rdf:RDF"])
        assert rdf is not None
        assert rdf.child(["cc:Work"]) is not None

    def test_attributes_parsed(self) -> None:
        parsed = parse_document(b'<a rdf:about="http://example.com/" x="1" />')

        assert parsed.root.attrs == {"rdf:about": "http://example.com/", "x": "1"}

    def test_preamble_captured(self) -> None:
        """Test that text before the root element is kept verbatim."""
        data = (
            b'<?xml version="1.0"?>\n'
            b"<!-- Created with Inkscape -->\n"
            b"<svg><g /></svg>"
        )

        parsed = parse_document(data)

        assert parsed.preamble == (
            '<?xml version="1.0"?>\n<!-- Created with Inkscape -->\n'
        )
        assert parsed.root.name == "svg"

    def test_no_preamble(self) -> None:
        assert parse_document(b"<svg />").preamble == ""

    def test_byte_order_mark_dropped_from_preamble(self) -> None:
        parsed = parse_document(b'\xef\xbb\xbf<?xml version="1.0"?>\n<svg />')

        assert parsed.preamble == '<?xml version="1.0"?>\n'

    def test_declared_encoding_used_for_bytes(self) -> None:
        data = '<?xml version="1.0" encoding="ISO-8859-1"?>\n<t>Caf\xe9</t>'.encode(
            "latin-1"
        )

        parsed = parse_document(data)

        assert text_content(parsed.root) == "Caf\xe9"

    def test_encoding_override_beats_declaration(self) -> None:
        """Test that re-encoded text is read as UTF-8 whatever it declares."""
        text = '<?xml version="1.0" encoding="ISO-8859-1"?>\n<t>Caf\xe9</t>'

        parsed = parse_document(text.encode("utf-8"), encoding="utf-8")

        assert text_content(parsed.root) == "Caf\xe9"
        assert parsed.preamble == '<?xml version="1.0" encoding="ISO-8859-1"?>\n'

    def test_comments_inside_root_kept(self) -> None:
        parsed = parse_document(b"<svg><!-- note --></svg>")

        assert parsed.root.children == [Comment(" note ")]

    def test_malformed_document_raises(self) -> None:
        """Test that unbalanced tags raise XMLParseError with a position."""
        with pytest.raises(XMLParseError) as exc_info:
            parse_document(b"<svg>\n<metadata></svg>")

        assert exc_info.value.line == 2
        assert exc_info.value.error_code == "SVGM-EXT-001"

    def test_empty_document_raises(self) -> None:
        with pytest.raises(XMLParseError):
            parse_document(b"")

    def test_parse_fragment_returns_root(self) -> None:
        root = parse_fragment("<metadata>\n  <rdf:RDF />\n</metadata>\n")

        assert root.name == "metadata"
        assert [e.name for e in root.elements()] == ["rdf:RDF"]


class TestRender:
    """Tests for render."""

    def test_raw_render_keeps_text(self) -> None:
        """Test that raw mode reproduces the parsed content."""
        source = '<svg x="1">\n  <title>A &amp; B</title>\n  <g />\n</svg>'

        assert render(parse_fragment(source)) == source

    def test_pretty_render_indents_element_children(self) -> None:
        root = Element(
            "a",
            children=[Text("\n    "), Element("b", children=[Text("x")]), Element("c")],
        )

        assert render(root, indent="  ") == "<a>\n  <b>x</b>\n  <c />\n</a>"

    def test_pretty_render_nested_depth(self) -> None:
        root = Element("a", children=[Element("b", children=[Element("c")])])

        assert render(root, indent="  ") == "<a>\n  <b>\n    <c />\n  </b>\n</a>"

    def test_attribute_values_escaped(self) -> None:
        element = Element("a", attrs={"title": 'say "hi"\n& bye'})

        assert render(element) == '<a title="say &quot;hi&quot;&#10;&amp; bye" />'

    def test_text_escaped(self) -> None:
        element = Element("dc:title", children=[Text("<script>")])

        assert render(element) == "<dc:title>&lt;script&gt;</dc:title>"

    def test_comment_rendered(self) -> None:
        element = Element("g", children=[Comment(" layer ")])

        assert render(element) == "<g><!-- layer --></g>"


class TestTextContent:
    """Tests for text_content."""

    def test_none_is_empty(self) -> None:
        assert text_content(None) == ""

    def test_text_node_stripped(self) -> None:
        assert text_content(Text("  Apple \n")) == "Apple"

    def test_element_text_ignores_attributes_and_children(self) -> None:
        """Test that a text-plus-attributes element yields its text."""
        element = parse_fragment(
            '<dc:title xml:lang="en"> Apple <b>bold</b></dc:title>'
        )

        assert text_content(element) == "Apple"

    def test_element_without_text_is_empty(self) -> None:
        assert text_content(Element("dc:title")) == ""
