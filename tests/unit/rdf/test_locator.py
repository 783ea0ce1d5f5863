"""Tests for locating the rdf:RDF block."""

import pytest

from svgmetadata.core.exceptions import MissingMetadataWrapperError, MissingRdfRootError
from svgmetadata.rdf.locator import find_metadata_element, locate_rdf
from svgmetadata.rdf.xmltree import parse_fragment


class TestLocateRdf:
    """Tests for locate_rdf."""

    def test_wrapped_rdf(self) -> None:
        root = parse_fragment("<svg><metadata><rdf:RDF /></metadata></svg>")

        located = locate_rdf(root)

        assert located.rdf.name == "rdf:RDF"
        assert located.is_wrapped
        assert located.wrapper.name == "metadata"

    def test_prefixed_wrapper_and_unprefixed_rdf(self) -> None:
        """Test the svg:metadata / RDF spelling produced by some exporters."""
        root = parse_fragment("<svg:svg><svg:metadata><RDF /></svg:metadata></svg:svg>")

        located = locate_rdf(root, strict=True)

        assert located.rdf.name == "RDF"
        assert located.wrapper.name == "svg:metadata"

    def test_metadata_as_root(self) -> None:
        """Test that serializer output is itself a locatable document."""
        root = parse_fragment("<metadata><rdf:RDF /></metadata>")

        located = locate_rdf(root, strict=True)

        assert located.is_wrapped

    def test_bare_rdf_accepted_when_not_strict(self) -> None:
        root = parse_fragment("<svg><rdf:RDF /></svg>")

        located = locate_rdf(root)

        assert located.rdf.name == "rdf:RDF"
        assert not located.is_wrapped

    def test_bare_rdf_rejected_when_strict(self) -> None:
        root = parse_fragment("<svg><rdf:RDF /></svg>")

        with pytest.raises(MissingMetadataWrapperError):
            locate_rdf(root, strict=True)

    def test_rdf_as_root(self) -> None:
        root = parse_fragment("<rdf:RDF><cc:Work /></rdf:RDF>")

        assert locate_rdf(root).rdf is root

    def test_empty_wrapper_falls_back_to_bare_rdf(self) -> None:
        root = parse_fragment("<svg><metadata /><rdf:RDF /></svg>")

        located = locate_rdf(root)

        assert not located.is_wrapped

    def test_no_rdf_raises(self) -> None:
        root = parse_fragment("<svg><g /></svg>")

        with pytest.raises(MissingRdfRootError):
            locate_rdf(root)

    def test_wrapper_without_rdf_raises(self) -> None:
        root = parse_fragment("<svg><metadata><title /></metadata></svg>")

        with pytest.raises(MissingRdfRootError, match="metadata"):
            locate_rdf(root)

    def test_nested_rdf_not_searched(self) -> None:
        """Test that RDF deeper than the root's children is ignored."""
        root = parse_fragment("<svg><g><rdf:RDF /></g></svg>")

        with pytest.raises(MissingRdfRootError):
            locate_rdf(root)


class TestFindMetadataElement:
    """Tests for find_metadata_element."""

    def test_child(self) -> None:
        root = parse_fragment("<svg><g /><metadata /></svg>")

        assert find_metadata_element(root).name == "metadata"

    def test_absent(self) -> None:
        assert find_metadata_element(parse_fragment("<svg />")) is None
