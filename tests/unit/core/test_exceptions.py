"""Tests for the exception hierarchy."""

import pytest

from svgmetadata.core import exceptions
from svgmetadata.core.exceptions import (
    ExtractionError,
    MissingInputError,
    MissingMetadataWrapperError,
    MissingRdfRootError,
    MissingWorkElementError,
    NotRetainedError,
    SourceError,
    SourceFetchError,
    SourceNotFoundError,
    SourceReadError,
    SVGMetadataError,
    XMLParseError,
)

ALL_ERRORS = [
    MissingInputError,
    SourceNotFoundError,
    SourceReadError,
    SourceFetchError,
    XMLParseError,
    MissingRdfRootError,
    MissingMetadataWrapperError,
    MissingWorkElementError,
    NotRetainedError,
]


class TestHierarchy:
    """Tests for the exception classes."""

    @pytest.mark.parametrize("error_class", ALL_ERRORS)
    def test_all_inherit_from_base(self, error_class) -> None:
        assert issubclass(error_class, SVGMetadataError)

    def test_source_errors(self) -> None:
        for error_class in (
            MissingInputError,
            SourceNotFoundError,
            SourceReadError,
            SourceFetchError,
        ):
            assert issubclass(error_class, SourceError)

    def test_extraction_errors(self) -> None:
        for error_class in (
            XMLParseError,
            MissingRdfRootError,
            MissingMetadataWrapperError,
            MissingWorkElementError,
        ):
            assert issubclass(error_class, ExtractionError)

    def test_error_codes_unique(self) -> None:
        codes = [error_class.error_code for error_class in ALL_ERRORS]

        assert len(codes) == len(set(codes))

    @pytest.mark.parametrize("error_class", ALL_ERRORS)
    def test_help_text_present(self, error_class) -> None:
        assert error_class.why_it_happened
        assert error_class.how_to_fix


class TestSVGMetadataError:
    """Tests for the base exception."""

    def test_message(self) -> None:
        error = MissingRdfRootError("No rdf:RDF element found in document")

        assert str(error) == "No rdf:RDF element found in document"
        assert error.user_message == str(error)
        assert error.error_code == "SVGM-EXT-002"

    def test_overrides(self) -> None:
        error = SVGMetadataError(
            "boom", error_code="SVGM-X-1", why_it_happened="why", how_to_fix=["fix"]
        )

        assert error.error_code == "SVGM-X-1"
        assert error.why_it_happened == "why"
        assert error.how_to_fix == ["fix"]

    def test_overrides_do_not_leak_to_class(self) -> None:
        SourceFetchError("x", error_code="OTHER")

        assert exceptions.SourceFetchError.error_code == "SVGM-SRC-003"

    def test_xml_parse_error_position(self) -> None:
        error = XMLParseError("bad", line=3, column=7)

        assert (error.line, error.column) == (3, 7)
        assert isinstance(error, ExtractionError)
