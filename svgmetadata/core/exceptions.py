"""
Exception Hierarchy for svgmetadata.

All exceptions raised by the extraction, serialization and splicing code
inherit from SVGMetadataError so callers (for example a batch validator that
skips broken files) can catch a single type.

Each exception carries:
- error_code: Unique identifier (e.g., "SVGM-EXT-002")
- why_it_happened: Explanation of the root cause
- how_to_fix: Actionable steps to resolve the issue

Usage
-----
    from svgmetadata.core.exceptions import SVGMetadataError

    try:
        record.parse("drawing.svg")
    except SVGMetadataError as e:
        logger.warning(f"Skipping drawing.svg: {e}")

Exception Hierarchy
-------------------
    SVGMetadataError (base)
    ├── SourceError
    │   ├── MissingInputError
    │   ├── SourceNotFoundError
    │   ├── SourceReadError
    │   └── SourceFetchError
    ├── ExtractionError
    │   ├── XMLParseError
    │   ├── MissingRdfRootError
    │   ├── MissingMetadataWrapperError
    │   └── MissingWorkElementError
    └── NotRetainedError
"""

from typing import List, Optional


class SVGMetadataError(Exception):
    """
    Base exception for all svgmetadata errors.

    Example
    -------
        try:
            record.parse(path)
        except SVGMetadataError as e:
            print(f"[{e.error_code}] {e}")
            print(f"Fix: {e.how_to_fix}")
    """

    error_code: str = "SVGM-ERR-000"
    why_it_happened: str = "An unexpected error occurred"
    how_to_fix: List[str] = ["Check the error message for details"]

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        why_it_happened: Optional[str] = None,
        how_to_fix: Optional[List[str]] = None,
    ) -> None:
        """Initialize SVGMetadataError with helpful information.

        Args:
            message: Human-readable error message
            error_code: Unique identifier (e.g., "SVGM-SRC-001")
            why_it_happened: Explanation of root cause
            how_to_fix: List of actionable fix suggestions
        """
        super().__init__(message)

        if error_code is not None:
            self.error_code = error_code
        if why_it_happened is not None:
            self.why_it_happened = why_it_happened
        if how_to_fix is not None:
            self.how_to_fix = how_to_fix

    @property
    def user_message(self) -> str:
        """Get the user-friendly error message."""
        return str(self)


# ============================================================================
# Source Exceptions
# ============================================================================


class SourceError(SVGMetadataError):
    """
    Base exception for problems obtaining the input document.
    """

    error_code = "SVGM-SRC-000"
    why_it_happened = "The input document could not be obtained"
    how_to_fix = ["Check the path, URL or stream passed to parse()"]


class MissingInputError(SourceError):
    """
    Raised when parse() is called without any source.
    """

    error_code = "SVGM-SRC-001"
    why_it_happened = "No filename, text, stream or URL was given to parse"
    how_to_fix = ["Pass a file path, SVG text, an open file or a URL"]


class SourceNotFoundError(SourceError):
    """
    Raised when a filesystem path does not exist.
    """

    error_code = "SVGM-SRC-002"
    why_it_happened = (
        "The source was treated as a filesystem path because it contains no "
        "newline and no http/ftp scheme, but no file exists at that path"
    )
    how_to_fix = [
        "Check that the file path is correct",
        "Pass literal SVG text as a multi-line string or as bytes",
    ]


class SourceReadError(SourceError):
    """
    Raised when an existing file cannot be read.
    """

    error_code = "SVGM-SRC-004"
    why_it_happened = "The file exists but the operating system refused to read it"
    how_to_fix = [
        "Check the file permissions",
        "Make sure the path is a regular file and not locked by another program",
    ]


class SourceFetchError(SourceError):
    """
    Raised when a remote document cannot be retrieved.
    """

    error_code = "SVGM-SRC-003"
    why_it_happened = "The HTTP or FTP request for the document failed"
    how_to_fix = [
        "Verify the URL opens in a browser",
        "Increase fetch_timeout_sec in svgmetadata.yaml",
    ]


# ============================================================================
# Extraction Exceptions
# ============================================================================


class ExtractionError(SVGMetadataError):
    """
    Base exception for documents that parse but carry no usable metadata.
    """

    error_code = "SVGM-EXT-000"
    why_it_happened = "The document does not contain recognizable RDF metadata"
    how_to_fix = ["Open the file in Inkscape and fill in Document Metadata"]


class XMLParseError(ExtractionError):
    """
    Raised when the document is not well-formed XML.

    Attributes
    ----------
    line : int, optional
        Line reported by the XML parser
    column : int, optional
        Column reported by the XML parser
    """

    error_code = "SVGM-EXT-001"
    why_it_happened = "The XML parser rejected the document as malformed"
    how_to_fix = [
        "Check the file for unescaped '&' or '<' characters",
        "Make sure the file is a complete SVG document",
    ]

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        **kwargs,
    ) -> None:
        super().__init__(message, **kwargs)
        self.line = line
        self.column = column


class MissingRdfRootError(ExtractionError):
    """
    Raised when no rdf:RDF element is present.
    """

    error_code = "SVGM-EXT-002"
    why_it_happened = (
        "Neither a <metadata> element containing rdf:RDF nor a bare rdf:RDF "
        "element was found under the document root"
    )
    how_to_fix = [
        "Add metadata in Inkscape via File > Document Metadata",
        "Use the 'annotate' command to generate a metadata block",
    ]


class MissingMetadataWrapperError(ExtractionError):
    """
    Raised in strict mode when rdf:RDF is not wrapped in <metadata>.
    """

    error_code = "SVGM-EXT-003"
    why_it_happened = (
        "Strict validation requires the RDF block to sit inside a "
        "<metadata> element, but it was found directly under the root"
    )
    how_to_fix = [
        "Wrap the rdf:RDF element in <metadata>...</metadata>",
        "Disable strict validation to accept bare RDF",
    ]


class MissingWorkElementError(ExtractionError):
    """
    Raised when the RDF block has no Work description.
    """

    error_code = "SVGM-EXT-004"
    why_it_happened = "The rdf:RDF element does not contain a cc:Work element"
    how_to_fix = ["Describe the artwork with a cc:Work element inside rdf:RDF"]


# ============================================================================
# Splicing Exceptions
# ============================================================================


class NotRetainedError(SVGMetadataError):
    """
    Raised when a full document is requested but none was retained.
    """

    error_code = "SVGM-SPL-001"
    why_it_happened = (
        "The original document was not kept, so there is nothing to splice "
        "the regenerated metadata into"
    )
    how_to_fix = ["Call parse(source, retain_xml=True) before to_svg()"]
