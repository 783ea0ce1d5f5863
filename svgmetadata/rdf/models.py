"""Metadata record for SVG RDF metadata.

One MetadataRecord describes one SVG document. It is filled either by
parse() from a source document or field by field for programmatic
construction, then turned back into RDF with to_rdf() or into a complete
document with to_svg().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from svgmetadata.core.exceptions import SVGMetadataError
from svgmetadata.core.logging import get_logger
from svgmetadata.rdf.constants import DEFAULT_LANGUAGE
from svgmetadata.rdf.nodes import Element

logger = get_logger(__name__)

DEFAULT_FETCH_TIMEOUT_SEC = 30

# Fields replaced wholesale by a successful parse()
EXTRACTED_FIELDS = (
    "title",
    "description",
    "subject",
    "creator",
    "creator_url",
    "owner",
    "owner_url",
    "publisher",
    "publisher_url",
    "license",
    "license_date",
    "language",
    "date",
    "about_url",
    "keywords",
    "retained_document",
    "retained_preamble",
)


@dataclass
class MetadataRecord:
    """Bibliographic and licensing metadata of one SVG document."""

    title: str = ""
    description: str = ""
    subject: str = ""

    # Agents
    creator: str = ""
    creator_url: str = ""
    owner: str = ""
    owner_url: str = ""
    publisher: str = ""
    publisher_url: str = ""

    # Rights
    license: str = ""
    license_date: str = ""

    language: str = DEFAULT_LANGUAGE
    date: str = ""
    about_url: str = ""
    keywords: set[str] = field(default_factory=set)

    # State
    error_message: str = ""
    strict_validation: bool = False
    retained_document: Optional[Element] = field(
        default=None, repr=False, compare=False
    )
    retained_preamble: str = field(default="", repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.keywords, set):
            self.keywords = set(self.keywords)

    @property
    def author(self) -> str:
        """Alias of creator."""
        return self.creator

    @author.setter
    def author(self, value: str) -> None:
        self.creator = value

    @property
    def is_retained(self) -> bool:
        """True when the source document was kept for to_svg()."""
        return self.retained_document is not None

    # ------------------------------------------------------------------
    # Keywords
    # ------------------------------------------------------------------

    def add_keyword(self, *keywords: str) -> None:
        """
        Add one or more keywords.

            record.add_keyword("Fruit")
            record.add_keyword("Fruit", "Vegetable", "Animal", "Mineral")
        """
        self.keywords.update(k for k in keywords if k)

    def remove_keyword(self, keyword: str) -> bool:
        """Remove a keyword. Returns True if it was present."""
        if keyword in self.keywords:
            self.keywords.discard(keyword)
            return True
        return False

    def has_keyword(self, keyword: str) -> bool:
        return keyword in self.keywords

    def sorted_keywords(self) -> list[str]:
        return sorted(self.keywords)

    # ------------------------------------------------------------------
    # Comparison and views
    # ------------------------------------------------------------------

    def compare(self, other: "MetadataRecord") -> bool:
        """
        Check whether two records describe the same work.

        Two records are equivalent when they have exactly the same creator
        (author), title and license. Keywords and every other field may
        differ.
        """
        return (
            self.creator == other.creator
            and self.title == other.title
            and self.license == other.license
        )

    def to_text(self) -> str:
        """
        Plain text summary, suitable for debugging and emails.

        Returns:
            Title, author and license on one line each, followed by the
            keywords with one keyword per continuation line
        """
        keywords = "\n          ".join(self.sorted_keywords())
        return (
            f"Title:    {self.title}\n"
            f"Author:   {self.creator}\n"
            f"License:  {self.license}\n"
            f"Keywords: {keywords}\n"
        )

    def to_dict(self) -> dict[str, Any]:
        """Field values without the retained document."""
        return {
            "title": self.title,
            "description": self.description,
            "subject": self.subject,
            "creator": self.creator,
            "creator_url": self.creator_url,
            "owner": self.owner,
            "owner_url": self.owner_url,
            "publisher": self.publisher,
            "publisher_url": self.publisher_url,
            "license": self.license,
            "license_date": self.license_date,
            "language": self.language,
            "date": self.date,
            "about_url": self.about_url,
            "keywords": self.sorted_keywords(),
        }

    # ------------------------------------------------------------------
    # Extraction and serialization
    # ------------------------------------------------------------------

    def parse(
        self,
        source: Any,
        retain_xml: bool = False,
        *,
        timeout: int = DEFAULT_FETCH_TIMEOUT_SEC,
        default_language: str = DEFAULT_LANGUAGE,
    ) -> "MetadataRecord":
        """
        Load metadata from an SVG document.

            record.parse("drawing.svg")
            record.parse(svg_text, retain_xml=True)

        The call is all-or-nothing: on failure no field changes,
        error_message describes the problem and the exception propagates.

        Args:
            source: Path, SVG text, bytes, open stream or http/ftp URL
            retain_xml: Keep the parsed document for to_svg()
            timeout: Seconds to wait for URL sources
            default_language: dc:language used when the document has none

        Returns:
            self

        Raises:
            SVGMetadataError: Subclass describing why extraction failed
        """
        # Lazy import to avoid circular dependency
        from svgmetadata.rdf.extractor import extract_from_source

        try:
            extracted = extract_from_source(
                source,
                strict=self.strict_validation,
                retain_xml=retain_xml,
                timeout=timeout,
                default_language=default_language,
            )
        except SVGMetadataError as e:
            self.error_message = str(e)
            logger.warning(
                "Metadata extraction failed", error_code=e.error_code, error=e
            )
            raise

        for name in EXTRACTED_FIELDS:
            setattr(self, name, getattr(extracted, name))
        self.error_message = ""
        return self

    def to_rdf(self) -> str:
        """Serialize the record as an RDF/XML <metadata> fragment."""
        from svgmetadata.rdf.serializer import serialize_rdf

        return serialize_rdf(self)

    def to_svg(self) -> str:
        """
        Regenerate the retained document with this record's metadata.

        Raises:
            NotRetainedError: If parse() was not called with retain_xml=True
        """
        from svgmetadata.rdf.splicer import splice_document

        return splice_document(self)

    @classmethod
    def from_fields(cls, author: str = "", **fields: Any) -> "MetadataRecord":
        """
        Build a record from explicit field values.

        Accepts author as an alias of creator:

            record = MetadataRecord.from_fields(
                title="Apple", author="Bris Geek", keywords=["Fruit"]
            )
        """
        if author and not fields.get("creator"):
            fields["creator"] = author
        return cls(**fields)
