"""RDF metadata extraction and round-trip for SVG documents.

Extracts bibliographic and licensing metadata (title, creator, owner,
publisher, license, keywords, language, description) from the RDF block of
an SVG file, and regenerates that block after edits.

Supports:
- <metadata>-wrapped and bare rdf:RDF blocks, under several prefix spellings
- Strict validation that rejects RDF outside <metadata>
- Creative Commons 2.0 and Public Domain rights blocks
- Splicing regenerated metadata into the original document

Usage
-----
    from svgmetadata.rdf import MetadataRecord

    record = MetadataRecord()
    record.parse("drawing.svg", retain_xml=True)
    if not record.title:
        record.title = "Unknown"
    record.add_keyword("Fruit")
    print(record.to_text())
    new_svg = record.to_svg()
"""

# Models
from svgmetadata.rdf.models import MetadataRecord
from svgmetadata.rdf.nodes import Comment, Element, Text, text_content
from svgmetadata.rdf.pydantic_models import MetadataSummary

# Constants
from svgmetadata.rdf.constants import LICENSE_RIGHTS, PUBLIC_DOMAIN_URI

# Engine
from svgmetadata.rdf.extractor import (
    extract_document,
    extract_fields,
    extract_from_source,
)
from svgmetadata.rdf.locator import LocatedRdf, locate_rdf
from svgmetadata.rdf.serializer import serialize_rdf
from svgmetadata.rdf.splicer import splice_document
from svgmetadata.rdf.sources import SourceDocument, resolve_source
from svgmetadata.rdf.xmltree import ParsedDocument, escape_entities, parse_document, render

__all__ = [
    # Models
    "MetadataRecord",
    "MetadataSummary",
    "Element",
    "Text",
    "Comment",
    "text_content",
    # Constants
    "LICENSE_RIGHTS",
    "PUBLIC_DOMAIN_URI",
    # Functions
    "extract_document",
    "extract_fields",
    "extract_from_source",
    "LocatedRdf",
    "locate_rdf",
    "serialize_rdf",
    "splice_document",
    "SourceDocument",
    "resolve_source",
    "ParsedDocument",
    "escape_entities",
    "parse_document",
    "render",
]
