"""Splice regenerated metadata back into a retained SVG document."""

from svgmetadata.core.exceptions import NotRetainedError
from svgmetadata.core.logging import get_logger
from svgmetadata.rdf.constants import METADATA_ALIASES, RDF_ALIASES
from svgmetadata.rdf.models import MetadataRecord
from svgmetadata.rdf.nodes import Element, Text
from svgmetadata.rdf.serializer import serialize_rdf
from svgmetadata.rdf.xmltree import parse_fragment, render

logger = get_logger(__name__)


def _replacement_index(root: Element) -> int:
    """Index of the child to replace, or -1 when there is none."""
    for aliases in (METADATA_ALIASES, RDF_ALIASES):
        for index, child in enumerate(root.children):
            if isinstance(child, Element) and child.name in aliases:
                return index
    return -1


def replace_metadata(root: Element, metadata: Element) -> Element:
    """
    Return a copy of root with its metadata block replaced.

    The <metadata> child is replaced when present, keeping its name and
    attributes (Inkscape ids such as id="metadata7"); a bare rdf:RDF child is
    replaced otherwise. A document with neither gets the block inserted as
    its first child. A document that is itself a metadata or RDF block is
    replaced as a whole.
    """
    if root.name in METADATA_ALIASES or root.name in RDF_ALIASES:
        return metadata

    document = root.copy()
    index = _replacement_index(document)
    if index >= 0:
        old = document.children[index]
        if old.name in METADATA_ALIASES:
            metadata = Element(
                name=old.name,
                attrs={**old.attrs, **metadata.attrs},
                children=metadata.children,
            )
        document.children[index] = metadata
    else:
        document.children[0:0] = [Text("\n  "), metadata]
    return document


def splice_document(record: MetadataRecord) -> str:
    """
    Produce the retained document with freshly serialized metadata.

    The retained tree is left untouched, so this can be called again after
    further edits. Unrelated content keeps its structure; whitespace inside
    the regenerated block is not the original's.

    Raises:
        NotRetainedError: If no document was retained
    """
    if record.retained_document is None:
        raise NotRetainedError(
            "No XML document retained; call parse() with retain_xml=True"
        )

    metadata = parse_fragment(serialize_rdf(record))
    document = replace_metadata(record.retained_document, metadata)
    logger.debug("Spliced metadata", root=document.name)
    return record.retained_preamble + render(document) + "\n"
