"""Find the rdf:RDF block inside an SVG document tree.

SVG producers disagree on prefixes and on whether the RDF is wrapped in a
<metadata> element, so the accepted shapes are:

    <svg><metadata><rdf:RDF>...</rdf:RDF></metadata></svg>
    <svg><svg:metadata><RDF>...</RDF></svg:metadata></svg>
    <svg><rdf:RDF>...</rdf:RDF></svg>            (bare, rejected when strict)
    <metadata><rdf:RDF>...</rdf:RDF></metadata>  (serializer output)
"""

from dataclasses import dataclass
from typing import Optional

from svgmetadata.core.exceptions import MissingMetadataWrapperError, MissingRdfRootError
from svgmetadata.core.logging import get_logger
from svgmetadata.rdf.constants import METADATA_ALIASES, RDF_ALIASES
from svgmetadata.rdf.nodes import Element

logger = get_logger(__name__)


@dataclass
class LocatedRdf:
    """The RDF root and the <metadata> element wrapping it, if any."""

    rdf: Element
    wrapper: Optional[Element] = None

    @property
    def is_wrapped(self) -> bool:
        return self.wrapper is not None


def _self_or_child(root: Element, aliases: tuple[str, ...]) -> Optional[Element]:
    if root.name in aliases:
        return root
    return root.child(aliases)


def find_metadata_element(root: Element) -> Optional[Element]:
    """Return the <metadata> element (the root itself or a direct child)."""
    return _self_or_child(root, METADATA_ALIASES)


def locate_rdf(root: Element, strict: bool = False) -> LocatedRdf:
    """
    Locate the RDF root of a document.

    Args:
        root: Document root element
        strict: Require the RDF block to be wrapped in <metadata>

    Returns:
        LocatedRdf with the RDF element and its wrapper

    Raises:
        MissingRdfRootError: If no rdf:RDF element is found
        MissingMetadataWrapperError: If strict and the RDF is not wrapped
    """
    wrapper = find_metadata_element(root)
    rdf = wrapper.child(RDF_ALIASES) if wrapper is not None else None

    if rdf is not None:
        logger.debug("Found wrapped RDF", wrapper=wrapper.name, rdf=rdf.name)
        return LocatedRdf(rdf=rdf, wrapper=wrapper)

    rdf = _self_or_child(root, RDF_ALIASES)
    if rdf is None:
        if wrapper is not None:
            raise MissingRdfRootError(
                f"No rdf:RDF element found in the {wrapper.name} element"
            )
        raise MissingRdfRootError("No rdf:RDF element found in document")

    if strict:
        raise MissingMetadataWrapperError(
            "No metadata element found in document; "
            "strict validation requires rdf:RDF inside <metadata>"
        )

    logger.debug("Found bare RDF", rdf=rdf.name)
    return LocatedRdf(rdf=rdf)
