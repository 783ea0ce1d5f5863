"""Metadata extractor for SVG documents.

Walks the cc:Work node of a located RDF block and maps it onto a
MetadataRecord:

    cc:Work/@rdf:about                      -> about_url
    dc:title, dc:description, dc:date       -> title, description, date
    dc:language                             -> language (default "en")
    dc:creator/cc:Agent/dc:title, @about    -> creator, creator_url
    dc:rights/cc:Agent/dc:title, @about     -> owner, owner_url
    dc:publisher/cc:Agent/dc:title, @about  -> publisher, publisher_url
    cc:license/@rdf:resource                -> license
    cc:license/dc:date                      -> license_date
    dc:subject/rdf:Bag/rdf:li               -> keywords
"""

from typing import Any, Optional

from svgmetadata.core.exceptions import MissingWorkElementError
from svgmetadata.core.logging import get_logger
from svgmetadata.rdf.constants import (
    ABOUT_ATTRS,
    AGENT_ALIASES,
    BAG_ALIASES,
    DC_CREATOR,
    DC_DATE,
    DC_DESCRIPTION,
    DC_LANGUAGE,
    DC_PUBLISHER,
    DC_RIGHTS,
    DC_SUBJECT,
    DC_TITLE,
    DEFAULT_KEYWORD,
    DEFAULT_LANGUAGE,
    LICENSE_ALIASES,
    LIST_ITEM_ALIASES,
    RESOURCE_ATTRS,
    WORK_ALIASES,
)
from svgmetadata.rdf.locator import locate_rdf
from svgmetadata.rdf.models import MetadataRecord
from svgmetadata.rdf.nodes import Element, text_content
from svgmetadata.rdf.sources import resolve_source
from svgmetadata.rdf.xmltree import ParsedDocument, parse_document

logger = get_logger(__name__)

# Priority order used when an agent field is empty
AGENT_FIELDS = ("creator", "owner", "publisher")


def find_work(rdf: Element) -> Element:
    """
    Return the cc:Work element of an RDF block.

    Raises:
        MissingWorkElementError: If the RDF block has no Work element
    """
    work = rdf.child(WORK_ALIASES)
    if work is None:
        raise MissingWorkElementError(
            f"No cc:Work element found in the {rdf.name} element"
        )
    return work


def _field_text(work: Element, aliases: tuple[str, ...]) -> str:
    return text_content(work.child(aliases))


def read_agent(node: Optional[Element]) -> tuple[str, str]:
    """
    Read an agent's name and URL from a dc:creator-like element.

    The element normally wraps a cc:Agent. Without one, the element itself is
    read as the agent, and without a dc:title its own text is the name.

    Returns:
        (name, url), both "" when absent
    """
    if node is None:
        return "", ""

    agent = node.child(AGENT_ALIASES)
    if agent is None:
        agent = node

    title = agent.child(DC_TITLE)
    name = text_content(title) if title is not None else text_content(agent)
    return name, agent.attr(ABOUT_ATTRS)


def read_keywords(subject: Optional[Element]) -> Optional[set[str]]:
    """
    Decompose dc:subject/rdf:Bag/rdf:li into a keyword set.

    Returns:
        The keyword set, or None when the subject holds no Bag with items
    """
    if subject is None:
        return None
    bag = subject.child(BAG_ALIASES)
    if bag is None:
        return None

    keywords = {text_content(li) for li in bag.children_named(LIST_ITEM_ALIASES)}
    keywords.discard("")
    return keywords or None


def apply_agent_defaults(record: MetadataRecord) -> None:
    """
    Fill empty creator/owner/publisher fields from their siblings.

    Each empty field takes the first non-empty originally-extracted value in
    the order creator, owner, publisher. The _url fields follow the same
    rule on their own.
    """
    for suffix in ("", "_url"):
        names = [name + suffix for name in AGENT_FIELDS]
        original = {name: getattr(record, name) for name in names}
        for name in names:
            if original[name] != "":
                continue
            for other in names:
                if original[other] != "":
                    setattr(record, name, original[other])
                    break


def extract_fields(
    rdf: Element, default_language: str = DEFAULT_LANGUAGE
) -> MetadataRecord:
    """
    Build a MetadataRecord from a located RDF block.

    Missing leaf fields become "". Only a missing Work element is an error.

    Raises:
        MissingWorkElementError: If the RDF block has no Work element
    """
    work = find_work(rdf)
    record = MetadataRecord()

    record.about_url = work.attr(ABOUT_ATTRS)
    record.title = _field_text(work, DC_TITLE)
    record.description = _field_text(work, DC_DESCRIPTION)
    record.date = _field_text(work, DC_DATE)
    record.language = _field_text(work, DC_LANGUAGE) or default_language

    record.creator, record.creator_url = read_agent(work.child(DC_CREATOR))
    record.owner, record.owner_url = read_agent(work.child(DC_RIGHTS))
    record.publisher, record.publisher_url = read_agent(work.child(DC_PUBLISHER))

    license_node = work.child(LICENSE_ALIASES)
    if license_node is not None:
        record.license = license_node.attr(RESOURCE_ATTRS)
        record.license_date = _field_text(license_node, DC_DATE)

    subject = work.child(DC_SUBJECT)
    keywords = read_keywords(subject)
    if keywords is None:
        record.subject = text_content(subject)
        record.keywords = {DEFAULT_KEYWORD}
    else:
        record.subject = ""
        record.keywords = keywords

    apply_agent_defaults(record)
    return record


def extract_document(
    parsed: ParsedDocument,
    strict: bool = False,
    retain_xml: bool = False,
    default_language: str = DEFAULT_LANGUAGE,
) -> MetadataRecord:
    """
    Extract metadata from an already parsed document.

    Args:
        parsed: Parsed document
        strict: Require the <metadata> wrapper
        retain_xml: Keep the tree and preamble on the returned record
        default_language: dc:language used when the document has none

    Returns:
        Populated MetadataRecord
    """
    located = locate_rdf(parsed.root, strict=strict)
    record = extract_fields(located.rdf, default_language=default_language)
    record.strict_validation = strict

    if retain_xml:
        record.retained_document = parsed.root
        record.retained_preamble = parsed.preamble

    logger.debug(
        "Extracted metadata",
        title=record.title,
        keywords=len(record.keywords),
        retained=retain_xml,
    )
    return record


def extract_from_source(
    source: Any,
    strict: bool = False,
    retain_xml: bool = False,
    timeout: int = 30,
    default_language: str = DEFAULT_LANGUAGE,
) -> MetadataRecord:
    """
    Resolve, parse and extract a document in one step.

    Returns a fresh record; MetadataRecord.parse() copies it onto the
    caller's record only when every step succeeded.

    Raises:
        SVGMetadataError: Subclass for the step that failed
    """
    document = resolve_source(source, timeout=timeout)
    parsed = parse_document(document.content, encoding=document.encoding)
    return extract_document(
        parsed,
        strict=strict,
        retain_xml=retain_xml,
        default_language=default_language,
    )
