"""RDF/XML serializer for MetadataRecord.

Builds the <metadata> block as a node tree and renders it with
xmltree.render(), which escapes every interpolated value. Output shape:

    <metadata>
      <rdf:RDF xmlns="http://web.resource.org/cc/" xmlns:dc=... xmlns:rdf=...>
        <Work rdf:about="...">
          <dc:title>...</dc:title>
          ...
          <license rdf:resource="...">
            <dc:date>...</dc:date>
          </license>
          <dc:language>en</dc:language>
        </Work>
        <License rdf:about="...">
          <permits rdf:resource="http://web.resource.org/cc/Reproduction" />
          ...
        </License>
      </rdf:RDF>
    </metadata>
"""

from typing import Optional

from svgmetadata.rdf.constants import (
    CC_NAMESPACE,
    DC_NAMESPACE,
    DEFAULT_LANGUAGE,
    LICENSE_RIGHTS,
    PUBLIC_DOMAIN_LABEL,
    PUBLIC_DOMAIN_URI,
    RDF_NAMESPACE,
    STILL_IMAGE_TYPE,
    SVG_MIME_TYPE,
)
from svgmetadata.rdf.models import MetadataRecord
from svgmetadata.rdf.nodes import Element, Text
from svgmetadata.rdf.xmltree import render

INDENT = "  "


def normalize_license(license_value: str) -> str:
    """Map the "Public Domain" label to its canonical URI."""
    if license_value == PUBLIC_DOMAIN_LABEL:
        return PUBLIC_DOMAIN_URI
    return license_value


def _text_element(name: str, value: str, attrs: Optional[dict] = None) -> Element:
    element = Element(name=name, attrs=dict(attrs or {}))
    if value:
        element.append(Text(value))
    return element


def _agent_element(name: str, agent_name: str, url: str) -> Element:
    attrs = {"rdf:about": url} if url else {}
    agent = Element(name="Agent", attrs=attrs)
    agent.append(_text_element("dc:title", agent_name))
    return Element(name=name, children=[agent])


def _subject_element(keywords: list[str]) -> Element:
    bag = Element(name="rdf:Bag")
    for keyword in keywords:
        bag.append(_text_element("rdf:li", keyword))
    return Element(name="dc:subject", children=[bag])


def build_license_block(license_uri: str) -> Optional[Element]:
    """
    Build the rights block for a known license.

    Returns:
        License element, or None for licenses outside the fixed table
    """
    rows = LICENSE_RIGHTS.get(license_uri)
    if rows is None:
        return None
    block = Element(name="License", attrs={"rdf:about": license_uri})
    for relation, resource in rows:
        block.append(Element(name=relation, attrs={"rdf:resource": resource}))
    return block


def build_work(record: MetadataRecord, license_uri: str) -> Element:
    """Build the Work element describing the artwork."""
    work = Element(name="Work", attrs={"rdf:about": record.about_url})
    work.append(_text_element("dc:title", record.title))
    work.append(_text_element("dc:description", record.description))
    work.append(_subject_element(record.sorted_keywords()))
    work.append(_agent_element("dc:publisher", record.publisher, record.publisher_url))
    work.append(_agent_element("dc:creator", record.creator, record.creator_url))
    work.append(_agent_element("dc:rights", record.owner, record.owner_url))
    work.append(_text_element("dc:date", record.date))
    work.append(_text_element("dc:format", SVG_MIME_TYPE))
    work.append(Element(name="dc:type", attrs={"rdf:resource": STILL_IMAGE_TYPE}))

    license_element = Element(name="license", attrs={"rdf:resource": license_uri})
    license_element.append(_text_element("dc:date", record.license_date))
    work.append(license_element)

    work.append(_text_element("dc:language", record.language or DEFAULT_LANGUAGE))
    return work


def build_metadata(record: MetadataRecord) -> Element:
    """Build the complete <metadata> element for a record."""
    license_uri = normalize_license(record.license)

    rdf = Element(
        name="rdf:RDF",
        attrs={
            "xmlns": CC_NAMESPACE,
            "xmlns:dc": DC_NAMESPACE,
            "xmlns:rdf": RDF_NAMESPACE,
        },
    )
    rdf.append(build_work(record, license_uri))

    rights = build_license_block(license_uri)
    if rights is not None:
        rdf.append(rights)

    return Element(name="metadata", children=[rdf])


def serialize_rdf(record: MetadataRecord) -> str:
    """
    Render a record as an RDF/XML fragment.

    Never fails: unset fields render as empty elements.

    Returns:
        Newline-terminated <metadata> fragment
    """
    return render(build_metadata(record), indent=INDENT) + "\n"
