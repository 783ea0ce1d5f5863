"""Constants for SVG RDF metadata.

Element aliases (the prefix spellings accepted when reading), the namespaces
written by the serializer, and the Creative Commons rights table.
"""

# Accepted spellings when reading. Names are matched literally because the
# parser does not resolve namespace prefixes.
METADATA_ALIASES = ("metadata", "svg:metadata")
RDF_ALIASES = ("rdf:RDF", "RDF")
WORK_ALIASES = ("cc:Work", "Work", "ns:Work")
AGENT_ALIASES = ("cc:Agent", "Agent", "ns:Agent")
LICENSE_ALIASES = ("cc:license", "license", "ns:license")
BAG_ALIASES = ("rdf:Bag", "Bag")
LIST_ITEM_ALIASES = ("rdf:li", "li")

ABOUT_ATTRS = ("rdf:about", "about")
RESOURCE_ATTRS = ("rdf:resource", "resource")

DC_TITLE = ("dc:title",)
DC_DESCRIPTION = ("dc:description",)
DC_SUBJECT = ("dc:subject",)
DC_CREATOR = ("dc:creator",)
DC_RIGHTS = ("dc:rights",)
DC_PUBLISHER = ("dc:publisher",)
DC_DATE = ("dc:date",)
DC_LANGUAGE = ("dc:language",)

# Namespaces declared on the generated rdf:RDF element
CC_NAMESPACE = "http://web.resource.org/cc/"
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"
RDF_NAMESPACE = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"

SVG_MIME_TYPE = "image/svg+xml"
STILL_IMAGE_TYPE = "http://purl.org/dc/dcmitype/StillImage"

DEFAULT_LANGUAGE = "en"
DEFAULT_KEYWORD = "unsorted"

PUBLIC_DOMAIN_LABEL = "Public Domain"
PUBLIC_DOMAIN_URI = "http://web.resource.org/cc/PublicDomain"

_CC = "http://web.resource.org/cc/"
REPRODUCTION = _CC + "Reproduction"
DISTRIBUTION = _CC + "Distribution"
DERIVATIVE_WORKS = _CC + "DerivativeWorks"
NOTICE = _CC + "Notice"
ATTRIBUTION = _CC + "Attribution"
SHARE_ALIKE = _CC + "ShareAlike"
COMMERCIAL_USE = _CC + "CommercialUse"

# License URI -> ordered (relation, resource) rows of its rights block.
# Rows are emitted verbatim, in this order.
LICENSE_RIGHTS = {
    PUBLIC_DOMAIN_URI: (
        ("permits", REPRODUCTION),
        ("permits", DISTRIBUTION),
        ("permits", DERIVATIVE_WORKS),
    ),
    "http://creativecommons.org/licenses/by/2.0/": (
        ("permits", REPRODUCTION),
        ("permits", DISTRIBUTION),
        ("requires", NOTICE),
        ("requires", ATTRIBUTION),
        ("permits", DERIVATIVE_WORKS),
    ),
    "http://creativecommons.org/licenses/by-sa/2.0/": (
        ("permits", REPRODUCTION),
        ("permits", DISTRIBUTION),
        ("requires", NOTICE),
        ("requires", ATTRIBUTION),
        ("permits", DERIVATIVE_WORKS),
        ("requires", SHARE_ALIKE),
    ),
    "http://creativecommons.org/licenses/by-nd/2.0/": (
        ("permits", REPRODUCTION),
        ("permits", DISTRIBUTION),
        ("requires", NOTICE),
        ("requires", ATTRIBUTION),
    ),
    "http://creativecommons.org/licenses/by-nc/2.0/": (
        ("permits", REPRODUCTION),
        ("permits", DISTRIBUTION),
        ("requires", NOTICE),
        ("requires", ATTRIBUTION),
        ("prohibits", COMMERCIAL_USE),
        ("permits", DERIVATIVE_WORKS),
    ),
    "http://creativecommons.org/licenses/by-nc-nd/2.0/": (
        ("permits", REPRODUCTION),
        ("permits", DISTRIBUTION),
        ("requires", NOTICE),
        ("requires", ATTRIBUTION),
        ("prohibits", COMMERCIAL_USE),
    ),
    "http://creativecommons.org/licenses/by-nc-sa/2.0/": (
        ("permits", REPRODUCTION),
        ("permits", DISTRIBUTION),
        ("requires", NOTICE),
        ("requires", ATTRIBUTION),
        ("prohibits", COMMERCIAL_USE),
        ("permits", DERIVATIVE_WORKS),
        ("requires", SHARE_ALIKE),
    ),
}
