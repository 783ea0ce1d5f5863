"""svgmetadata - RDF metadata for SVG clip art.

Reads, edits, compares and regenerates the title, author, license and keyword
metadata embedded in SVG files.
"""

__version__ = "0.2.0"

from svgmetadata.rdf.models import MetadataRecord

__all__ = ["__version__", "MetadataRecord"]
