"""Command line interface for svgmetadata.

Commands:
- show: Print a document's metadata as text or JSON
- validate: Check a batch of documents for title, creator and license
- compare: Check whether two documents describe the same work
- rdf: Print the regenerated RDF block
- annotate: Edit metadata and splice it back into the document
"""
