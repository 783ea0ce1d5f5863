"""Simplified XML node model.

The parser collaborator (xmltree.py) turns a document into a tree of three
node kinds:

- Text: character data
- Comment: an XML comment inside the root element
- Element: a name, an ordered attribute mapping and child nodes

Element names keep the literal prefix spelling used in the document
("rdf:RDF", "RDF", "svg:metadata", ...). No namespace resolution is done, so
lookups are made against alias tuples from constants.py.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Union


@dataclass
class Text:
    """Character data."""

    value: str


@dataclass
class Comment:
    """XML comment."""

    value: str


@dataclass
class Element:
    """XML element with attributes and children."""

    name: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def elements(self) -> Iterator[Element]:
        """Iterate over child elements, skipping text and comments."""
        for child in self.children:
            if isinstance(child, Element):
                yield child

    def child(self, aliases: Sequence[str]) -> Optional[Element]:
        """Return the first child element whose name is one of aliases."""
        for element in self.elements():
            if element.name in aliases:
                return element
        return None

    def children_named(self, aliases: Sequence[str]) -> list[Element]:
        """Return all child elements whose name is one of aliases."""
        return [e for e in self.elements() if e.name in aliases]

    def attr(self, aliases: Sequence[str]) -> str:
        """Return the first attribute value found under one of aliases."""
        for name in aliases:
            if name in self.attrs:
                return self.attrs[name]
        return ""

    def append(self, node: Node) -> Node:
        self.children.append(node)
        return node

    def copy(self) -> Element:
        """Deep copy of this subtree."""
        return copy.deepcopy(self)


Node = Union[Text, Comment, Element]


def text_content(node: Optional[Node]) -> str:
    """
    Extract the scalar value of a node.

    A field may be a bare text node or an element wrapping text plus
    attributes (xml:lang, rdf:datatype, ...). In both cases the text is the
    value; attributes and nested elements are ignored.

    Args:
        node: Node to read, or None for an absent field

    Returns:
        Stripped text, or "" when there is none
    """
    if node is None:
        return ""
    if isinstance(node, Text):
        return node.value.strip()
    if isinstance(node, Element):
        parts = [c.value for c in node.children if isinstance(c, Text)]
        return "".join(parts).strip()
    return ""
