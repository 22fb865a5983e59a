"""Read-only view over lxml documents.

Wraps matched elements in XNode so the scheme parser only ever sees plain
mappings and lists. Attribute values are copied when the node is wrapped;
nothing here holds on to mutable document state except for child traversal.

Errors are not caught: malformed XML raises XMLSyntaxError and a malformed
path expression raises an XPathError.
"""

from __future__ import annotations

from collections.abc import Mapping
from os import PathLike
from types import MappingProxyType

from lxml import etree

_EMPTY: Mapping[str, str] = MappingProxyType({})


class XNode:
    """A matched document node: tag, attributes and direct children."""

    def __init__(self, element: etree._Element):
        self._element = element
        # Comments and processing instructions have a non-string tag
        self.is_element = isinstance(element.tag, str)
        self.tag: str | None = element.tag if self.is_element else None
        self.attributes: Mapping[str, str] = MappingProxyType(dict(element.attrib)) if self.is_element else _EMPTY

    def __repr__(self) -> str:
        return f'XNode({self.tag!r}, {dict(self.attributes)!r})'

    def attribute(self, name: str) -> str | None:
        """Value of a named attribute, or None if absent."""
        return self.attributes.get(name)

    def children(self, tag: str | None = None, elements_only: bool = True) -> list[XNode]:
        """Direct children in document order, optionally filtered by tag and node kind."""
        result = []
        for child in self._element:
            node = XNode(child)
            if elements_only and not node.is_element:
                continue
            if tag is not None and node.tag != tag:
                continue
            result.append(node)
        return result

    def first_child(self, tag: str) -> XNode | None:
        return next(iter(self.children(tag)), None)


def parse_document(text: str | bytes) -> etree._ElementTree:
    """Parse an XML document held in memory."""
    if isinstance(text, str):
        # lxml refuses str input that carries an encoding declaration, and would
        # otherwise decode the bytes with whatever encoding that declaration names
        return etree.ElementTree(etree.fromstring(text.encode('utf-8'), etree.XMLParser(encoding='utf-8')))
    return etree.ElementTree(etree.fromstring(text))


def load_document(path: str | PathLike) -> etree._ElementTree:
    """Parse an XML document from disk."""
    return etree.parse(str(path))


def query(document: etree._ElementTree, path: str) -> list[XNode]:
    """Evaluate an XPath expression and wrap the matched nodes.

    Returns an empty list when nothing matches.
    """
    result = document.xpath(path)
    if not isinstance(result, list):
        raise TypeError(f'XPath {path!r} does not select nodes (got {type(result).__name__})')
    nodes = []
    for item in result:
        if not etree.iselement(item):
            raise TypeError(f'XPath {path!r} selected a non-element value: {item!r}')
        nodes.append(XNode(item))
    return nodes
