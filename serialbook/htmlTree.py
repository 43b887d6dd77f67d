"""
Read-only helpers over BeautifulSoup trees.

Element nodes are bs4 Tags and text nodes are NavigableStrings. Comments,
doctypes and other PreformattedString subclasses count as neither.
"""

from itertools import chain
from typing import Iterator, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement, PreformattedString


def parseDocument(markup: Union[str, bytes]) -> BeautifulSoup:
    """
    Parse page markup into a tree the extractor and discoverer can walk.

    html5lib builds the tree the way a browser does: optional end tags such
    as </p> are implied, and a repeated attribute keeps its first value.
    Class attributes stay plain strings, so getAttribute sees them as written.
    """
    return BeautifulSoup(markup, "html5lib", multi_valued_attributes=None)


def isElement(node: PageElement) -> bool:
    return isinstance(node, Tag)


def isText(node: PageElement) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def getAttribute(node: PageElement, key: str) -> str:
    """Return the attribute value, or an empty string when absent."""
    if not isinstance(node, Tag):
        return ""
    value = node.get(key)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return value


def extractText(node: PageElement) -> str:
    """Concatenate all descendant text in document order, unescaped."""
    if isText(node):
        return str(node)
    if isinstance(node, Tag):
        return "".join(str(child) for child in node.descendants if isText(child))
    return ""


def iterElements(root: PageElement) -> Iterator[Tag]:
    """Yield root and its descendant elements in pre-order, left to right."""
    if not isinstance(root, Tag):
        return iter(())
    return (node for node in chain([root], root.descendants) if isinstance(node, Tag))
