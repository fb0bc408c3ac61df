"""Event-driven dispatch of XML elements to configuration nodes."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

_TRUE_WORDS = frozenset({"true", "1"})
_FALSE_WORDS = frozenset({"false", "0"})


@dataclass(frozen=True)
class ParseElement:
    """One opening or closing XML tag together with its attributes."""

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    is_opening: bool = True

    def opening(self, tag):
        """Return True if this is the opening of ``tag``."""
        return self.is_opening and self.name == tag

    def closing(self, tag):
        """Return True if this is the closing of ``tag``."""
        return not self.is_opening and self.name == tag

    def text(self, key, default=None):
        """Return the attribute as a string, or ``default`` if absent."""
        return self.attributes.get(key, default)

    def integer(self, key, default=None):
        """Return the attribute as an int, or ``default`` if absent."""
        raw = self.attributes.get(key)
        if raw is None:
            return default
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise ValueError(
                f"attribute {key!r} of <{self.name}> is not an integer: {raw!r}"
            ) from exc

    def real(self, key, default=None):
        """Return the attribute as a float, or ``default`` if absent."""
        raw = self.attributes.get(key)
        if raw is None:
            return default
        try:
            return float(raw.strip())
        except ValueError as exc:
            raise ValueError(
                f"attribute {key!r} of <{self.name}> is not a number: {raw!r}"
            ) from exc

    def flag(self, key, default=None):
        """Return the attribute as a bool, or ``default`` if absent."""
        raw = self.attributes.get(key)
        if raw is None:
            return default
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(
            f"attribute {key!r} of <{self.name}> is not a boolean: {raw!r}"
        )


class ParseNode:
    """A node of the configuration tree that consumes parse elements.

    ``add`` returns the node that receives the next element: itself to keep
    reading, a child to descend, or its parent when its own tag closes.
    """

    TAG = ""

    def __init__(self, parent=None):
        self.parent = parent

    def add(self, element):
        if element.closing(self.TAG):
            return self.parent
        return self


class Dispatcher:
    """Routes a stream of parse elements to the node currently in charge."""

    def __init__(self, root):
        self.root = root
        self.current = root

    def feed(self, element):
        if self.current is None:
            raise ValueError(
                f"element <{element.name}> arrived after the root node was closed"
            )
        self.current = self.current.add(element)

    def feed_all(self, elements):
        for element in elements:
            self.feed(element)
        return self.root


def _walk(node: ET.Element) -> Iterator[ParseElement]:
    yield ParseElement(node.tag, dict(node.attrib), True)
    for child in node:
        yield from _walk(child)
    yield ParseElement(node.tag, {}, False)


def elements_from_xml(text):
    """Yield opening and closing elements of an XML document in document order."""
    root = ET.fromstring(text)
    yield from _walk(root)