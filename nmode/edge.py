"""A weighted connection between two nodes of a module."""

from __future__ import annotations

from nmode.parsing import ParseNode

TAG_MODULE_EDGE = "edge"


class Edge(ParseNode):
    """An edge read from <edge source=... destination=... weight=...>.

    ``source`` and ``destination`` are node labels; ``source_node`` and
    ``destination_node`` hold the linked node objects once they are known.
    """

    TAG = TAG_MODULE_EDGE

    def __init__(
        self,
        parent=None,
        source="",
        destination="",
        weight=0.0,
        source_node=None,
        destination_node=None,
    ):
        super().__init__(parent)
        self.source = source
        self.destination = destination
        self.weight = weight
        self.source_node = source_node
        self.destination_node = destination_node

    def add(self, element):
        if element.closing(self.TAG):
            return self.parent
        if element.opening(self.TAG):
            self.source = element.text("source", self.source)
            self.destination = element.text("destination", self.destination)
            self.weight = element.real("weight", self.weight)
        return self

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self.weight == other.weight
            and self.source == other.source
            and self.destination == other.destination
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"Edge(source={self.source!r}, destination={self.destination!r}, "
            f"weight={self.weight!r})"
        )