"""Mutation settings for nodes and edges of the evolved networks."""

from __future__ import annotations

import enum

from nmode.parsing import ParseNode

TAG_MUTATION = "mutation"
TAG_MUTATION_NODE = "node"
TAG_MUTATION_EDGE = "edge"


class EdgeAddMode(enum.IntEnum):
    """How candidate edges are chosen when an edge is added."""

    UNIFORM = 10001
    DISTANCE = 10002


_MODE_NAMES = {
    "uniform": EdgeAddMode.UNIFORM,
    "distance": EdgeAddMode.DISTANCE,
}


class _OperatorSettings(ParseNode):
    """Probabilities and limits shared by node and edge mutation."""

    _FIELDS = (
        "modify_probability",
        "modify_max_value",
        "modify_delta",
        "add_probability",
        "add_max_value",
        "del_probability",
    )

    def __init__(self, parent=None):
        super().__init__(parent)
        self.modify_probability = 0.1
        self.modify_max_value = 4.0
        self.modify_delta = 0.5
        self.add_probability = 0.01
        self.add_max_value = 1.0
        self.del_probability = 0.1

    def _read_real(self, element, key, attribute):
        """Set ``attribute`` from ``key`` if present; return whether it changed."""
        old = getattr(self, attribute)
        new = element.real(key, old)
        setattr(self, attribute, new)
        return new != old

    def _read_operators(self, element):
        changed = False
        if element.opening("modify"):
            changed |= self._read_real(element, "probability", "modify_probability")
            changed |= self._read_real(element, "maximum", "modify_max_value")
            changed |= self._read_real(element, "delta", "modify_delta")
        if element.opening("add"):
            changed |= self._read_real(element, "probability", "add_probability")
            changed |= self._read_real(element, "maximum", "add_max_value")
        if element.opening("delete"):
            changed |= self._read_real(element, "probability", "del_probability")
        return changed

    def _copy_into(self, target):
        for name in self._FIELDS:
            setattr(target, name, getattr(self, name))
        return target


class NodeMutationConfig(_OperatorSettings):
    """The <node> part of <mutation>."""

    TAG = TAG_MUTATION_NODE

    def __init__(self, parent=None):
        super().__init__(parent)
        self.changed = False

    def add(self, element):
        if element.closing(self.TAG):
            return self.parent
        if element.opening(self.TAG):
            self.changed = False
        self.changed |= self._read_operators(element)
        return self

    def copy(self):
        return self._copy_into(NodeMutationConfig())

    def __str__(self):
        return "\n".join(
            [
                "Node mutation parameters: ",
                f"  Mod probability {self.modify_probability}",
                f"  Mod max value:  {self.modify_max_value}",
                f"  Mod delta:      {self.modify_delta}",
                f"  Add prob:       {self.add_probability}",
                f"  Add max value:  {self.add_max_value}",
                f"  Del prob:       {self.del_probability}",
                "",
            ]
        )


class EdgeMutationConfig(_OperatorSettings):
    """The <edge> part of <mutation>."""

    TAG = TAG_MUTATION_EDGE

    def __init__(self, parent=None):
        super().__init__(parent)
        self.min_distance = 1.0
        self.mode = EdgeAddMode.DISTANCE

    @property
    def changed(self):
        """Edge settings never mark the configuration as changed."""
        return False

    def add(self, element):
        if element.closing(self.TAG):
            return self.parent
        self._read_operators(element)
        if element.opening("add"):
            self.min_distance = element.real("minDistance", self.min_distance)
            mode = _MODE_NAMES.get(element.text("mode", ""))
            if mode is not None:
                self.mode = mode
        return self

    def copy(self):
        duplicate = self._copy_into(EdgeMutationConfig())
        duplicate.min_distance = self.min_distance
        duplicate.mode = self.mode
        return duplicate

    def __str__(self):
        return "\n".join(
            [
                "Edge mutation parameters: ",
                f"  Mod probability   {self.modify_probability}",
                f"  Mod max value:    {self.modify_max_value}",
                f"  Mod delta:        {self.modify_delta}",
                f"  Add prob:         {self.add_probability}",
                f"  Add max value:    {self.add_max_value}",
                f"  Add mode:         {int(self.mode)}",
                f"  Del prob:         {self.del_probability}",
                "",
            ]
        )


class MutationConfig(ParseNode):
    """The <mutation> section, holding node and edge mutation settings."""

    TAG = TAG_MUTATION

    def __init__(self, parent=None, node=None, edge=None):
        super().__init__(parent)
        self.node = node
        self.edge = edge
        self.changed = False

    def add(self, element):
        if element.closing(self.TAG):
            if self.node is None or self.edge is None:
                raise ValueError("<mutation> requires both a <node> and an <edge> section")
            self.changed = self.node.changed or self.edge.changed
            return self.parent

        if element.opening(self.TAG):
            self.node = None
            self.edge = None

        if element.opening(TAG_MUTATION_NODE):
            self.node = NodeMutationConfig(self)
            return self.node.add(element)

        if element.opening(TAG_MUTATION_EDGE):
            self.edge = EdgeMutationConfig(self)
            return self.edge.add(element)

        return self

    def copy(self):
        return MutationConfig(
            None,
            self.node.copy() if self.node is not None else None,
            self.edge.copy() if self.edge is not None else None,
        )