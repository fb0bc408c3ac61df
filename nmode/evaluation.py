"""Evaluation settings: lifetime, generations, logging, costs and parameters."""

from __future__ import annotations

import re

from nmode.parsing import ParseNode

TAG_EVALUATION = "evaluation"
TAG_EVALUATION_PARAMETER = "parameter"

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_REAL_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class EvaluationParameter(ParseNode):
    """A named string parameter handed to the evaluation module."""

    TAG = TAG_EVALUATION_PARAMETER

    def __init__(self, parent=None, name="", value=""):
        super().__init__(parent)
        self.name = name
        self.value = value

    def add(self, element):
        if element.closing(self.TAG):
            return self.parent
        if element.opening(self.TAG):
            self.name = element.text("name", self.name)
            self.value = element.text("value", self.value)
        return self

    def int_value(self):
        """Leading integer of the value, 0 if there is none."""
        match = _INT_PREFIX.match(self.value)
        return int(match.group()) if match else 0

    def real_value(self):
        """Leading number of the value, 0.0 if there is none."""
        match = _REAL_PREFIX.match(self.value)
        return float(match.group()) if match else 0.0

    def bool_value(self):
        return self.value == "true"

    def copy(self):
        return EvaluationParameter(None, self.name, self.value)

    def reset_to(self, other):
        self.name = other.name
        self.value = other.value

    def __repr__(self):
        return f"EvaluationParameter(name={self.name!r}, value={self.value!r})"


class EvaluationConfig(ParseNode):
    """The <evaluation> section of the configuration.

    ``parameters`` maps parameter names to their string values; it is filled
    when the section closes.
    """

    TAG = TAG_EVALUATION

    def __init__(self, parent=None):
        super().__init__(parent)
        self.life_time = -1
        self.generations = -1
        self.iterations = 1
        self.node_cost = 0.0
        self.edge_cost = 0.0
        self.module = "unknown"
        self.log_file_type = "pdf"
        self.keep_logs = False
        self.log_iterations = False
        self.changed = False
        self.parameters: dict[str, str] = {}
        self._collected: list[EvaluationParameter] = []

    def add(self, element):
        if element.closing(self.TAG):
            for parameter in self._collected:
                self.parameters[parameter.name] = parameter.value
            return self.parent

        if element.opening(self.TAG):
            self.changed = False
            self.module = element.text("module", self.module)

        if element.opening("lifetime"):
            life_time = element.integer("iterations", self.life_time)
            self.changed |= life_time != self.life_time
            self.life_time = life_time
            self._collected.clear()
            self.parameters.clear()

        if element.opening("generations"):
            self.generations = element.integer("iterations", self.generations)

        if element.opening("log"):
            self.log_file_type = element.text("filetype", self.log_file_type)
            self.keep_logs = element.flag("keep", self.keep_logs)

        if element.opening("console"):
            self.log_iterations = element.flag("iterations", self.log_iterations)

        if element.opening("cost"):
            self.node_cost = element.real("node", self.node_cost)
            self.edge_cost = element.real("edge", self.edge_cost)

        if element.opening(TAG_EVALUATION_PARAMETER):
            parameter = EvaluationParameter(self)
            self._collected.append(parameter)
            return parameter.add(element)

        return self