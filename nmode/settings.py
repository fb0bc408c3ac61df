"""Reproduction and visualisation settings."""

from __future__ import annotations

from nmode.parsing import ParseNode

TAG_REPRODUCTION = "reproduction"
TAG_VISUALISATION = "visualisation"


class ReproductionConfig(ParseNode):
    """The <reproduction> section: population size, tournament and crossover."""

    TAG = TAG_REPRODUCTION

    def __init__(self, parent=None):
        super().__init__(parent)
        self.population_size = 100
        self.logging_size = 100
        self.crossover_probability = 0.0
        self.tournament_percentage = 0.1

    def add(self, element):
        if element.closing(self.TAG):
            return self.parent

        if element.opening("crossover"):
            self.crossover_probability = element.real(
                "probability", self.crossover_probability
            )

        if element.opening("population"):
            self.population_size = element.integer("size", self.population_size)
            self.tournament_percentage = element.real(
                "tournament", self.tournament_percentage
            )
            self.logging_size = element.integer("log", self.logging_size)
            self.logging_size = min(self.population_size, self.logging_size)

        return self


class VisualisationConfig(ParseNode):
    """The <visualisation> section: vertical offset of the drawn network."""

    TAG = TAG_VISUALISATION

    def __init__(self, parent=None):
        super().__init__(parent)
        self.offset = 0

    def add(self, element):
        if element.closing(self.TAG):
            return self.parent
        if element.opening("offset"):
            self.offset = element.integer("value", self.offset)
        return self