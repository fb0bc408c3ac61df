import pytest

from nmode.parsing import Dispatcher, ParseElement, elements_from_xml
from nmode.settings import ReproductionConfig, VisualisationConfig


def _read(config, text):
    return Dispatcher(config).feed_all(elements_from_xml(text))


def test_reproduction_defaults():
    config = ReproductionConfig()
    assert config.population_size == 100
    assert config.logging_size == 100
    assert config.crossover_probability == 0.0
    assert config.tournament_percentage == 0.1


def test_reproduction_is_read():
    config = _read(
        ReproductionConfig(),
        '<reproduction><population size="40" tournament="0.3" log="20"/>'
        '<crossover probability="0.7"/></reproduction>',
    )
    assert config.population_size == 40
    assert config.tournament_percentage == 0.3
    assert config.logging_size == 20
    assert config.crossover_probability == 0.7


def test_logging_size_is_capped_by_population():
    config = _read(
        ReproductionConfig(),
        '<reproduction><population size="50" tournament="0.2" log="80"/>'
        "</reproduction>",
    )
    assert config.logging_size == config.population_size == 50


def test_reproduction_rejects_bad_size():
    with pytest.raises(ValueError):
        _read(ReproductionConfig(), '<reproduction><population size="many"/></reproduction>')


def test_reproduction_closing_returns_parent():
    parent = object()
    config = ReproductionConfig(parent)
    assert config.add(ParseElement("reproduction", {}, False)) is parent
    assert config.add(ParseElement("crossover", {"probability": "0.5"}, True)) is config


def test_visualisation_offset():
    assert VisualisationConfig().offset == 0
    config = _read(VisualisationConfig(), '<visualisation><offset value="3"/></visualisation>')
    assert config.offset == 3


def test_visualisation_without_offset_keeps_default():
    config = _read(VisualisationConfig(), "<visualisation/>")
    assert config.offset == 0


def test_visualisation_closing_returns_parent():
    parent = object()
    config = VisualisationConfig(parent)
    assert config.add(ParseElement("visualisation", {}, False)) is parent