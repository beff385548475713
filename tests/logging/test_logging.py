"""Tests for package logging."""

import logging
import random

import pytest

from pathgraph.algorithms.dijkstra import compute
from pathgraph.config import GeneratorConfig
from pathgraph.generate import generate
from pathgraph.logging import ROOT_LOGGER_NAME, get_logger, set_level


@pytest.fixture(autouse=True)
def info_level():
    set_level(logging.INFO)
    yield
    set_level(logging.INFO)


def _messages(caplog, logger_name):
    return [r.getMessage() for r in caplog.records if r.name == logger_name]


def test_module_loggers_share_one_handler():
    first = get_logger("pathgraph.generate")
    second = get_logger("pathgraph.algorithms.dijkstra")

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert first.parent is root_logger
    assert len(root_logger.handlers) == 1
    assert not first.handlers and not second.handlers


def test_generator_summary_only_at_debug(caplog):
    generate(5, 7, rng=random.Random(0))
    assert _messages(caplog, "pathgraph.generate") == []

    set_level(logging.DEBUG)
    generate(5, 7, rng=random.Random(0))
    assert _messages(caplog, "pathgraph.generate") == [
        "Generated weighted graph: 5 vertices, 7 edges (4 spanning)"
    ]


def test_unweighted_generator_summary(caplog):
    set_level(logging.DEBUG)
    generate(3, 2, GeneratorConfig(weighted=False), rng=random.Random(1))
    (message,) = _messages(caplog, "pathgraph.generate")
    assert message == "Generated unweighted graph: 3 vertices, 2 edges (2 spanning)"


def test_unreachable_count_logged(caplog):
    set_level(logging.DEBUG)
    compute({"A": {"B": 1}, "B": {}, "C": {}, "D": {}}, "A")
    assert _messages(caplog, "pathgraph.algorithms.dijkstra") == [
        "Dijkstra from 'A': 2 vertices unreachable"
    ]


def test_fully_reachable_graph_logs_nothing(caplog):
    set_level(logging.DEBUG)
    compute({"A": {"B": 1}, "B": {"A": 1}}, "A")
    assert _messages(caplog, "pathgraph.algorithms.dijkstra") == []


def test_set_level_silences_package(caplog):
    set_level(logging.WARNING)
    compute({"A": {}, "B": {}}, "A")
    generate(4, 3, rng=random.Random(2))
    assert not [r for r in caplog.records if r.name.startswith("pathgraph")]
