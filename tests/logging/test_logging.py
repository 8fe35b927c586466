"""Package logging and the engine's DEBUG output."""

import logging
from io import StringIO

import pytest

from spforest.algorithms.spf import ShortestPathEngine
from spforest.config import WeightConfig
from spforest.errors import MissingAttributeError
from spforest.logging import (
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)

COST = WeightConfig("cost")


@pytest.fixture
def captured():
    """Install a StringIO handler on the package logger for one test."""
    reset_logging()
    stream = StringIO()
    setup_root_logger(
        level=logging.INFO,
        format_string="%(levelname)s %(name)s %(message)s",
        handler=logging.StreamHandler(stream),
    )
    yield stream
    reset_logging()


def test_engine_is_silent_at_info(captured, graph3):
    ShortestPathEngine(graph3, COST, "A")
    assert captured.getvalue() == ""


def test_engine_run_summary_at_debug(captured, graph3):
    enable_debug_logging()
    ShortestPathEngine(graph3, COST, "A")
    lines = captured.getvalue().splitlines()
    assert lines == [
        "DEBUG spforest.algorithms.spf SPF from 'A' started "
        "(attribute=cost, element=EDGE)",
        # 12 edges, none into an already settled node; 7 of them are ties
        "DEBUG spforest.algorithms.spf SPF from 'A' settled 6 nodes, "
        "relaxed 12 steps, recorded 7 ties",
    ]


def test_engine_summary_unweighted(captured, square1):
    enable_debug_logging()
    ShortestPathEngine(square1, None, "A")
    out = captured.getvalue()
    assert "(attribute=None, element=EDGE)" in out
    assert "settled 4 nodes, relaxed 4 steps, recorded 1 ties" in out


def test_engine_reports_abort_reason(captured, square1):
    enable_debug_logging()
    with pytest.raises(MissingAttributeError):
        ShortestPathEngine(square1, WeightConfig("latency"), "A")
    out = captured.getvalue()
    assert "SPF from 'A' aborted: Attribute 'latency' is missing on edge '0'." in out
    assert "settled" not in out


def test_level_applies_to_existing_and_new_loggers(captured):
    early = get_logger("spforest.algorithms.spf")
    assert early.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert early.getEffectiveLevel() == logging.WARNING
    assert get_logger("spforest.graph.strict").getEffectiveLevel() == logging.WARNING


def test_setup_is_idempotent(captured):
    package_logger = logging.getLogger("spforest")
    setup_root_logger(level=logging.DEBUG, handler=logging.StreamHandler(StringIO()))
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.INFO

    get_logger("spforest.test").info("kept")
    assert "INFO spforest.test kept" in captured.getvalue()
