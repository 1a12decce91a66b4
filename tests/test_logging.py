# File: tests/test_logging.py
"""
Test the package logger setup.
"""

import io
import logging

import pytest

from arrow_fem import AnalysisParams, analyze
from arrow_fem.logging_config import setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("arrow_fem")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


def test_default_level_is_warning(restore_logger):
    logger = setup_logging(stream=io.StringIO())
    assert logger is restore_logger
    assert logger.level == logging.WARNING


def test_repeated_setup_does_not_stack_handlers(restore_logger):
    setup_logging(stream=io.StringIO())
    logger = setup_logging(stream=io.StringIO())
    assert len(logger.handlers) == 1


def test_debug_traces_analysis_stages(restore_logger):
    stream = io.StringIO()
    setup_logging(logging.DEBUG, stream=stream)

    analyze(AnalysisParams(length_in=30.0, spine=500.0, velocity=75.0, power_stroke=0.7))

    text = stream.getvalue()
    assert "EI" in text
    assert "Axial stage" in text


def test_log_file_written(restore_logger, tmp_path):
    path = tmp_path / "arrow.log"
    setup_logging(logging.DEBUG, log_file=str(path), stream=io.StringIO())

    analyze(AnalysisParams(length_in=30.0, spine=500.0))
    for handler in restore_logger.handlers:
        handler.flush()

    assert "Assembled" in path.read_text(encoding='utf-8')
