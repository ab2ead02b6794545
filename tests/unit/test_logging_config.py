from __future__ import annotations

import logging

import pytest

from ternary import logging_config
from ternary.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root_logger = logging.getLogger()
    original_level = root_logger.level
    yield
    if logging_config._installed_handler is not None:
        root_logger.removeHandler(logging_config._installed_handler)
        logging_config._installed_handler = None
    root_logger.setLevel(original_level)


def test_setup_logging_installs_console_handler():
    handler = setup_logging(level=logging.DEBUG)
    root_logger = logging.getLogger()

    assert handler in root_logger.handlers
    assert isinstance(handler, logging.StreamHandler)
    assert handler.level == logging.DEBUG
    assert root_logger.level == logging.DEBUG
    assert "%(levelname)s" in handler.formatter._fmt


def test_setup_logging_replaces_previous_handler():
    first = setup_logging()
    second = setup_logging(user_friendly=True)
    root_logger = logging.getLogger()

    assert first not in root_logger.handlers
    assert second in root_logger.handlers
    assert second.formatter._fmt == "%(message)s"
