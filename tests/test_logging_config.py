from __future__ import annotations

import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from crypto_price_agent.logging_config import configure_logging

@pytest.fixture()
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)

@pytest.mark.parametrize("log_json, formatter_type", [(True, JsonFormatter), (False, logging.Formatter)])
def test_configure_logging(restore_root_logger, make_settings, log_json, formatter_type):
    configure_logging(make_settings(log_json=log_json, log_level="debug"))

    assert len(logging.root.handlers) == 1
    assert type(logging.root.handlers[0].formatter) is formatter_type
    assert logging.root.level == logging.DEBUG
