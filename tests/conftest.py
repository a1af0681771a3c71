"""Root test configuration: reset logging state touched by CLI invocations"""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to CliRunner streams and restore structlog defaults."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
