"""Tests for logging setup."""

import logging

import pytest

from icebreaker.config import Settings
from icebreaker.util.logging import get_logger, log_level, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the root logger changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("icebreaker").setLevel(logging.NOTSET)
    logging.getLogger("uvicorn.access").setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_debug_enables_debug_level(self):
        # Act
        setup_logging(Settings(debug=True))

        # Assert
        assert get_logger("icebreaker.persistence").getEffectiveLevel() == (
            logging.DEBUG
        )

    def test_default_level_is_info(self):
        # Act
        setup_logging(Settings())

        # Assert
        assert logging.getLogger("icebreaker").level == logging.INFO
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_log_level_follows_debug_flag(self):
        assert log_level(Settings(debug=True)) == logging.DEBUG
        assert log_level(Settings(debug=False)) == logging.INFO
