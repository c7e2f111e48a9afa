import json
import logging

import pytest

from zones.logconfig import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Restore root logger handlers and level after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("zones").setLevel(logging.NOTSET)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_zones_logger_level(self):
        """Test that the zones logger gets the requested level."""
        configure_logging(level="debug")
        assert logging.getLogger("zones").level == logging.DEBUG

    def test_json_output(self, capsys):
        """Test that JSON mode renders records as JSON lines.

        Args:
            capsys: Pytest capsys fixture.
        """
        configure_logging(level="INFO", log_json=True)
        logging.getLogger("zones.service").info("saved zones")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "saved zones"
        assert record["level"] == "info"
        assert record["logger"] == "zones.service"
