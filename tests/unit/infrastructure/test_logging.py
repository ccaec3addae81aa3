"""Unit tests for logging setup."""

import io
import json
import logging

import pytest

from vra_resource.infrastructure.adapters.logging_adapter import LoggingAdapter
from vra_resource.infrastructure.logging.logger import ROOT_LOGGER_NAME, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield
    root.handlers = handlers
    root.setLevel(level)
    root.propagate = propagate


@pytest.mark.unit
class TestLogging:
    """Test cases for library logging."""

    def test_get_logger_namespaces_names(self):
        assert get_logger("poller").name == "vra_resource.poller"
        assert get_logger("vra_resource.domain").name == "vra_resource.domain"
        assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME

    def test_json_output(self):
        stream = io.StringIO()
        setup_logging("DEBUG", "json", stream=stream)

        get_logger("tests").info("Submitting action %s", "op-1")

        record = json.loads(stream.getvalue().strip())
        assert record["event"] == "Submitting action op-1"
        assert record["level"] == "info"
        assert record["logger"] == "vra_resource.tests"
        assert "timestamp" in record

    def test_level_filters(self):
        stream = io.StringIO()
        setup_logging("WARNING", "console", stream=stream)

        get_logger("tests").info("hidden")
        get_logger("tests").warning("shown")

        output = stream.getvalue()
        assert "hidden" not in output
        assert "shown" in output

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging("INFO", "console", stream=io.StringIO())
        setup_logging("INFO", "json", stream=io.StringIO())

        root = logging.getLogger(ROOT_LOGGER_NAME)
        assert sum(1 for h in root.handlers if getattr(h, "_vra_resource_handler", False)) == 1

    def test_adapter_logs_through_library_logger(self, caplog):
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.propagate = True

        with caplog.at_level(logging.INFO, logger=ROOT_LOGGER_NAME):
            LoggingAdapter("adapter").info("Request %s created", "abc123")

        assert "Request abc123 created" in caplog.text
        assert caplog.records[0].name == "vra_resource.adapter"
