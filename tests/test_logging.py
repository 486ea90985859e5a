"""Tests for logging setup."""

import logging

import pytest

from json2freezed.logging_config import get_logger, setup_logging


class TestLogging:
    """Package logger configuration."""

    def test_get_logger_prefixes_names(self):
        assert get_logger("tests.module").name == "json2freezed.tests.module"
        assert get_logger("json2freezed.utils").name == "json2freezed.utils"

    def test_log_file(self, tmp_path):
        log_path = tmp_path / "run.log"
        setup_logging("ERROR", log_path)

        get_logger("tests").debug("hello file")
        for handler in logging.getLogger("json2freezed").handlers:
            handler.flush()

        assert "hello file" in log_path.read_text(encoding="utf-8")
        setup_logging()

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("CHATTY")
