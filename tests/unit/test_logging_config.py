"""Tests for calvin/logging_config.py"""

import json
import logging
import re

import pytest

from calvin.logging_config import setup_logging


ISO_TIMESTAMP = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}")


class TestSetupLogging:
    def test_console_output_on_stderr_without_timestamp(self, restore_root_logger, capsys):
        setup_logging(level="WARNING", json_output=False)
        logging.getLogger("calvin.example").warning("could not parse date 'someday'")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "could not parse date 'someday'" in captured.err
        assert not ISO_TIMESTAMP.search(captured.err)

    def test_json_output_has_timestamp(self, restore_root_logger, capsys):
        setup_logging(level="WARNING", json_output=True)
        logging.getLogger("calvin.example").warning("hello")

        line = json.loads(capsys.readouterr().err.strip())
        assert line["event"] == "hello"
        assert line["level"] == "warning"
        assert line["logger"] == "calvin.example"
        assert ISO_TIMESTAMP.match(line["timestamp"])

    def test_level_filters(self, restore_root_logger, capsys):
        setup_logging(level="ERROR", json_output=False)
        logging.getLogger("calvin.example").warning("quiet")
        assert "quiet" not in capsys.readouterr().err

    def test_env_selects_json(self, restore_root_logger, capsys, monkeypatch):
        monkeypatch.setenv("CALVIN_LOG_FORMAT", "json")
        monkeypatch.setenv("CALVIN_LOG_LEVEL", "INFO")
        setup_logging()
        logging.getLogger("calvin.example").info("from env")
        assert json.loads(capsys.readouterr().err.strip())["event"] == "from env"
