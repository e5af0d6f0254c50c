"""Unit tests for saosim logging configuration."""

from __future__ import annotations

import json
import logging
import os
from logging.handlers import RotatingFileHandler
from unittest import mock

import saosim
from saosim.logging_config import (
    LOGGER_NAME,
    JsonFormatter,
    _clear_handlers,
    _get_level,
    _get_logger,
)


def _flush():
    for handler in _get_logger().handlers:
        handler.flush()


class TestSilentByDefault:
    def test_import_produces_no_output(self, capfd):
        import importlib

        importlib.reload(saosim)
        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_null_handler_installed(self):
        logger = logging.getLogger(LOGGER_NAME)
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_calculate_properties_is_quiet(self, capfd, two_by_two_data):
        two_by_two_data.calculate_properties()
        assert capfd.readouterr().err == ""


class TestConsoleLogging:
    def test_sets_level(self):
        saosim.enable_console_logging(level="DEBUG")
        assert _get_logger().level == logging.DEBUG

    def test_reports_calculated_properties(self, capfd, two_by_two_data):
        saosim.enable_console_logging(level="INFO")
        two_by_two_data.calculate_properties()
        err = capfd.readouterr().err
        assert "Properties of 'behavior'" in err
        assert "range=3" in err

    def test_custom_format(self, capfd):
        saosim.enable_console_logging(level="INFO", format="[SAO] %(message)s")
        logging.getLogger(f"{LOGGER_NAME}.test").info("hello")
        assert "[SAO] hello" in capfd.readouterr().err


class TestFileLogging:
    def test_creates_parent_directories(self, tmp_path):
        log_file = tmp_path / "runs" / "nested" / "sao.log"
        saosim.enable_file_logging(log_file)
        assert log_file.parent.exists()

    def test_writes_records(self, tmp_path, two_by_two_data):
        log_file = tmp_path / "sao.log"
        saosim.enable_file_logging(log_file, level="INFO")
        two_by_two_data.freeze()
        _flush()
        content = log_file.read_text()
        assert "overall_mean=2.5000" in content
        assert "frozen" in content

    def test_rotation_settings(self, tmp_path):
        handler = saosim.enable_file_logging(tmp_path / "sao.log", max_bytes=2048, backup_count=2)
        assert isinstance(handler, RotatingFileHandler)
        assert handler.maxBytes == 2048
        assert handler.backupCount == 2


class TestJsonLogging:
    def test_outputs_json(self, capfd):
        saosim.enable_json_logging(level="INFO")
        logging.getLogger(f"{LOGGER_NAME}.test").info("json test")
        record = json.loads(capfd.readouterr().err.strip())
        assert record["message"] == "json test"
        assert record["level"] == "INFO"
        assert record["logger"] == f"{LOGGER_NAME}.test"

    def test_json_file(self, tmp_path):
        log_file = tmp_path / "sao.json"
        saosim.enable_json_file_logging(log_file, level="INFO")
        logging.getLogger(f"{LOGGER_NAME}.test").info("to file")
        _flush()
        assert json.loads(log_file.read_text().strip())["message"] == "to file"

    def test_formatter_includes_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            import sys

            exc_info = sys.exc_info()
        record = logging.LogRecord("x", logging.ERROR, "x.py", 1, "failed", (), exc_info)
        payload = json.loads(JsonFormatter().format(record))
        assert "RuntimeError" in payload["exception"]


class TestConfigureFromEnv:
    def test_level(self):
        with mock.patch.dict(os.environ, {"SAOSIM_LOGGING": "DEBUG"}, clear=False):
            saosim.configure_from_env()
        assert _get_logger().level == logging.DEBUG

    def test_file(self, tmp_path):
        log_file = tmp_path / "env.log"
        with mock.patch.dict(os.environ, {"SAOSIM_LOG_FILE": str(log_file)}, clear=False):
            saosim.configure_from_env()
        assert any(isinstance(h, RotatingFileHandler) for h in _get_logger().handlers)
        assert _get_logger().level == logging.INFO

    def test_json(self, capfd):
        with mock.patch.dict(
            os.environ, {"SAOSIM_LOGGING": "INFO", "SAOSIM_LOG_JSON": "1"}, clear=False
        ):
            saosim.configure_from_env()
        logging.getLogger(f"{LOGGER_NAME}.test").info("env json")
        assert json.loads(capfd.readouterr().err.strip())["message"] == "env json"

    def test_nothing_set(self):
        before = len(_get_logger().handlers)
        with mock.patch.dict(os.environ, {}, clear=True):
            saosim.configure_from_env()
        assert len(_get_logger().handlers) == before


class TestLevels:
    def test_set_level(self):
        saosim.set_level("WARNING")
        assert _get_logger().level == logging.WARNING
        saosim.set_level(logging.ERROR)
        assert _get_logger().level == logging.ERROR

    def test_module_level_filters_one_module(self, capfd):
        saosim.enable_console_logging(level="DEBUG")
        saosim.set_module_level("data.registry", "ERROR")
        logging.getLogger(f"{LOGGER_NAME}.data.registry").warning("hidden")
        logging.getLogger(f"{LOGGER_NAME}.model.evaluation").debug("shown")
        err = capfd.readouterr().err
        assert "hidden" not in err
        assert "shown" in err
        logging.getLogger(f"{LOGGER_NAME}.data.registry").setLevel(logging.NOTSET)

    def test_get_level(self):
        assert _get_level("debug") == logging.DEBUG
        assert _get_level(logging.ERROR) == logging.ERROR
        assert _get_level("NOPE") == logging.INFO


class TestDisableLogging:
    def test_silences_output(self, capfd):
        saosim.enable_console_logging(level="DEBUG")
        saosim.disable_logging()
        logging.getLogger(f"{LOGGER_NAME}.test").critical("should not appear")
        assert "should not appear" not in capfd.readouterr().err

    def test_only_null_handler_left(self, tmp_path):
        saosim.enable_console_logging()
        saosim.enable_file_logging(tmp_path / "sao.log")
        saosim.disable_logging()
        assert all(isinstance(h, logging.NullHandler) for h in _get_logger().handlers)

    def test_clear_handlers_keeps_null_handler(self):
        _get_logger().addHandler(logging.StreamHandler())
        _clear_handlers()
        assert any(isinstance(h, logging.NullHandler) for h in _get_logger().handlers)
