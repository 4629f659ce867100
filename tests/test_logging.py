"""
Module: test_logging.py

Date: 2026-10-18

Tests for the logger factory, helpers and application logging setup.
"""

import logging

import pytest

from fbrowser.utils.logging import logger_helper
from fbrowser.utils.logging.logger_factory import LoggerFactory, get_cached_logger
from fbrowser.utils.logging.logger_file_helper import add_file_handler
from fbrowser.utils.logging.logger_helper import DevOnlyFilter, safe_log, safe_text
from fbrowser.utils.logging.logger_setup import ConfigureLogger


def _record(dev_only=None):
    record = logging.LogRecord("fbrowser.test", logging.DEBUG, __file__, 1, "msg", None, None)
    if dev_only is not None:
        record.dev_only = dev_only
    return record


class TestLoggerFactory:
    def test_same_name_returns_cached_logger(self):
        assert get_cached_logger("fbrowser.a") is get_cached_logger("fbrowser.a")
        assert "fbrowser.a" in LoggerFactory.get_cached_names()

    def test_default_name_is_calling_module(self):
        logger = get_cached_logger()
        assert logger.name == __name__

    def test_loggers_propagate_to_root(self, caplog):
        get_cached_logger("fbrowser.b").warning("visible %s", "warning")
        assert "visible warning" in caplog.text

    def test_set_global_level(self):
        logger = get_cached_logger("fbrowser.c")
        try:
            LoggerFactory.set_global_level(logging.ERROR)
            assert logger.level == logging.ERROR
            assert get_cached_logger("fbrowser.d").level == logging.ERROR
        finally:
            LoggerFactory.set_global_level(logging.DEBUG)


class TestHelpers:
    def test_safe_text_replaces_known_characters(self):
        assert safe_text("a → b …") == "a -> b ..."

    def test_safe_text_escapes_other_characters(self):
        assert safe_text("café").isascii()

    def test_safe_log_retries_with_ascii(self):
        calls = []

        def flaky(message, *args, **kwargs):
            calls.append(message)
            if len(calls) == 1:
                raise UnicodeEncodeError("ascii", message, 0, 1, "bad")

        safe_log(flaky, "résumé")
        assert len(calls) == 2
        assert calls[1].isascii()

    def test_dev_only_filter(self, monkeypatch):
        flt = DevOnlyFilter()
        assert flt.filter(_record())
        assert not flt.filter(_record(dev_only=True))

        monkeypatch.setattr(logger_helper, "SHOW_DEV_ONLY_IN_CONSOLE", True)
        assert flt.filter(_record(dev_only=True))


class TestFileHandlers:
    def test_add_file_handler_filters_by_name(self, tmp_path):
        logger = logging.getLogger("fbrowser.filetest")
        log_path = tmp_path / "logs" / "ops.log"
        handler = add_file_handler(logger, str(log_path), filter_by_name="fbrowser.filetest")
        try:
            logger.info("kept line")
            logging.getLogger("fbrowser.other").info("dropped line")
            handler.flush()
        finally:
            logger.removeHandler(handler)
            handler.close()

        text = log_path.read_text(encoding="utf-8")
        assert "kept line" in text
        assert "dropped line" not in text


class TestConfigureLogger:
    @pytest.fixture
    def bare_root(self):
        root = logging.getLogger()
        saved_handlers = root.handlers[:]
        saved_level = root.level
        root.handlers = []
        yield root
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)

    def test_installs_handlers(self, bare_root, tmp_path):
        config = ConfigureLogger(
            log_name="unit", log_dir=str(tmp_path), console_enabled=False, debug_enabled=True
        )

        assert len(bare_root.handlers) == 2
        assert config.log_file_path.startswith(str(tmp_path))
        assert config.debug_file_path.startswith(str(tmp_path))

        logging.getLogger("fbrowser.setup").error("boom")
        for handler in bare_root.handlers:
            handler.flush()
        with open(config.log_file_path, encoding="utf-8") as f:
            assert "boom" in f.read()

    def test_console_handler_has_dev_only_filter(self, bare_root, tmp_path):
        ConfigureLogger(log_dir=str(tmp_path), file_enabled=False, debug_enabled=False)

        (handler,) = bare_root.handlers
        assert any(isinstance(f, DevOnlyFilter) for f in handler.filters)

    def test_second_configuration_is_a_no_op(self, bare_root, tmp_path):
        ConfigureLogger(log_dir=str(tmp_path), console_enabled=False)
        count = len(bare_root.handlers)
        ConfigureLogger(log_dir=str(tmp_path), console_enabled=False)
        assert len(bare_root.handlers) == count
