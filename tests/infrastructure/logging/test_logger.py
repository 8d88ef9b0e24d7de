"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from profitlens.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_under_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place the log file under logs/<subdir>."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20250301"),
    )

    builder = logger_module.LoggerBuilder()
    report_logger = (
        builder.name("profitlens.test.reports")
        .subdir("reports")
        .prefix("report_logs")
        .console(True)
        .level(logging.WARNING)
        .build()
    )

    assert report_logger.name == "profitlens.test.reports"
    assert report_logger.level == logging.WARNING
    assert report_logger.propagate is False
    file_handlers = [
        h for h in report_logger.handlers if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    expected = tmp_path / "logs" / "reports" / "20250301_report_logs.log"
    assert file_handlers[0].baseFilename == str(expected)
    assert len(report_logger.handlers) == 2
    assert builder.build() is report_logger
    assert len(report_logger.handlers) == 2


def test_logger_builder_uses_custom_factories(tmp_path, monkeypatch):
    """Custom formatter and handler factories should be honored."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    handler = logging.NullHandler()
    seen = {}

    def fake_file_handler(path, formatter):
        seen["path"] = path
        seen["formatter"] = formatter
        return handler

    built = (
        logger_module.LoggerBuilder()
        .name("profitlens.test.custom")
        .subdir("usage")
        .console(False)
        .formatter(lambda: fmt)
        .file_handler(fake_file_handler)
        .build()
    )

    assert built.handlers == [handler]
    assert seen["formatter"] is fmt
    assert seen["path"].parent == tmp_path / "logs" / "usage"


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter at INFO."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "profitlens.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    file_handler.close()

    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger methods should call the wrapped logging.Logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("profitlens")
    logger.info("snapshot computed")
    logger.warning("unknown tag")
    logger.error("database locked")
    logger.debug("rows fetched")
    logger.critical("disk full")

    fake_logger.info.assert_called_with("snapshot computed")
    fake_logger.warning.assert_called_with("unknown tag")
    fake_logger.error.assert_called_with("database locked")
    fake_logger.debug.assert_called_with("rows fetched")
    fake_logger.critical.assert_called_with("disk full")
    assert logger_module.Logger("profitlens") is logger


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should each return one instance."""
    built = []

    def _fake_build(self):
        built.append((self._name, self._subdir, self._console))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger_1 = logger_module.get_app_logger()
    app_logger_2 = logger_module.get_app_logger()
    usage_logger_1 = logger_module.get_usage_logger()
    usage_logger_2 = logger_module.get_usage_logger()

    assert app_logger_1 is app_logger_2
    assert usage_logger_1 is usage_logger_2
    assert app_logger_1 is not usage_logger_1
    assert built == [
        ("profitlens", "app", True),
        ("profitlens.usage", "usage", False),
    ]
