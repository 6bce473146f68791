"""
Tests for package logger setup.
"""

import logging

import pytest

from git_diff_parser import parse
from git_diff_parser.core.config import Settings
from git_diff_parser.utils.logging import configure_logging, get_logger, logger
from git_diff_parser.utils.logging import otel_logger
from git_diff_parser.utils.logging.otel_logger import ROOT_LOGGER_NAME


@pytest.fixture
def unconfigured_logging(monkeypatch):
    """Start from the import-time logger state and return to it afterwards."""
    monkeypatch.setattr(otel_logger, "_configured", False)
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.addHandler(logging.NullHandler())
    root.setLevel(logging.NOTSET)


def test_get_logger_nests_under_package_root():
    assert get_logger("custom").name == f"{ROOT_LOGGER_NAME}.custom"
    assert get_logger(f"{ROOT_LOGGER_NAME}.services").name == f"{ROOT_LOGGER_NAME}.services"
    assert get_logger(ROOT_LOGGER_NAME) is logger


def test_import_only_attaches_null_handler(unconfigured_logging):
    root = logging.getLogger(ROOT_LOGGER_NAME)

    assert [type(handler) for handler in root.handlers] == [logging.NullHandler]
    assert root.level == logging.NOTSET


def test_parse_writes_nothing_to_stderr(unconfigured_logging, capsys):
    parse("diff --git a/a.txt b/a.txt\n--- a/a.txt\n+++ b/a.txt\n@@ -1,1 +1,1 @@\n-a\n+b\n")

    assert capsys.readouterr().err == ""


def test_configure_logging_is_idempotent(unconfigured_logging):
    root = configure_logging(Settings(_env_file=None))
    handler_count = len(root.handlers)

    assert configure_logging() is root
    assert len(root.handlers) == handler_count


def test_configure_logging_applies_level(unconfigured_logging):
    root = configure_logging(Settings(_env_file=None, log_level="debug"), force=True)

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_otel_handler_attached_when_enabled(unconfigured_logging):
    from opentelemetry.sdk._logs import LoggingHandler

    root = configure_logging(Settings(_env_file=None, otel_logs_enabled=True), force=True)

    assert any(isinstance(handler, LoggingHandler) for handler in root.handlers)


def test_otel_provider_registered_once(unconfigured_logging, monkeypatch):
    import opentelemetry._logs

    registered = []
    monkeypatch.setattr(otel_logger, "_logger_provider", None)
    monkeypatch.setattr(opentelemetry._logs, "set_logger_provider", registered.append)

    config = Settings(_env_file=None, otel_logs_enabled=True)
    configure_logging(config, force=True)
    configure_logging(config, force=True)

    assert len(registered) == 1
    assert registered[0] is otel_logger._logger_provider
