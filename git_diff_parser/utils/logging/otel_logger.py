"""
Logger setup for git-diff-parser.

All package loggers hang off the ``git_diff_parser`` root logger. Importing the
package only attaches a ``NullHandler``; output is up to the caller, either
through their own logging setup or through ``configure_logging``. When
OpenTelemetry log export is enabled an OTEL ``LoggingHandler`` is attached
next to the console stream handler.
"""

import logging
import sys
from typing import Optional

from git_diff_parser.core.config import Settings, get_settings

ROOT_LOGGER_NAME = "git_diff_parser"

_configured = False
_logger_provider = None


def _build_otel_handler(config: Settings) -> logging.Handler:
    """Create a LoggingHandler backed by the process-wide OTEL LoggerProvider."""
    global _logger_provider

    from opentelemetry._logs import set_logger_provider
    from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
    from opentelemetry.sdk._logs.export import ConsoleLogExporter, SimpleLogRecordProcessor
    from opentelemetry.sdk.resources import Resource

    # The global provider can only be set once per process
    if _logger_provider is None:
        _logger_provider = LoggerProvider(
            resource=Resource.create({
                "service.name": config.otel_service_name,
                "deployment.environment": config.env,
            })
        )
        _logger_provider.add_log_record_processor(SimpleLogRecordProcessor(ConsoleLogExporter()))
        set_logger_provider(_logger_provider)

    return LoggingHandler(level=logging.NOTSET, logger_provider=_logger_provider)


def configure_logging(config: Optional[Settings] = None, force: bool = False) -> logging.Logger:
    """
    Configure the package root logger for console (and optionally OTEL) output.

    Never called by the package itself; applications opt in.

    Args:
        config: Settings to read level, format and OTEL options from
        force: Reconfigure even if logging was already set up

    Returns:
        The configured root logger for the package
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)

    if _configured and not force:
        return root

    config = config or get_settings()

    for handler in list(root.handlers):
        root.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(config.log_format))
    root.addHandler(stream_handler)

    if config.otel_logs_enabled:
        root.addHandler(_build_otel_handler(config))

    root.setLevel(config.log_level)

    _configured = True
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package root."""
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


logger = get_logger(ROOT_LOGGER_NAME)
logger.addHandler(logging.NullHandler())
