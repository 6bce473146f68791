__all__ = [
    "configure_logging",
    "get_logger",
    "logger",
]

from git_diff_parser.utils.logging.otel_logger import configure_logging, get_logger, logger
