from .diff_exceptions import DiffParsingError, HeaderIntegerParseError

__all__ = ["DiffParsingError", "HeaderIntegerParseError"]
