"""
Diff Parsing Exception Hierarchy

Errors raised while turning unified diff text into a GitDiff tree. Only
structurally recognized but numerically corrupt hunk headers are errors;
missing filenames, empty input and empty hunks are not.
"""

from typing import Optional, Dict, Any


class DiffParsingError(Exception):
    """Base exception for all diff parsing errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"


class HeaderIntegerParseError(DiffParsingError):
    """Raised when a hunk header matched but one of its four numbers is not a valid integer.

    Attributes:
        field_name: Which header field failed (old_start, old_count, new_start, new_count)
        hunk_index: Position of the hunk within its file segment
        raw_value: The captured text that could not be converted
        file_index: Position of the file segment within the diff (if known)
        header: The offending header line (if known)
    """

    def __init__(
        self,
        field_name: str,
        hunk_index: int,
        raw_value: str,
        file_index: Optional[int] = None,
        header: Optional[str] = None,
        cause: Optional[Exception] = None
    ):
        self.field_name = field_name
        self.hunk_index = hunk_index
        self.raw_value = raw_value
        self.file_index = file_index
        self.header = header

        message = f"failed to parse {field_name.replace('_', ' ')} '{raw_value}' in hunk {hunk_index}"
        if file_index is not None:
            message += f" of file {file_index}"

        super().__init__(
            message=message,
            error_code="HEADER_INTEGER_PARSE_ERROR",
            details={
                "field_name": field_name,
                "hunk_index": hunk_index,
                "raw_value": raw_value,
                "file_index": file_index,
                "header": header,
                "cause": str(cause) if cause else None
            }
        )
        self.__cause__ = cause
