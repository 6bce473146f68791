"""
git-diff-parser

Turns unified diff text into a typed GitDiff tree of files, hunks and
changed lines.
"""

from git_diff_parser.exceptions.diff_exceptions import DiffParsingError, HeaderIntegerParseError
from git_diff_parser.models.schemas.git_diff import (
    ChangedLine,
    FileDiff,
    GitDiff,
    Hunk,
    HunkOperation,
)
from git_diff_parser.services.diff_parsing.unified_diff_parser import UnifiedDiffParser, parse

__all__ = [
    "ChangedLine",
    "DiffParsingError",
    "FileDiff",
    "GitDiff",
    "HeaderIntegerParseError",
    "Hunk",
    "HunkOperation",
    "UnifiedDiffParser",
    "parse",
]
