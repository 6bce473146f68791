"""
Diff Parsing Services

Services for parsing and processing unified diff formats.
"""

from .unified_diff_parser import HunkSpan, UnifiedDiffParser, parse

__all__ = ["HunkSpan", "UnifiedDiffParser", "parse"]
