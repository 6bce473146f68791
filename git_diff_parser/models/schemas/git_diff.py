"""
Git Diff Models

Contains Pydantic schemas for the structured form of a parsed unified diff.
All models are frozen: a tree is built once per parse call and never mutated.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Tuple, Union
from enum import Enum


class HunkOperation(str, Enum):
    """Operation kind of a single hunk.

    MODIFY is also the default for hunks that contain no changed lines.
    """
    ADD = "add"
    DELETE = "delete"
    MODIFY = "modify"


def get_hunk_operation_value(operation: Union[HunkOperation, str]) -> str:
    """Safely extract string value from HunkOperation enum or string.

    Raises:
        TypeError: If operation is neither HunkOperation nor str
    """
    if isinstance(operation, HunkOperation):
        return operation.value
    elif isinstance(operation, str):
        return operation
    raise TypeError(f"Expected HunkOperation or str, got {type(operation).__name__}")


class ChangedLine(BaseModel):
    """A single added or removed line. Context lines are never represented."""

    content: str = Field(..., description="Line text without the +/- marker, whitespace trimmed")
    is_deletion: bool = Field(..., description="True for removed lines, False for added lines")

    model_config = ConfigDict(frozen=True)


class Hunk(BaseModel):
    """Represents a single diff hunk within a file diff."""

    hunk_operation: HunkOperation = Field(..., description="Derived operation kind of this hunk")

    # Line range information (from hunk header)
    old_file_line_start: int = Field(..., description="Starting line number in old file", ge=0)
    old_file_line_count: int = Field(..., description="Number of lines the hunk spans in old file", ge=0)
    new_file_line_start: int = Field(..., description="Starting line number in new file", ge=0)
    new_file_line_count: int = Field(..., description="Number of lines the hunk spans in new file", ge=0)

    changed_lines: Tuple[ChangedLine, ...] = Field(
        default_factory=tuple,
        description="Added and removed lines in the order they appear"
    )

    header: str = Field(
        default="",
        description="Raw hunk header in format @@ -a,b +c,d @@"
    )
    section_header: str = Field(
        default="",
        description="Text following the closing @@, usually the enclosing function"
    )
    hunk_id: str = Field(
        default="",
        description="Deterministic hunk identifier for anchoring"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "hunk_operation": "modify",
                "old_file_line_start": 10,
                "old_file_line_count": 7,
                "new_file_line_start": 10,
                "new_file_line_count": 8,
                "changed_lines": [
                    {"content": "return a + b", "is_deletion": True},
                    {"content": "# Add input validation", "is_deletion": False},
                    {"content": "return a + b", "is_deletion": False},
                ],
                "header": "@@ -10,7 +10,8 @@ def calculate_sum(a: int, b: int) -> int:",
                "section_header": "def calculate_sum(a: int, b: int) -> int:",
                "hunk_id": "hunk_3f1c2a9b7e4d",
            }
        }
    )

    @property
    def added_lines(self) -> Tuple[ChangedLine, ...]:
        return tuple(line for line in self.changed_lines if not line.is_deletion)

    @property
    def deleted_lines(self) -> Tuple[ChangedLine, ...]:
        return tuple(line for line in self.changed_lines if line.is_deletion)

    @property
    def additions(self) -> int:
        """Number of added lines recorded in this hunk."""
        return len(self.added_lines)

    @property
    def deletions(self) -> int:
        """Number of removed lines recorded in this hunk."""
        return len(self.deleted_lines)

    @property
    def hunk_operation_str(self) -> str:
        return get_hunk_operation_value(self.hunk_operation)


class FileDiff(BaseModel):
    """Represents changes to a single old/new file pair."""

    old_filename: str = Field(
        default="",
        description="Path after '--- a/', empty when the header is absent"
    )
    new_filename: str = Field(
        default="",
        description="Path after '+++ b/', empty when the header is absent"
    )
    hunks: Tuple[Hunk, ...] = Field(
        default_factory=tuple,
        description="Parsed hunks in input order"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def file_path(self) -> str:
        """New path, falling back to the old path when the new one is missing."""
        return self.new_filename or self.old_filename

    @property
    def additions(self) -> int:
        return sum(hunk.additions for hunk in self.hunks)

    @property
    def deletions(self) -> int:
        return sum(hunk.deletions for hunk in self.hunks)

    @property
    def total_lines_changed(self) -> int:
        """Total number of lines changed (additions + deletions)."""
        return self.additions + self.deletions


class GitDiff(BaseModel):
    """Represents a complete parsed diff across multiple files."""

    file_diffs: Tuple[FileDiff, ...] = Field(
        default_factory=tuple,
        description="File diffs in the order they appear in the input"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def file_paths(self) -> List[str]:
        return [file_diff.file_path for file_diff in self.file_diffs]

    @property
    def total_additions(self) -> int:
        return sum(file_diff.additions for file_diff in self.file_diffs)

    @property
    def total_deletions(self) -> int:
        return sum(file_diff.deletions for file_diff in self.file_diffs)
