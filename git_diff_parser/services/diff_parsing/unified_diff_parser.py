"""
Unified Diff Parser

Parses `git diff` unified diff text into structured GitDiff, FileDiff and Hunk
objects. Keeps only added and removed lines; context lines are dropped.
"""

import re
import hashlib
from typing import List, Optional
from dataclasses import dataclass

from git_diff_parser.models.schemas.git_diff import (
    ChangedLine,
    FileDiff,
    GitDiff,
    Hunk,
    HunkOperation
)
from git_diff_parser.exceptions.diff_exceptions import HeaderIntegerParseError
from git_diff_parser.utils.logging import get_logger

FILE_DIFF_SEPARATOR = "diff --git"
OLD_FILENAME_MARKER = "--- a/"
NEW_FILENAME_MARKER = "+++ b/"

HEADER_FIELDS = ("old_start", "old_count", "new_start", "new_count")


@dataclass
class HunkSpan:
    """Located hunk header plus the body text it owns."""
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    header: str
    section_header: str
    body: str


class UnifiedDiffParser:
    """
    Parse unified diffs into structured GitDiff objects.

    Features:
    - Splits multi-file diffs on the `diff --git` separator
    - Best-effort filename extraction (missing headers yield empty strings)
    - Hunk header location with loud failure on corrupt line numbers
    - Changed line extraction and per-hunk operation classification
    - Deterministic hunk ID generation for diff anchoring

    The parser holds no per-call state, so one instance can be shared.
    """

    # Each number is captured as a loose token so that a structurally valid
    # header with non-numeric text fails in conversion instead of being skipped.
    # Counts are mandatory: "@@ -1 +1 @@" is not a recognized header.
    HUNK_HEADER_PATTERN = re.compile(
        r'^[ \t]*@@ -([^\s,@]+),([^\s,@]+) \+([^\s,@]+),([^\s,@]+) @@(.*)$',
        re.MULTILINE
    )

    def __init__(self):
        self.logger = get_logger(__name__)

    def parse(self, git_diff: str) -> GitDiff:
        """
        Parse a complete unified diff.

        Args:
            git_diff: Raw diff text as emitted by `git diff`

        Returns:
            GitDiff with one FileDiff per `diff --git` section, in input order

        Raises:
            HeaderIntegerParseError: If any recognized hunk header carries a
                number that cannot be converted. No partial result is returned.
        """
        if not isinstance(git_diff, str):
            raise TypeError(f"Expected diff text as str, got {type(git_diff).__name__}")

        file_diffs = []

        for file_index, segment in enumerate(self.split_file_diffs(git_diff)):
            try:
                file_diff = self._parse_file_segment(segment, file_index)
            except HeaderIntegerParseError as e:
                self.logger.error(
                    f"Failed to extract hunks for file {file_index}: {e}",
                    extra={"error_code": e.error_code, **e.details}
                )
                raise

            file_diffs.append(file_diff)

        result = GitDiff(file_diffs=tuple(file_diffs))
        self.logger.debug(
            f"Successfully parsed {len(file_diffs)} file diffs",
            extra={
                "file_count": len(file_diffs),
                "total_additions": result.total_additions,
                "total_deletions": result.total_deletions,
            }
        )
        return result

    def _parse_file_segment(self, segment: str, file_index: int) -> FileDiff:
        """Build a FileDiff from a single file segment."""
        spans = self.locate_hunks(segment, file_index=file_index)

        old_filename = self.extract_old_filename(segment)
        new_filename = self.extract_new_filename(segment)
        file_path = new_filename or old_filename
        # Segments without filename headers are keyed by position so their hunk ids stay distinct
        id_key = file_path or f"segment-{file_index}"

        hunks = []
        for span in spans:
            changed_lines = self.extract_changed_lines(span.body)
            hunks.append(Hunk(
                hunk_operation=self.determine_hunk_operation(changed_lines),
                old_file_line_start=span.old_start,
                old_file_line_count=span.old_count,
                new_file_line_start=span.new_start,
                new_file_line_count=span.new_count,
                changed_lines=tuple(changed_lines),
                header=span.header,
                section_header=span.section_header,
                hunk_id=self.generate_hunk_id(id_key, span.header),
            ))

        if not old_filename and not new_filename:
            self.logger.debug(f"No filename headers found in file segment {file_index}")

        self.logger.debug(f"Parsed {len(hunks)} hunks for {file_path or f'segment {file_index}'}")
        return FileDiff(
            old_filename=old_filename,
            new_filename=new_filename,
            hunks=tuple(hunks),
        )

    def split_file_diffs(self, git_diff: str) -> List[str]:
        """
        Split diff text into per-file segments.

        Text before the first separator is discarded. Each returned segment
        starts with the separator itself.
        """
        pieces = git_diff.split(FILE_DIFF_SEPARATOR)[1:]
        return [FILE_DIFF_SEPARATOR + piece for piece in pieces]

    def extract_old_filename(self, segment: str) -> str:
        """Return the path following '--- a/', or an empty string if absent."""
        return self._extract_filename(segment, OLD_FILENAME_MARKER)

    def extract_new_filename(self, segment: str) -> str:
        """Return the path following '+++ b/', or an empty string if absent."""
        return self._extract_filename(segment, NEW_FILENAME_MARKER)

    def _extract_filename(self, segment: str, marker: str) -> str:
        marker_index = segment.find(marker)
        if marker_index == -1:
            return ""

        start = marker_index + len(marker)
        end = segment.find("\n", start)
        if end == -1:
            end = len(segment)

        return segment[start:end]

    def locate_hunks(self, segment: str, file_index: Optional[int] = None) -> List[HunkSpan]:
        """
        Find all hunk headers in a file segment and slice the body each one owns.

        A hunk's body runs from the end of its header line to the start of the
        next header, or to the end of the segment for the last hunk.

        Args:
            segment: One file segment
            file_index: Position of the segment in the diff, for error reporting

        Returns:
            List of HunkSpan objects in order of appearance

        Raises:
            HeaderIntegerParseError: If a header number is not a decimal integer
        """
        matches = list(self.HUNK_HEADER_PATTERN.finditer(segment))
        spans = []

        for hunk_index, match in enumerate(matches):
            header = match.group(0).strip()
            numbers = [
                self._parse_header_integer(
                    match.group(group),
                    field_name=HEADER_FIELDS[group - 1],
                    hunk_index=hunk_index,
                    file_index=file_index,
                    header=header
                )
                for group in range(1, 5)
            ]

            body_end = matches[hunk_index + 1].start() if hunk_index + 1 < len(matches) else len(segment)

            spans.append(HunkSpan(
                old_start=numbers[0],
                old_count=numbers[1],
                new_start=numbers[2],
                new_count=numbers[3],
                header=header,
                section_header=match.group(5).strip(),
                body=segment[match.end():body_end],
            ))

        return spans

    def _parse_header_integer(
        self,
        raw_value: str,
        field_name: str,
        hunk_index: int,
        file_index: Optional[int] = None,
        header: Optional[str] = None
    ) -> int:
        # int() alone would also accept signs, underscores and non-ASCII digits
        try:
            if not (raw_value.isascii() and raw_value.isdigit()):
                raise ValueError(f"invalid decimal literal: {raw_value!r}")
            return int(raw_value, 10)
        except ValueError as e:
            raise HeaderIntegerParseError(
                field_name=field_name,
                hunk_index=hunk_index,
                raw_value=raw_value,
                file_index=file_index,
                header=header,
                cause=e
            ) from e

    def extract_changed_lines(self, body: str) -> List[ChangedLine]:
        """
        Extract added and removed lines from a hunk body.

        Only lines starting with '+' or '-' are kept. The marker is removed and
        the rest is stripped of surrounding whitespace. Context lines, empty
        lines and anything else are dropped.
        """
        changed_lines = []

        for line in body.split("\n"):
            if line.startswith("+"):
                changed_lines.append(ChangedLine(content=line[1:].strip(), is_deletion=False))
            elif line.startswith("-"):
                changed_lines.append(ChangedLine(content=line[1:].strip(), is_deletion=True))

        return changed_lines

    def determine_hunk_operation(self, changed_lines: List[ChangedLine]) -> HunkOperation:
        """
        Classify a hunk from its changed lines.

        Both additions and deletions give MODIFY, only additions ADD, only
        deletions DELETE. A hunk with no changed lines is reported as MODIFY.
        """
        has_additions = False
        has_deletions = False

        for line in changed_lines:
            if line.is_deletion:
                has_deletions = True
            else:
                has_additions = True

            if has_additions and has_deletions:
                return HunkOperation.MODIFY

        if has_additions:
            return HunkOperation.ADD
        if has_deletions:
            return HunkOperation.DELETE

        return HunkOperation.MODIFY

    def generate_hunk_id(self, file_path: str, hunk_header: str) -> str:
        """
        Generate deterministic hunk ID for diff anchoring.

        Args:
            file_path: Path of the file
            hunk_header: Hunk header line (e.g., "@@ -1,4 +1,6 @@ function")

        Returns:
            Deterministic hunk ID string
        """
        content = f"{file_path}::{hunk_header}"

        hash_object = hashlib.sha256(content.encode('utf-8'))
        short_hash = hash_object.hexdigest()[:12]

        return f"hunk_{short_hash}"

    def validate_hunk_integrity(self, file_diff: FileDiff) -> List[str]:
        """
        Validate a parsed file diff and return a list of warnings.

        Args:
            file_diff: FileDiff to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        file_path = file_diff.file_path or "<unknown>"

        for index, hunk in enumerate(file_diff.hunks):
            if hunk.additions > hunk.new_file_line_count:
                warnings.append(
                    f"Hunk {index} in {file_path} records {hunk.additions} additions "
                    f"but spans only {hunk.new_file_line_count} new lines"
                )
            if hunk.deletions > hunk.old_file_line_count:
                warnings.append(
                    f"Hunk {index} in {file_path} records {hunk.deletions} deletions "
                    f"but spans only {hunk.old_file_line_count} old lines"
                )

        for index in range(len(file_diff.hunks) - 1):
            current = file_diff.hunks[index]
            following = file_diff.hunks[index + 1]
            current_end = current.new_file_line_start + current.new_file_line_count - 1
            if following.new_file_line_start <= current_end:
                warnings.append(f"Overlapping or unordered hunks detected in {file_path}")
                break

        for warning in warnings:
            self.logger.warning(warning)

        return warnings


_default_parser = UnifiedDiffParser()


def parse(git_diff: str) -> GitDiff:
    """Parse unified diff text with a shared parser instance."""
    return _default_parser.parse(git_diff)
