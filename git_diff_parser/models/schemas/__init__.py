from .git_diff import ChangedLine, FileDiff, GitDiff, Hunk, HunkOperation

__all__ = ["ChangedLine", "FileDiff", "GitDiff", "Hunk", "HunkOperation"]
