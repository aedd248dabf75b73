"""Git module - reads changed files and raw diffs through the git CLI."""

from .ChangedFile import ChangedFile
from .DiffUnavailableError import DiffUnavailableError
from .FileStatus import FileStatus
from .GitError import GitError
from .GitRepo import GitRepo
from .merge_file_stats import merge_file_stats
from .parse_name_status import parse_name_status
from .parse_numstat import parse_numstat

__all__ = [
    "ChangedFile",
    "DiffUnavailableError",
    "FileStatus",
    "GitError",
    "GitRepo",
    "merge_file_stats",
    "parse_name_status",
    "parse_numstat",
]
