"""Changed file dataclass."""

from dataclasses import dataclass
from typing import Any

from .FileStatus import FileStatus


@dataclass(frozen=True)
class ChangedFile:
    """A file touched by the comparison of two revisions."""

    status: FileStatus
    path: str
    old_path: str = ""  # set for renames only
    additions: int = 0
    deletions: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "path": self.path,
            "old_path": self.old_path,
            "additions": self.additions,
            "deletions": self.deletions,
        }
