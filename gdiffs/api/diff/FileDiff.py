"""File diff dataclass."""

from dataclasses import dataclass
from typing import Any

from .Hunk import Hunk


@dataclass(frozen=True)
class FileDiff:
    """Parsed diff of a single file.

    A FileDiff with no hunks is a valid result: the file is unchanged in
    the requested direction, only renamed, or binary.
    """

    old_path: str = ""
    new_path: str = ""
    hunks: tuple[Hunk, ...] = ()
    binary: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.hunks

    def to_dict(self) -> dict[str, Any]:
        return {
            "old_path": self.old_path,
            "new_path": self.new_path,
            "binary": self.binary,
            "hunks": [hunk.to_dict() for hunk in self.hunks],
        }
