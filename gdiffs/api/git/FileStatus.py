"""Changed file status enum."""

from enum import Enum


class FileStatus(str, Enum):
    """Change status letter as reported by `git diff --name-status`."""

    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UNKNOWN = "?"

    @classmethod
    def from_letter(cls, token: str) -> "FileStatus":
        """Map a status token such as `M` or `R100` to a status."""
        try:
            return cls(token[:1])
        except ValueError:
            return cls.UNKNOWN

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    FileStatus.ADDED: "added",
    FileStatus.MODIFIED: "modified",
    FileStatus.DELETED: "deleted",
    FileStatus.RENAMED: "renamed",
    FileStatus.COPIED: "copied",
    FileStatus.UNKNOWN: "unknown",
}
