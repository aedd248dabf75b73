"""File list view mode enum."""

from enum import Enum


class FileViewMode(str, Enum):
    """Grouping applied to the changed file list."""

    FOLDER = "folder"
    TYPE = "type"
    RAW = "raw"

    def next(self) -> "FileViewMode":
        modes = list(FileViewMode)
        return modes[(modes.index(self) + 1) % len(modes)]

    def previous(self) -> "FileViewMode":
        modes = list(FileViewMode)
        return modes[(modes.index(self) - 1) % len(modes)]
