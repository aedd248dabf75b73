"""Files module - group and navigate the changed file list."""

from .ChangedFileIndex import ChangedFileIndex
from .DisplayItem import DisplayItem
from .DisplayItemKind import DisplayItemKind
from .ExpandedPaths import ExpandedPaths
from .FileCursor import FileCursor
from .FileViewMode import FileViewMode

__all__ = [
    "ChangedFileIndex",
    "DisplayItem",
    "DisplayItemKind",
    "ExpandedPaths",
    "FileCursor",
    "FileViewMode",
]
