"""Display item dataclass."""

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any

from ..git.ChangedFile import ChangedFile
from .DisplayItemKind import DisplayItemKind


@dataclass(frozen=True)
class DisplayItem:
    """One row of the changed file list: a folder header, a type header or a file."""

    kind: DisplayItemKind
    depth: int = 0
    path: str = ""  # folder headers
    expanded: bool = False  # folder headers
    label: str = ""  # type headers
    count: int = 0  # type headers
    file: ChangedFile | None = None  # file entries

    @classmethod
    def folder_header(cls, path: str, expanded: bool, depth: int = 0) -> "DisplayItem":
        return cls(kind=DisplayItemKind.FOLDER_HEADER, depth=depth, path=path, expanded=expanded)

    @classmethod
    def type_header(cls, label: str, count: int) -> "DisplayItem":
        return cls(kind=DisplayItemKind.TYPE_HEADER, label=label, count=count)

    @classmethod
    def file_entry(cls, file: ChangedFile, depth: int = 0) -> "DisplayItem":
        return cls(kind=DisplayItemKind.FILE_ENTRY, depth=depth, file=file)

    @property
    def is_header(self) -> bool:
        return self.kind is not DisplayItemKind.FILE_ENTRY

    @property
    def title(self) -> str:
        """Text shown for the item: folder name, `Label (count)` or file path."""
        if self.kind is DisplayItemKind.FOLDER_HEADER:
            return PurePosixPath(self.path).name or self.path
        if self.kind is DisplayItemKind.TYPE_HEADER:
            return f"{self.label} ({self.count})"
        assert self.file is not None
        return self.file.path

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "depth": self.depth,
            "title": self.title,
            "path": self.path,
            "expanded": self.expanded,
            "label": self.label,
            "count": self.count,
            "file": self.file.to_dict() if self.file is not None else None,
        }
