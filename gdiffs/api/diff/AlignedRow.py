"""Aligned row dataclass."""

from dataclasses import dataclass, replace
from typing import Any

from .DiffLine import DiffLine
from .LineKind import LineKind


@dataclass(frozen=True)
class AlignedRow:
    """One terminal row of a side-by-side view.

    A blank side keeps its zero values: line number 0, empty content and
    no kind.
    """

    old_line_number: int = 0
    old_content: str = ""
    old_kind: LineKind | None = None
    new_line_number: int = 0
    new_content: str = ""
    new_kind: LineKind | None = None

    @classmethod
    def mirror(cls, line: DiffLine) -> "AlignedRow":
        """Row showing a header or context line on both sides."""
        return cls(
            old_line_number=line.old_line_number,
            old_content=line.content,
            old_kind=line.kind,
            new_line_number=line.new_line_number,
            new_content=line.content,
            new_kind=line.kind,
        )

    @classmethod
    def pair(cls, deletion: DiffLine | None, addition: DiffLine | None) -> "AlignedRow":
        """Row pairing a deletion with an addition, either may be missing."""
        row = cls()
        if deletion is not None:
            row = replace(
                row,
                old_line_number=deletion.old_line_number,
                old_content=deletion.content,
                old_kind=LineKind.DELETION,
            )
        if addition is not None:
            row = replace(
                row,
                new_line_number=addition.new_line_number,
                new_content=addition.content,
                new_kind=LineKind.ADDITION,
            )
        return row

    @property
    def has_old(self) -> bool:
        return self.old_kind is not None

    @property
    def has_new(self) -> bool:
        return self.new_kind is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "old_line_number": self.old_line_number,
            "old_content": self.old_content,
            "old_kind": self.old_kind.value if self.old_kind is not None else None,
            "new_line_number": self.new_line_number,
            "new_content": self.new_content,
            "new_kind": self.new_kind.value if self.new_kind is not None else None,
        }
