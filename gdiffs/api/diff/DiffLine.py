"""Diff line dataclass."""

from dataclasses import dataclass
from typing import Any

from .LineKind import LineKind


@dataclass(frozen=True)
class DiffLine:
    """One line of a hunk with its diff marker stripped.

    Line numbers are 0 on a side the line does not belong to: additions
    have no old number, deletions have no new number, headers have neither.
    """

    kind: LineKind
    content: str
    old_line_number: int = 0
    new_line_number: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "content": self.content,
            "old_line_number": self.old_line_number,
            "new_line_number": self.new_line_number,
        }
