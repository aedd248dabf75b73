"""Hunk dataclass."""

from dataclasses import dataclass
from typing import Any

from .DiffLine import DiffLine
from .LineKind import LineKind


@dataclass(frozen=True)
class Hunk:
    """A contiguous region of change, `@@ -old_start,old_count +new_start,new_count @@`."""

    old_start: int
    old_count: int
    new_start: int
    new_count: int
    lines: tuple[DiffLine, ...] = ()

    @property
    def header(self) -> str:
        """Raw header text, empty if the hunk has no header line."""
        if self.lines and self.lines[0].kind is LineKind.HEADER:
            return self.lines[0].content
        return ""

    @property
    def body(self) -> tuple[DiffLine, ...]:
        """Lines of the hunk without the leading header."""
        return tuple(line for line in self.lines if line.kind is not LineKind.HEADER)

    def to_dict(self) -> dict[str, Any]:
        return {
            "old_start": self.old_start,
            "old_count": self.old_count,
            "new_start": self.new_start,
            "new_count": self.new_count,
            "lines": [line.to_dict() for line in self.lines],
        }
