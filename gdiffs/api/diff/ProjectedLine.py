"""Projected line dataclass."""

from dataclasses import dataclass
from typing import Any

from .LineKind import LineKind


@dataclass(frozen=True)
class ProjectedLine:
    """A line of a single-column pane.

    `source_row_index` points back into the aligned rows it came from so a
    selection can be turned into a scroll position.
    """

    line_number: int
    content: str
    kind: LineKind
    source_row_index: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "line_number": self.line_number,
            "content": self.content,
            "kind": self.kind.value,
            "source_row_index": self.source_row_index,
        }
