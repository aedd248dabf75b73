"""Content search hit dataclass."""

from dataclasses import dataclass
from typing import Any

from .ProjectedLine import ProjectedLine


@dataclass(frozen=True)
class SearchHit:
    """A projected line matching a content query."""

    line: ProjectedLine
    score: float = 0.0
    positions: tuple[int, ...] = ()

    @property
    def row_index(self) -> int:
        """Aligned row to scroll to when the hit is selected."""
        return self.line.source_row_index

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.line.to_dict(),
            "score": self.score,
            "positions": list(self.positions),
        }
