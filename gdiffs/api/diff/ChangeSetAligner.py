"""Side-by-side aligner (UNO: single class)."""

from collections.abc import Iterable
from itertools import zip_longest

from .AlignedRow import AlignedRow
from .DiffLine import DiffLine
from .Hunk import Hunk
from .LineKind import LineKind


class ChangeSetAligner:
    """Turn hunks into rows pairing old and new lines.

    Deletions and additions are buffered until the next header, context
    line or hunk end, then zipped by position. No content matching is
    attempted, so unrelated blocks are stacked in encounter order.
    """

    def align(self, hunks: Iterable[Hunk]) -> list[AlignedRow]:
        """Align every hunk in order.

        Args:
            hunks: Parsed hunks of one file

        Returns:
            Rows for dual-pane rendering
        """
        rows: list[AlignedRow] = []
        for hunk in hunks:
            deletions: list[DiffLine] = []
            additions: list[DiffLine] = []
            for line in hunk.lines:
                if line.kind is LineKind.DELETION:
                    deletions.append(line)
                elif line.kind is LineKind.ADDITION:
                    additions.append(line)
                else:
                    rows.extend(self._flush(deletions, additions))
                    rows.append(AlignedRow.mirror(line))
            rows.extend(self._flush(deletions, additions))
        return rows

    @staticmethod
    def _flush(deletions: list[DiffLine], additions: list[DiffLine]) -> list[AlignedRow]:
        """Zip and empty both buffers."""
        rows = [AlignedRow.pair(old, new) for old, new in zip_longest(deletions, additions)]
        deletions.clear()
        additions.clear()
        return rows
