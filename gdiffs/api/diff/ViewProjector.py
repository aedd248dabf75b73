"""Single-column view projector (UNO: single class)."""

from collections.abc import Sequence

from .AlignedRow import AlignedRow
from .LineKind import LineKind
from .ProjectedLine import ProjectedLine
from .ViewMode import ViewMode

_MIRRORED = (LineKind.CONTEXT, LineKind.HEADER)


class ViewProjector:
    """Linearize aligned rows for a Both, New-only or Old-only pane."""

    def project(self, rows: Sequence[AlignedRow], mode: ViewMode) -> list[ProjectedLine]:
        """Project rows into the lines a pane renders.

        Args:
            rows: Output of ChangeSetAligner.align
            mode: Requested view mode

        Returns:
            Lines in row order, each pointing back at its row index
        """
        mode = ViewMode(mode)
        lines: list[ProjectedLine] = []
        for index, row in enumerate(rows):
            if mode is ViewMode.BOTH:
                lines.extend(self._both(index, row))
                continue
            line = self._new_side(index, row) if mode is ViewMode.NEW else self._old_side(index, row)
            if line is not None:
                lines.append(line)
        return lines

    @staticmethod
    def _both(index: int, row: AlignedRow) -> list[ProjectedLine]:
        lines: list[ProjectedLine] = []
        if row.old_kind is not None and (row.old_content or row.old_line_number):
            lines.append(ProjectedLine(row.old_line_number, row.old_content, row.old_kind, index))

        # context and header rows carry the same line on both sides
        if row.new_kind == row.old_kind and row.new_content == row.old_content:
            return lines

        if row.new_kind is not None and (row.new_content or row.new_line_number):
            lines.append(ProjectedLine(row.new_line_number, row.new_content, row.new_kind, index))
        return lines

    @staticmethod
    def _new_side(index: int, row: AlignedRow) -> ProjectedLine | None:
        if row.new_kind in (LineKind.ADDITION, *_MIRRORED):
            return ProjectedLine(row.new_line_number, row.new_content, row.new_kind, index)
        if row.old_kind in _MIRRORED:
            return ProjectedLine(row.new_line_number, row.old_content, row.old_kind, index)
        return None

    @staticmethod
    def _old_side(index: int, row: AlignedRow) -> ProjectedLine | None:
        if row.old_kind in (LineKind.DELETION, *_MIRRORED):
            return ProjectedLine(row.old_line_number, row.old_content, row.old_kind, index)
        if row.new_kind in _MIRRORED:
            return ProjectedLine(row.old_line_number, row.new_content, row.new_kind, index)
        return None
