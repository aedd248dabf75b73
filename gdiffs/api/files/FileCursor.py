"""Header-skipping cursor over display items."""

from collections.abc import Sequence

from ..git.ChangedFile import ChangedFile
from .DisplayItem import DisplayItem


class FileCursor:
    """Cursor that only ever rests on file entries.

    `index` is -1 when the list holds no file entry.
    """

    def __init__(self, items: Sequence[DisplayItem] = ()):
        self.items: list[DisplayItem] = list(items)
        self.index = -1
        self.first()

    def set_items(self, items: Sequence[DisplayItem]) -> None:
        """Replace the items after a query change or view mode switch."""
        self.items = list(items)
        self.first()

    @property
    def selected(self) -> ChangedFile | None:
        if 0 <= self.index < len(self.items):
            return self.items[self.index].file
        return None

    def first(self) -> None:
        self.index = self._nearest(0)

    def last(self) -> None:
        self.index = self._nearest(len(self.items) - 1, forward=False)

    def move(self, delta: int) -> None:
        """Move by delta rows, stepping over headers in the direction of travel."""
        if not self.items or delta == 0:
            return
        target = min(max(self.index + delta, 0), len(self.items) - 1)
        resolved = self._nearest(target, forward=delta > 0)
        if resolved != -1:
            self.index = resolved

    def page(self, delta: int, page_size: int) -> None:
        self.move(delta * max(page_size, 1))

    def select_path(self, path: str) -> bool:
        """Put the cursor on the entry for path, if it is listed."""
        for position, item in enumerate(self.items):
            if item.file is not None and item.file.path == path:
                self.index = position
                return True
        return False

    def _nearest(self, start: int, forward: bool = True) -> int:
        """Closest file entry from start, searching the preferred direction first."""
        if not self.items:
            return -1
        start = min(max(start, 0), len(self.items) - 1)
        ahead = range(start, len(self.items))
        behind = range(start, -1, -1)
        for candidates in (ahead, behind) if forward else (behind, ahead):
            for position in candidates:
                if not self.items[position].is_header:
                    return position
        return -1
