"""Folder expand/collapse state."""

from collections.abc import Iterable, Iterator
from pathlib import PurePosixPath

from ..git.ChangedFile import ChangedFile


class ExpandedPaths:
    """Set of expanded directory paths for one view session.

    Reset it whenever the changed file list is replaced.
    """

    def __init__(self, paths: Iterable[str] = ()):
        self._paths: set[str] = set(paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def is_expanded(self, path: str) -> bool:
        return path in self._paths

    def expand(self, path: str) -> None:
        self._paths.add(path)

    def collapse(self, path: str) -> None:
        self._paths.discard(path)

    def toggle(self, path: str) -> bool:
        """Flip a folder and return its new state."""
        if path in self._paths:
            self._paths.discard(path)
            return False
        self._paths.add(path)
        return True

    def expand_all(self, files: Iterable[ChangedFile]) -> None:
        """Expand every directory containing one of the files."""
        for changed in files:
            for parent in PurePosixPath(changed.path).parents:
                if str(parent) != ".":
                    self._paths.add(str(parent))

    def reset(self) -> None:
        self._paths.clear()
