"""Per-session cache of parsed file diffs."""

import logging
from collections.abc import Callable

from .FileDiff import FileDiff

logger = logging.getLogger(__name__)


class FileDiffCache:
    """Cache FileDiff results keyed by (path, base, head).

    Binding the cache to a different pair of revisions drops every entry,
    so a session never serves a diff computed for other revisions.

    For callers that keep a session open, such as library users or an
    interactive front end. The `cmd_*` commands are one-shot and do not
    cache.
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[str, str, str], FileDiff] = {}
        self._revisions: tuple[str, str] | None = None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def bind(self, base: str, head: str) -> None:
        """Attach the cache to a revision pair, invalidating on change."""
        if self._revisions is not None and self._revisions != (base, head):
            logger.debug("Revisions changed to %s...%s, dropping %d cached diffs", base, head, len(self))
            self._entries.clear()
        self._revisions = (base, head)

    def get(self, path: str, base: str, head: str) -> FileDiff | None:
        return self._entries.get((path, base, head))

    def put(self, path: str, base: str, head: str, diff: FileDiff) -> None:
        self.bind(base, head)
        self._entries[(path, base, head)] = diff

    def get_or_load(self, path: str, base: str, head: str, loader: Callable[[], FileDiff]) -> FileDiff:
        """Return the cached diff or load, store and return it."""
        self.bind(base, head)
        cached = self.get(path, base, head)
        if cached is not None:
            return cached
        diff = loader()
        self.put(path, base, head, diff)
        return diff

    def invalidate(self) -> None:
        self._entries.clear()
        self._revisions = None
