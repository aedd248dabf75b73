"""Diff view mode enum."""

from enum import Enum


class ViewMode(str, Enum):
    """Which side of the diff a single-column pane shows."""

    BOTH = "both"
    NEW = "new"
    OLD = "old"
