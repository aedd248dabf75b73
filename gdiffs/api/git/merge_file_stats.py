"""Attach numstat counts to changed files."""

from dataclasses import replace

from .ChangedFile import ChangedFile


def merge_file_stats(files: list[ChangedFile], stats: dict[str, tuple[int, int]]) -> list[ChangedFile]:
    """Return files with additions and deletions filled from stats.

    Files missing from stats keep zero counts.
    """
    merged: list[ChangedFile] = []
    for changed in files:
        counts = stats.get(changed.path)
        if counts is None:
            merged.append(changed)
        else:
            merged.append(replace(changed, additions=counts[0], deletions=counts[1]))
    return merged
