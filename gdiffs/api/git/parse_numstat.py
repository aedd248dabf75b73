"""Parse `git diff --numstat` output."""

import re

# `src/{old => new}/file.py` form used for renames inside a common prefix
_BRACED_RENAME = re.compile(r"^(.*)\{(.*) => (.*)\}(.*)$")


def parse_numstat(text: str) -> dict[str, tuple[int, int]]:
    """Parse numstat lines into a path -> (additions, deletions) map.

    Binary files report `-` counts, recorded as 0. Lines whose counts are
    not numbers are skipped. Renamed paths resolve to the new path.

    Args:
        text: Raw git output

    Returns:
        Stats keyed by current path
    """
    stats: dict[str, tuple[int, int]] = {}
    for line in text.splitlines():
        parts = line.split("\t")
        if len(parts) < 3:
            parts = line.split(None, 2)
        if len(parts) < 3:
            continue

        additions = _count(parts[0])
        deletions = _count(parts[1])
        if additions is None or deletions is None:
            continue

        stats[_new_path(parts[2])] = (additions, deletions)
    return stats


def _count(token: str) -> int | None:
    if token == "-":
        return 0
    try:
        value = int(token)
    except ValueError:
        return None
    return value if value >= 0 else None


def _new_path(path: str) -> str:
    braced = _BRACED_RENAME.match(path)
    if braced:
        prefix, _old, new, suffix = braced.groups()
        return (prefix + new + suffix).replace("//", "/")
    if " => " in path:
        return path.split(" => ", 1)[1]
    return path
