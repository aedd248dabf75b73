"""Fuzzy content search over projected lines."""

from collections.abc import Sequence

from ..fuzzy.fuzzy_match import fuzzy_match
from .ProjectedLine import ProjectedLine
from .SearchHit import SearchHit


def search_lines(lines: Sequence[ProjectedLine], query: str) -> list[SearchHit]:
    """Rank projected lines against a query.

    Spaces in the query are ignored. An empty query lists every line in
    its original order.

    Args:
        lines: Lines produced by ViewProjector.project
        query: Search text

    Returns:
        Hits ordered best first
    """
    query = query.replace(" ", "")
    if not query:
        return [SearchHit(line=line) for line in lines]

    matches = fuzzy_match(query, [line.content for line in lines])
    return [SearchHit(line=lines[m.index], score=m.score, positions=m.positions) for m in matches]
