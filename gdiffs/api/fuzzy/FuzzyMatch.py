"""Fuzzy match dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FuzzyMatch:
    """A candidate that matched a query.

    `positions` are indexes into `candidate` of the matched characters,
    used to highlight the match.
    """

    index: int
    candidate: str
    score: float
    positions: tuple[int, ...]
