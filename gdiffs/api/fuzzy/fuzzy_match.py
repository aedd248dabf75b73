"""Subsequence fuzzy matching backed by rapidfuzz."""

from collections.abc import Sequence

from rapidfuzz import fuzz
from rapidfuzz.distance import LCSseq

from .FuzzyMatch import FuzzyMatch


def fuzzy_match(query: str, candidates: Sequence[str]) -> list[FuzzyMatch]:
    """Rank candidates containing every query character in order.

    Matching is case-insensitive. Candidates are ranked by rapidfuzz's
    partial ratio, best first; equal scores keep candidate order.

    Args:
        query: Text typed by the user
        candidates: Strings to search

    Returns:
        Matches best first, empty for an empty query
    """
    if not query:
        return []

    needle = _fold(query)
    matches: list[FuzzyMatch] = []
    for index, candidate in enumerate(candidates):
        haystack = _fold(candidate)
        if LCSseq.similarity(needle, haystack, processor=None) < len(needle):
            continue
        score = fuzz.partial_ratio(needle, haystack, processor=None)
        matches.append(FuzzyMatch(index, candidate, score, _positions(needle, haystack)))

    matches.sort(key=lambda match: (-match.score, match.index))
    return matches


def _positions(needle: str, haystack: str) -> tuple[int, ...]:
    positions: list[int] = []
    for opcode in LCSseq.opcodes(needle, haystack):
        if opcode.tag == "equal":
            positions.extend(range(opcode.dest_start, opcode.dest_end))
    return tuple(positions)


def _fold(text: str) -> str:
    # lowercase without changing length so positions stay valid
    return "".join(ch.lower() if len(ch.lower()) == 1 else ch for ch in text)
