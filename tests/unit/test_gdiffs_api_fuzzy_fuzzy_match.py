"""Unit tests for gdiffs.api.fuzzy.fuzzy_match."""

import pytest

from gdiffs.api.fuzzy.fuzzy_match import fuzzy_match

pytestmark = pytest.mark.unit


class TestFuzzyMatch:
    def test_empty_query(self):
        assert fuzzy_match("", ["a", "b"]) == []

    def test_subsequence_required(self):
        matches = fuzzy_match("mgo", ["main.go", "mod.rs", "go.mod"])
        assert [m.candidate for m in matches] == ["main.go"]

    def test_case_insensitive(self):
        matches = fuzzy_match("readme", ["README.md", "src/app.py"])
        assert [m.index for m in matches] == [0]

    def test_positions_point_into_candidate(self):
        [match] = fuzzy_match("mn", ["main.go"])
        assert match.positions == (0, 3)
        assert "".join(match.candidate[p] for p in match.positions) == "mn"

    def test_contiguous_match_ranks_first(self):
        matches = fuzzy_match("app", ["a/p/p.txt", "src/app.py"])
        assert [m.candidate for m in matches] == ["src/app.py", "a/p/p.txt"]
        assert matches[0].score == 100

    def test_ties_keep_candidate_order(self):
        matches = fuzzy_match("x", ["x1", "x2", "x3"])
        assert [m.index for m in matches] == [0, 1, 2]

    def test_no_candidates(self):
        assert fuzzy_match("abc", []) == []
