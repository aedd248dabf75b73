"""Unit tests for gdiffs.api.diff.ChangeSetAligner."""

import pytest

from gdiffs.api.diff.AlignedRow import AlignedRow
from gdiffs.api.diff.ChangeSetAligner import ChangeSetAligner
from gdiffs.api.diff.DiffLine import DiffLine
from gdiffs.api.diff.LineKind import LineKind
from gdiffs.api.diff.UnifiedDiffParser import UnifiedDiffParser

pytestmark = pytest.mark.unit

SCENARIO = "@@ -10,3 +10,4 @@\n a\n-b\n-c\n+B\n+C\n+D\n e\n"

MIXED = (
    "--- a/f\n+++ b/f\n"
    "@@ -1,6 +1,5 @@\n x\n-one\n+uno\n y\n-two\n-three\n+dos\n z\n"
    "@@ -40,2 +39,4 @@\n+new\n q\n-gone\n+here\n+also\n"
)


def _is_mirrored(row: AlignedRow) -> bool:
    return row.old_kind in (LineKind.CONTEXT, LineKind.HEADER) and row.new_kind == row.old_kind


class TestAlign:
    """Test ChangeSetAligner.align."""

    def test_scenario_rows(self):
        """1 context, 2 deletions, 3 additions, 1 context: 5 body rows after the header row."""
        hunks = UnifiedDiffParser().parse(SCENARIO).hunks
        assert len(hunks[0].body) == 7

        rows = ChangeSetAligner().align(hunks)
        assert len(rows) == 6
        assert rows[0].old_kind is LineKind.HEADER

        body = rows[1:]
        assert len(body) == 5
        assert body[0].old_kind is LineKind.CONTEXT
        assert (body[1].old_content, body[1].new_content) == ("b", "B")
        assert (body[2].old_content, body[2].new_content) == ("c", "C")
        assert not body[3].has_old
        assert body[3].new_content == "D"
        assert body[3].new_line_number == 13
        assert body[4].old_kind is LineKind.CONTEXT
        assert (body[4].old_line_number, body[4].new_line_number) == (13, 14)

    def test_deletion_only_run(self):
        rows = ChangeSetAligner().align(UnifiedDiffParser().parse("@@ -1,2 +1,0 @@\n-a\n-b\n").hunks)
        deletions = rows[1:]
        assert [row.old_content for row in deletions] == ["a", "b"]
        assert all(not row.has_new for row in deletions)
        assert all(row.new_kind is None and row.new_line_number == 0 for row in deletions)

    def test_buffers_flush_at_hunk_end(self):
        """Changes never pair across hunk boundaries."""
        text = "@@ -1 +0,0 @@\n-a\n@@ -5,0 +5 @@\n+b\n"
        rows = ChangeSetAligner().align(UnifiedDiffParser().parse(text).hunks)

        assert [row.old_kind for row in rows] == [LineKind.HEADER, LineKind.DELETION, LineKind.HEADER, None]
        assert rows[3].new_content == "b"

    def test_no_hunks(self):
        assert ChangeSetAligner().align([]) == []

    def test_idempotent(self):
        first = ChangeSetAligner().align(UnifiedDiffParser().parse(MIXED).hunks)
        second = ChangeSetAligner().align(UnifiedDiffParser().parse(MIXED).hunks)
        assert first == second

    @pytest.mark.parametrize("text", [SCENARIO, MIXED])
    def test_every_line_represented_once(self, text):
        """Filled sides minus mirrored rows equals the number of hunk lines."""
        for hunk in UnifiedDiffParser().parse(text).hunks:
            rows = ChangeSetAligner().align([hunk])
            filled = sum(row.has_old for row in rows) + sum(row.has_new for row in rows)
            mirrored = sum(_is_mirrored(row) for row in rows)
            assert filled - mirrored == len(hunk.lines)

    def test_context_splits_runs(self):
        rows = ChangeSetAligner().align(UnifiedDiffParser().parse(MIXED).hunks)
        pairs = [(row.old_content, row.new_content) for row in rows if not _is_mirrored(row)]
        assert pairs == [
            ("one", "uno"),
            ("two", "dos"),
            ("three", ""),
            ("", "new"),
            ("gone", "here"),
            ("", "also"),
        ]


class TestAlignedRow:
    """Test AlignedRow factories."""

    def test_pair_with_missing_side(self):
        row = AlignedRow.pair(None, DiffLine(LineKind.ADDITION, "x", new_line_number=4))
        assert row.to_dict() == {
            "old_line_number": 0,
            "old_content": "",
            "old_kind": None,
            "new_line_number": 4,
            "new_content": "x",
            "new_kind": "addition",
        }

    def test_mirror_copies_both_sides(self):
        row = AlignedRow.mirror(DiffLine(LineKind.CONTEXT, "same", 3, 5))
        assert (row.old_line_number, row.new_line_number) == (3, 5)
        assert row.old_content == row.new_content == "same"
