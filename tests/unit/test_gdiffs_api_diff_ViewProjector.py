"""Unit tests for gdiffs.api.diff.ViewProjector."""

import pytest

from gdiffs.api.diff.ChangeSetAligner import ChangeSetAligner
from gdiffs.api.diff.LineKind import LineKind
from gdiffs.api.diff.UnifiedDiffParser import UnifiedDiffParser
from gdiffs.api.diff.ViewMode import ViewMode
from gdiffs.api.diff.ViewProjector import ViewProjector

pytestmark = pytest.mark.unit

TEXT = "@@ -10,3 +10,4 @@\n a\n-b\n+B\n+C\n d\n"


@pytest.fixture
def rows():
    return ChangeSetAligner().align(UnifiedDiffParser().parse(TEXT).hunks)


class TestProject:
    """Test ViewProjector.project for each mode."""

    def test_both_mode(self, rows):
        lines = ViewProjector().project(rows, ViewMode.BOTH)
        assert [(line.kind, line.content, line.line_number) for line in lines] == [
            (LineKind.HEADER, "@@ -10,3 +10,4 @@", 0),
            (LineKind.CONTEXT, "a", 10),
            (LineKind.DELETION, "b", 11),
            (LineKind.ADDITION, "B", 11),
            (LineKind.ADDITION, "C", 12),
            (LineKind.CONTEXT, "d", 12),
        ]
        assert [line.source_row_index for line in lines] == [0, 1, 2, 2, 3, 4]

    def test_new_mode(self, rows):
        lines = ViewProjector().project(rows, ViewMode.NEW)
        assert [(line.kind, line.content, line.line_number) for line in lines] == [
            (LineKind.HEADER, "@@ -10,3 +10,4 @@", 0),
            (LineKind.CONTEXT, "a", 10),
            (LineKind.ADDITION, "B", 11),
            (LineKind.ADDITION, "C", 12),
            (LineKind.CONTEXT, "d", 13),
        ]

    def test_old_mode(self, rows):
        lines = ViewProjector().project(rows, ViewMode.OLD)
        assert [(line.kind, line.content, line.line_number) for line in lines] == [
            (LineKind.HEADER, "@@ -10,3 +10,4 @@", 0),
            (LineKind.CONTEXT, "a", 10),
            (LineKind.DELETION, "b", 11),
            (LineKind.CONTEXT, "d", 12),
        ]

    def test_mode_accepts_string(self, rows):
        assert ViewProjector().project(rows, "new") == ViewProjector().project(rows, ViewMode.NEW)

    def test_unknown_mode_rejected(self, rows):
        with pytest.raises(ValueError):
            ViewProjector().project(rows, "sideways")

    @pytest.mark.parametrize(
        "text",
        [
            TEXT,
            "@@ -1,3 +1,0 @@\n-x\n-y\n-z\n",
            "@@ -0,0 +1,2 @@\n+x\n+y\n",
            "@@ -1,4 +1,4 @@\n-a\n+b\n c\n-d\n-e\n+f\n",
        ],
    )
    def test_new_and_old_views_exclude_other_side(self, text):
        aligned = ChangeSetAligner().align(UnifiedDiffParser().parse(text).hunks)
        projector = ViewProjector()

        assert all(line.kind is not LineKind.DELETION for line in projector.project(aligned, ViewMode.NEW))
        assert all(line.kind is not LineKind.ADDITION for line in projector.project(aligned, ViewMode.OLD))

    def test_empty_rows(self):
        assert ViewProjector().project([], ViewMode.BOTH) == []

    def test_source_row_index_points_at_row(self, rows):
        for line in ViewProjector().project(rows, ViewMode.OLD):
            row = rows[line.source_row_index]
            assert line.content in (row.old_content, row.new_content)
