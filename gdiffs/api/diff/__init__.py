"""Diff module - parse, align and project unified diffs."""

from .AlignedRow import AlignedRow
from .ChangeSetAligner import ChangeSetAligner
from .DiffLine import DiffLine
from .FileDiff import FileDiff
from .FileDiffCache import FileDiffCache
from .Hunk import Hunk
from .LineKind import LineKind
from .ProjectedLine import ProjectedLine
from .search_lines import search_lines
from .SearchHit import SearchHit
from .UnifiedDiffParser import UnifiedDiffParser
from .ViewMode import ViewMode
from .ViewProjector import ViewProjector

__all__ = [
    "AlignedRow",
    "ChangeSetAligner",
    "DiffLine",
    "FileDiff",
    "FileDiffCache",
    "Hunk",
    "LineKind",
    "ProjectedLine",
    "SearchHit",
    "UnifiedDiffParser",
    "ViewMode",
    "ViewProjector",
    "search_lines",
]
