"""Diff line kind enum."""

from enum import Enum


class LineKind(str, Enum):
    """Kind of a line inside a hunk."""

    CONTEXT = "context"
    ADDITION = "addition"
    DELETION = "deletion"
    HEADER = "header"
