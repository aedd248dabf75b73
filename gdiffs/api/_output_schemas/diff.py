"""Output schemas for diff commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class DiffShowOutput(BaseOutputSchema):
    """Output schema for diff show."""

    path: str = Field(..., description="File path requested")
    base: str = Field(..., description="Base revision compared")
    head: str = Field(..., description="Head revision compared, empty for the working tree")
    view_mode: str = Field(..., description="both, new or old")
    old_path: str = Field(..., description="Path on the old side")
    new_path: str = Field(..., description="Path on the new side")
    binary: bool = Field(..., description="True when git reported a binary file")
    hunk_count: int = Field(..., description="Number of hunks")
    rows: list[dict[str, Any]] = Field(..., description="Aligned side-by-side rows")
    lines: list[dict[str, Any]] = Field(..., description="Projected lines for the view mode")


class DiffSearchOutput(BaseOutputSchema):
    """Output schema for diff search."""

    path: str = Field(..., description="File path searched")
    query: str = Field(..., description="Query as typed")
    view_mode: str = Field(..., description="both, new or old")
    hits: list[dict[str, Any]] = Field(..., description="Matching lines, best first")


schema_registry.register_output_schema("diff", "show", DiffShowOutput)
schema_registry.register_output_schema("diff", "search", DiffSearchOutput)
