"""Output schemas for files commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class FilesListOutput(BaseOutputSchema):
    """Output schema for files list."""

    base: str = Field(..., description="Base revision compared")
    head: str = Field(..., description="Head revision compared, empty for the working tree")
    mode: str = Field(..., description="folder, type or raw")
    query: str = Field(..., description="Filter query, empty if none")
    file_count: int = Field(..., description="Number of changed files before filtering")
    items: list[dict[str, Any]] = Field(..., description="Display items in order")
    selected: int = Field(..., description="Index of the first selectable item, -1 if none")


schema_registry.register_output_schema("files", "list", FilesListOutput)
