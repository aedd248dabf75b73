"""View configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ..diff.ViewMode import ViewMode
from ..files.FileViewMode import FileViewMode


class ViewConfig(BaseModel):
    """Default view modes."""

    model_config = ConfigDict(extra="forbid")

    file_view_mode: FileViewMode = Field(FileViewMode.FOLDER, description="folder, type or raw")
    diff_view_mode: ViewMode = Field(ViewMode.BOTH, description="both, new or old")
    expand_all: bool = Field(True, description="Start with every folder expanded")
