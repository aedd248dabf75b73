"""Git configuration."""

from pydantic import BaseModel, ConfigDict, Field


class GitConfig(BaseModel):
    """Revisions to compare and git invocation limits."""

    model_config = ConfigDict(extra="forbid")

    base: str | None = Field(None, description="Base revision, None to detect main/master")
    head: str = Field("HEAD", description="Head revision, empty string for the working tree")
    timeout_seconds: int = Field(30, gt=0, description="Timeout for each git invocation")
