"""Base output schema with standard errors and warnings fields."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Base schema for all command outputs."""

    errors: list[str] = Field(default_factory=list, description="Error messages, empty if none")
    warnings: list[str] = Field(default_factory=list, description="Warning messages, empty if none")
