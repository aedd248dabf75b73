"""Validate command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from .schema_registry import schema_registry


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate output dict against the schema of the command that built it.

    Functions outside `gdiffs.api.<domain>.cmd_*`, or without a schema,
    pass through unchanged.

    Raises:
        ValueError: If validation fails
    """
    schema_class = schema_registry.output_schema_for(func)
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        domain, command_name = schema_registry.command_key(func)  # type: ignore[misc]
        raise ValueError(f"Output validation failed for {domain}.{command_name}: {e}\nGot output: {output}") from e
