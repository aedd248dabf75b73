"""Output schemas keyed by (domain, command)."""

from collections.abc import Callable

from pydantic import BaseModel


class SchemaRegistry:
    """Maps `gdiffs.api.<domain>.cmd_<command>` functions to their output models."""

    def __init__(self) -> None:
        self._schemas: dict[tuple[str, str], type[BaseModel]] = {}

    def register_output_schema(self, domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
        key = (domain, command_name)
        if key in self._schemas:
            raise ValueError(f"Schema already registered for {domain}.{command_name}")
        self._schemas[key] = schema_class

    def get_output_schema(self, domain: str, command_name: str) -> type[BaseModel] | None:
        return self._schemas.get((domain, command_name))

    @staticmethod
    def command_key(func: Callable) -> tuple[str, str] | None:
        """(domain, command) for a `gdiffs.api.<domain>` `cmd_*` function, else None."""
        module_parts = func.__module__.split(".")
        if len(module_parts) < 3 or module_parts[:2] != ["gdiffs", "api"]:
            return None
        if not func.__name__.startswith("cmd_"):
            return None
        return module_parts[2], func.__name__[len("cmd_") :]

    def output_schema_for(self, func: Callable) -> type[BaseModel] | None:
        key = self.command_key(func)
        return self.get_output_schema(*key) if key is not None else None


schema_registry = SchemaRegistry()
