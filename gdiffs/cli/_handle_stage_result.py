"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("json", "yaml", "table")


def _display_format(ctx: typer.Context | None) -> str:
    """Display format stored by the root callback, yaml when unset.

    Raises:
        ValueError: If an invalid display format value is encountered.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value not in DISPLAY_FORMATS:
                raise ValueError(f"Invalid display_format value: {value!r}")
            return value
        current = current.parent
    return "yaml"


def _handle_stage_result(
    func: F,
    ctx: typer.Context | None = None,
    table_printer: Callable[[dict], None] | None = None,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    The wrapper runs the 4-stage pattern:
    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout as JSON, YAML, or a table when `table_printer` is given)

    Args:
        func: Function that returns StageResult
        ctx: Context of the invoking Typer callback; carries `--display`
        table_printer: Renderer used for `--display table`
    """
    display_format = _display_format(ctx)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from gdiffs.cli.display.CLIDisplay import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format, table_printer)

    return wrapper  # type: ignore[return-value]
