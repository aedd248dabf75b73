"""Run command once and display result using 4-stage pattern."""

import logging
import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

from gdiffs.api.config.ConfigError import ConfigError
from gdiffs.api.config.GdiffsConfig import GdiffsConfig
from gdiffs.api.validate_output import validate_output
from gdiffs.utils.logger import configure_logging

F = TypeVar("F", bound=Callable)

logger = logging.getLogger(__name__)


def _configure_logging_from_config() -> None:
    try:
        level = GdiffsConfig.load().log.level
    except ConfigError:
        # The command reports the config problem itself.
        level = "INFO"
    configure_logging(level=level)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
    table_printer: Callable[[dict], None] | None = None,
) -> None:
    """Run command once, display it, and exit with 0 on success or 1 on failure.

    Commands handle their exceptions internally and report errors through
    their output schema.
    """
    _configure_logging_from_config()
    logger.debug("Running %s", func.__name__)

    # Stage 1: Announce
    result = func(*args, **kwargs)
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)
    for warning in result.output.get("warnings", []):
        display.warning(warning)

    # Stage 4: Output
    if display_format == "table" and table_printer is not None and result.success:
        table_printer(result.output)
    else:
        display.json_output(result.output, format="json" if display_format == "json" else "yaml")

    sys.exit(0 if result.success else 1)
