"""Command result carrying the 4-stage announce/progress/result/output pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

ProgressCallback = Callable[["StageResult"], Iterator[tuple[float, str]]]


@dataclass
class StageResult:
    """What a `cmd_*` function hands back before doing any work.

    Draining `progress_callback` performs the work: it yields
    (fraction, message) pairs and fills `result`, `output` and `success`.
    """

    announce: str
    progress_callback: ProgressCallback
    result: str = ""
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = False

    def run(self) -> "StageResult":
        """Drain the progress generator without displaying it."""
        for _ in self.progress_callback(self):
            pass
        return self
