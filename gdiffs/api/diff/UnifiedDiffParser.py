"""Unified diff parser (UNO: single class)."""

import logging
import re

from .DiffLine import DiffLine
from .FileDiff import FileDiff
from .Hunk import Hunk
from .LineKind import LineKind

logger = logging.getLogger(__name__)

# Each count is optional; unified diff omits it for single-line ranges.
_HUNK_HEADER = re.compile(r"^@@ -(\d+)(?:,(\d+))?(?: \+(\d+)(?:,(\d+))?)?")


class UnifiedDiffParser:
    """Parse the unified diff text of one file into a FileDiff.

    The parser never raises on malformed input. Unknown lines are skipped
    and unparsable hunk headers fall back to unified-diff defaults.
    """

    def parse(self, raw_diff_text: str) -> FileDiff:
        """Parse raw diff text.

        Args:
            raw_diff_text: Output of `git diff` for a single file

        Returns:
            FileDiff with paths and hunks, empty when the text has no hunks
        """
        old_path = ""
        new_path = ""
        binary = False
        hunks: list[Hunk] = []

        header: tuple[int, int, int, int] | None = None
        lines: list[DiffLine] = []
        old_number = new_number = 0
        old_left = new_left = 0

        for line in self._split(raw_diff_text):
            in_body = header is not None and (old_left > 0 or new_left > 0)

            if not in_body and line.startswith("---"):
                old_path = self._path(line, "a/")
                continue
            if not in_body and line.startswith("+++"):
                new_path = self._path(line, "b/")
                continue

            if line.startswith("@@"):
                if header is not None:
                    hunks.append(Hunk(*header, lines=tuple(lines)))
                header = self.parse_header(line)
                old_number, old_left = header[0], header[1]
                new_number, new_left = header[2], header[3]
                lines = [DiffLine(LineKind.HEADER, line)]
                continue

            if header is None:
                if line.startswith("Binary files "):
                    binary = True
                continue

            marker = line[:1]
            if marker == "+":
                lines.append(DiffLine(LineKind.ADDITION, line[1:], new_line_number=new_number))
                new_number += 1
                new_left -= 1
            elif marker == "-":
                lines.append(DiffLine(LineKind.DELETION, line[1:], old_line_number=old_number))
                old_number += 1
                old_left -= 1
            elif marker in (" ", ""):
                lines.append(DiffLine(LineKind.CONTEXT, line[1:], old_number, new_number))
                old_number += 1
                new_number += 1
                old_left -= 1
                new_left -= 1
            elif marker != "\\":
                logger.debug("Skipping unrecognized diff line: %r", line)

        if header is not None:
            hunks.append(Hunk(*header, lines=tuple(lines)))

        return FileDiff(old_path=old_path, new_path=new_path, hunks=tuple(hunks), binary=binary)

    @staticmethod
    def parse_header(line: str) -> tuple[int, int, int, int]:
        """Parse `@@ -a,b +c,d @@` into (old_start, old_count, new_start, new_count).

        Omitted counts default to 1. A header that does not match at all
        yields starts of 0 with counts of 1.
        """
        match = _HUNK_HEADER.match(line)
        if match is None:
            logger.debug("Unparsable hunk header: %r", line)
            return (0, 1, 0, 1)

        old_start, old_count, new_start, new_count = match.groups()
        return (
            int(old_start),
            int(old_count) if old_count is not None else 1,
            int(new_start) if new_start is not None else 0,
            int(new_count) if new_count is not None else 1,
        )

    @staticmethod
    def _split(text: str) -> list[str]:
        if not text:
            return []
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    @staticmethod
    def _path(line: str, prefix: str) -> str:
        _, _, path = line.partition(" ")
        # plain `diff -u` appends a tab and a timestamp
        path = path.split("\t", 1)[0]
        if path.startswith(prefix):
            path = path[len(prefix) :]
        return path
