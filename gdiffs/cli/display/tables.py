"""Rich table renderers for `--display table`."""

import sys
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

_KIND_STYLES = {
    "addition": "green",
    "deletion": "red",
    "header": "cyan",
    "context": "",
}

_STATUS_STYLES = {"A": "green", "D": "red", "M": "yellow", "R": "magenta", "C": "magenta", "?": "dim"}


def _number(value: int) -> str:
    return str(value) if value else ""


def _cell(content: str | None, kind: str | None) -> Text:
    if kind is None:
        return Text("")
    return Text(content or "", style=_KIND_STYLES.get(kind, ""))


def print_diff_table(output: dict[str, Any], console: Console | None = None) -> None:
    """Print aligned rows side by side, or projected lines for new/old views."""
    console = console or Console(file=sys.stdout)
    title = output.get("new_path") or output.get("path", "")

    if output.get("view_mode", "both") != "both":
        table = Table(title=title, header_style="bold cyan", show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column(output["view_mode"].capitalize())
        for line in output.get("lines", []):
            table.add_row(_number(line["line_number"]), _cell(line["content"], line["kind"]))
        console.print(table)
        return

    table = Table(title=title, header_style="bold cyan", expand=True)
    table.add_column("#", justify="right", style="dim", no_wrap=True)
    table.add_column("Old", ratio=1)
    table.add_column("#", justify="right", style="dim", no_wrap=True)
    table.add_column("New", ratio=1)
    for row in output.get("rows", []):
        table.add_row(
            _number(row["old_line_number"]),
            _cell(row["old_content"], row["old_kind"]),
            _number(row["new_line_number"]),
            _cell(row["new_content"], row["new_kind"]),
        )
    console.print(table)


def print_files_table(output: dict[str, Any], console: Console | None = None) -> None:
    """Print the grouped file list, indented by depth."""
    console = console or Console(file=sys.stdout)
    table = Table(
        title=f"{output.get('base', '')}...{output.get('head', '') or 'working tree'}",
        header_style="bold cyan",
    )
    table.add_column("File")
    table.add_column("Status", justify="center")
    table.add_column("+", justify="right", style="green")
    table.add_column("-", justify="right", style="red")

    folder_mode = output.get("mode") == "folder"
    for position, item in enumerate(output.get("items", [])):
        indent = "  " * item["depth"]
        if item["kind"] == "folder_header":
            marker = "▾" if item["expanded"] else "▸"
            table.add_row(Text(f"{indent}{marker} {item['title']}/", style="bold blue"), "", "", "")
            continue
        if item["kind"] == "type_header":
            table.add_row(Text(f"{indent}{item['title']}", style="bold"), "", "", "")
            continue

        changed = item["file"]
        name = changed["path"].rsplit("/", 1)[-1] if folder_mode else changed["path"]
        if changed["old_path"]:
            name = f"{changed['old_path']} → {name}"
        style = "reverse" if position == output.get("selected") else ""
        table.add_row(
            Text(f"{indent}{name}", style=style),
            Text(changed["status"], style=_STATUS_STYLES.get(changed["status"], "")),
            _number(changed["additions"]),
            _number(changed["deletions"]),
        )
    console.print(table)


def print_search_table(output: dict[str, Any], console: Console | None = None) -> None:
    """Print search hits with matched characters highlighted."""
    console = console or Console(file=sys.stdout)
    table = Table(title=f"{output.get('path', '')}: {output.get('query', '')!r}", header_style="bold cyan")
    table.add_column("Row", justify="right", style="dim")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Line")
    table.add_column("Score", justify="right")

    for hit in output.get("hits", []):
        content = _cell(hit["content"], hit["kind"])
        for position in hit["positions"]:
            content.stylize("bold underline", position, position + 1)
        table.add_row(
            str(hit["source_row_index"]),
            _number(hit["line_number"]),
            content,
            f"{hit['score']:.0f}",
        )
    console.print(table)
