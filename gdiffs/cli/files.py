"""Files Typer app factory."""

from typing import Annotated

import typer

from gdiffs.api.files.cmd_list import cmd_list
from gdiffs.cli._handle_stage_result import _handle_stage_result
from gdiffs.cli.display.tables import print_files_table


def files() -> typer.Typer:
    """Create and configure the files Typer app."""
    app = typer.Typer(
        name="files",
        help="List changed files",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        base: Annotated[str | None, typer.Option("--base", "-b", help="Base revision (default: main or master)")] = None,
        head: Annotated[str | None, typer.Option("--head", help="Head revision, '' for the working tree")] = None,
        mode: Annotated[str | None, typer.Option("--mode", "-m", help="Grouping: folder, type or raw")] = None,
        query: Annotated[str, typer.Option("--query", "-q", help="Fuzzy filter on paths")] = "",
        repo: Annotated[str, typer.Option("--repo", "-C", help="Directory inside the repository")] = ".",
    ) -> None:
        """List files changed between two revisions."""
        _handle_stage_result(cmd_list, ctx, table_printer=print_files_table)(base, head, mode, query, repo)

    return app
