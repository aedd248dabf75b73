"""Search Typer app factory."""

from typing import Annotated

import typer

from gdiffs.api.diff.cmd_search import cmd_search
from gdiffs.cli._handle_stage_result import _handle_stage_result
from gdiffs.cli.display.tables import print_search_table


def search() -> typer.Typer:
    """Create and configure the search Typer app."""
    app = typer.Typer(
        name="search",
        help="Fuzzy-search the lines of one file's diff",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        path: Annotated[str | None, typer.Argument(help="File path relative to the repository root")] = None,
        query: Annotated[str | None, typer.Argument(help="Characters to find, in order")] = None,
        base: Annotated[str | None, typer.Option("--base", "-b", help="Base revision (default: main or master)")] = None,
        head: Annotated[str | None, typer.Option("--head", help="Head revision, '' for the working tree")] = None,
        view: Annotated[str | None, typer.Option("--view", "-V", help="View mode: both, new or old")] = None,
        repo: Annotated[str, typer.Option("--repo", "-C", help="Directory inside the repository")] = ".",
        limit: Annotated[int, typer.Option("--limit", "-n", help="Maximum number of hits")] = 50,
    ) -> None:
        """Search one file's diff; each hit names the row to jump to."""
        if path is None or query is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(1)

        run = _handle_stage_result(cmd_search, ctx, table_printer=print_search_table)
        run(path, query, base, head, view, repo, limit)

    return app
