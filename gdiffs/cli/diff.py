"""Diff Typer app factory."""

from typing import Annotated

import typer

from gdiffs.api.diff.cmd_show import cmd_show
from gdiffs.cli._handle_stage_result import _handle_stage_result
from gdiffs.cli.display.tables import print_diff_table


def diff() -> typer.Typer:
    """Create and configure the diff Typer app."""
    app = typer.Typer(
        name="diff",
        help="Show the diff of one file",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        path: Annotated[str | None, typer.Argument(help="File path relative to the repository root")] = None,
        base: Annotated[str | None, typer.Option("--base", "-b", help="Base revision (default: main or master)")] = None,
        head: Annotated[str | None, typer.Option("--head", help="Head revision, '' for the working tree")] = None,
        view: Annotated[str | None, typer.Option("--view", "-V", help="View mode: both, new or old")] = None,
        repo: Annotated[str, typer.Option("--repo", "-C", help="Directory inside the repository")] = ".",
    ) -> None:
        """Show one file's diff as aligned rows."""
        if path is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(1)

        _handle_stage_result(cmd_show, ctx, table_printer=print_diff_table)(path, base, head, view, repo)

    return app
