from __future__ import annotations

import typer

from npmhook import __version__
from npmhook.cli.commands.info_cmd import info
from npmhook.cli.commands.run_cmd import run
from npmhook.cli.commands.serve_cmd import serve
from npmhook.cli.commands.validate_cmd import validate


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    invoke_without_command=True,
    help="Publish npm packages from a release pipeline.",
)


# Commands
app.command()(info)
app.command()(validate)
app.command()(run)
app.command()(serve)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def main() -> None:
    app()
