from __future__ import annotations

from pathlib import Path

import typer

from npmhook.cli.commands._helpers import echo_json, load_raw_config, result_exit_code
from npmhook.cli.context import build_context
from npmhook.hook.contracts import ExecuteRequest, ReleaseContext
from npmhook.hook.wire import encode_execution
from npmhook.output.console import Style


def run(
    hook: str = typer.Argument(..., help="Lifecycle hook, e.g. before-publish or after-publish."),
    version: str = typer.Option(..., "--version", help="Target release version."),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Hook configuration file (TOML, or JSON by .json extension).",
    ),
    previous_version: str = typer.Option("", "--previous-version"),
    tag_name: str = typer.Option("", "--tag-name"),
    release_type: str = typer.Option("", "--release-type"),
    branch: str = typer.Option("", "--branch"),
    commit: str = typer.Option("", "--commit"),
    dry_run: bool = typer.Option(
        True,
        "--dry-run/--no-dry-run",
        help="Report what would happen without writing or publishing.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Run one lifecycle hook against the package."""
    ctx = build_context()
    request = ExecuteRequest(
        hook=hook,
        config=load_raw_config(config),
        context=ReleaseContext(
            version=version,
            previous_version=previous_version,
            tag_name=tag_name,
            release_type=release_type,
            branch=branch,
            commit_sha=commit,
        ),
        dry_run=dry_run,
    )
    result = ctx.plugin.execute(request)

    if as_json:
        echo_json(encode_execution(result))
    elif result.success:
        ctx.console.success(result.message)
        for key, value in result.outputs.items():
            ctx.console.print(f"{key}: {value}", Style.DIM)

    code = result_exit_code(result)
    if not code.is_success:
        raise typer.Exit(code=int(code))
