from __future__ import annotations

from pathlib import Path

import typer

from npmhook.cli.commands._helpers import echo_json, load_raw_config
from npmhook.cli.context import build_context
from npmhook.core.errors import ErrorCode
from npmhook.hook.wire import encode_validation


def validate(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Hook configuration file (TOML, or JSON by .json extension).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Check a hook configuration without touching the package."""
    ctx = build_context()
    result = ctx.plugin.validate(load_raw_config(config))

    if as_json:
        echo_json(encode_validation(result))
    elif result.valid:
        ctx.console.success("configuration is valid")
    else:
        for e in result.errors:
            ctx.console.error(f"{e.field}: {e.message}")

    if not result.valid:
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
