from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer

from npmhook.core.config import load_config_file
from npmhook.core.errors import ErrorCode
from npmhook.core.result import Err
from npmhook.core.structured import StrDict
from npmhook.hook.contracts import ExecutionResult


def exit_with(err: str, *, code: ErrorCode) -> NoReturn:
    typer.echo(f"error: {err}", err=True)
    raise typer.Exit(code=int(code))


def load_raw_config(path: Path | None) -> StrDict:
    if path is None:
        return {}
    result = load_config_file(path)
    if isinstance(result, Err):
        exit_with(result.error.message, code=ErrorCode.USER_ERROR)
    return result.value


def echo_json(data: object) -> None:
    typer.echo(json.dumps(data, indent=2, sort_keys=False))


def hook_error_code(kind: str) -> ErrorCode:
    if kind in {"invalid_config", "invalid_package_dir", "invalid_context"}:
        return ErrorCode.USER_ERROR
    if kind in {"descriptor_missing", "descriptor_invalid", "io_failed"}:
        return ErrorCode.IO_ERROR
    if kind == "npm_unavailable":
        return ErrorCode.ENV_ERROR
    return ErrorCode.PUBLISH_ERROR


def result_exit_code(result: ExecutionResult) -> ErrorCode:
    if result.success:
        return ErrorCode.OK
    kind = result.outputs.get("error_kind")
    return hook_error_code(kind if isinstance(kind, str) else "")
