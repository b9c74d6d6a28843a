from __future__ import annotations

import json
import sys

import typer

from npmhook.cli.commands._helpers import echo_json, exit_with
from npmhook.cli.context import build_context
from npmhook.core.errors import ErrorCode
from npmhook.core.result import Err
from npmhook.hook.wire import handle_document


def serve() -> None:
    """Answer one JSON request from stdin with a JSON response on stdout.

    Hook failures are part of the response and exit 0; only a malformed
    request exits non-zero.
    """
    ctx = build_context()
    raw = sys.stdin.read()
    try:
        document: object = json.loads(raw)
    except json.JSONDecodeError as e:
        exit_with(f"invalid JSON request: {e}", code=ErrorCode.USER_ERROR)

    response = handle_document(document, ctx.plugin)
    if isinstance(response, Err):
        echo_json({"error": response.error})
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    echo_json(response.value)
