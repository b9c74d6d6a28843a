"""JSON encoding of the host contract.

A request document looks like::

    {"method": "execute", "hook": "after-publish", "dry_run": true,
     "config": {...}, "context": {"version": "1.2.3", ...}}

``method`` is one of ``info``, ``validate`` or ``execute``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from npmhook.core.result import Err, Ok, Result
from npmhook.core.structured import StrDict, as_str_dict, get_bool, get_str, get_table
from npmhook.hook.contracts import (
    ExecuteRequest,
    ExecutionResult,
    ReleaseContext,
    ValidationResult,
)
from npmhook.hook.plugin import NpmPlugin

Method = Literal["info", "validate", "execute"]
METHODS: tuple[Method, ...] = ("info", "validate", "execute")


def decode_context(data: Mapping[str, object]) -> ReleaseContext:
    return ReleaseContext(
        version=get_str(data, "version") or "",
        previous_version=get_str(data, "previous_version") or "",
        tag_name=get_str(data, "tag_name") or "",
        release_type=get_str(data, "release_type") or "",
        branch=get_str(data, "branch") or "",
        commit_sha=get_str(data, "commit_sha") or "",
    )


def decode_execute_request(data: Mapping[str, object]) -> Result[ExecuteRequest, str]:
    hook = get_str(data, "hook")
    if hook is None:
        return Err("execute request needs a 'hook' string")
    return Ok(
        ExecuteRequest(
            hook=hook,
            config=get_table(data, "config") or {},
            context=decode_context(get_table(data, "context") or {}),
            dry_run=get_bool(data, "dry_run") or False,
        )
    )


def encode_execution(result: ExecutionResult) -> StrDict:
    return {
        "success": result.success,
        "message": result.message,
        "error": result.error,
        "outputs": dict(result.outputs),
    }


def encode_validation(result: ValidationResult) -> StrDict:
    return {
        "valid": result.valid,
        "errors": [{"field": e.field, "message": e.message} for e in result.errors],
    }


def handle_document(document: object, plugin: NpmPlugin) -> Result[StrDict, str]:
    """Answer one decoded JSON request.

    Malformed requests are returned as ``Err`` with a description; they never
    reach the plugin.
    """
    data = as_str_dict(document)
    if data is None:
        return Err("request must be a JSON object")

    method = get_str(data, "method")
    match method:
        case "info":
            return Ok(plugin.get_info().to_dict())
        case "validate":
            return Ok(encode_validation(plugin.validate(get_table(data, "config") or {})))
        case "execute":
            request = decode_execute_request(data)
            if isinstance(request, Err):
                return request
            return Ok(encode_execution(plugin.execute(request.value)))
        case _:
            return Err(f"unknown method {method!r} (expected one of: {', '.join(METHODS)})")
