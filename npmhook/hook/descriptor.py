"""Reading package.json and rewriting its version field."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path

from npmhook.core.result import Err, Ok, Result
from npmhook.core.structured import StrDict, as_str_dict, get_str
from npmhook.hook.errors import HookError
from npmhook.hook.validators import validate_package_dir
from npmhook.platform.files import atomic_write_text

DESCRIPTOR_NAME = "package.json"

_INDENT_RE = re.compile(r"\A\s*\{[ \t]*\r?\n([ \t]+)\S")
_WS = " \t\r\n"


@dataclass(frozen=True, slots=True)
class PackageDescriptor:
    path: Path
    name: str
    version: str
    private: bool
    data: StrDict = field(repr=False)
    text: str = field(repr=False)


def read_descriptor(package_dir: Path) -> Result[PackageDescriptor, HookError]:
    path = package_dir / DESCRIPTOR_NAME
    try:
        # newline="": keep CRLF so a rewrite leaves line endings alone
        with path.open(encoding="utf-8", newline="") as f:
            text = f.read()
    except FileNotFoundError:
        return Err(
            HookError(
                kind="descriptor_missing",
                message=f"{DESCRIPTOR_NAME} not found in {package_dir}",
                hint="set package_dir to the directory containing package.json",
            )
        )
    except (OSError, UnicodeDecodeError) as e:
        return Err(
            HookError(
                kind="io_failed",
                message=f"failed to read {DESCRIPTOR_NAME}: {e}",
                hint=str(path),
            )
        )

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(
            HookError(
                kind="descriptor_invalid",
                message=f"invalid JSON in {DESCRIPTOR_NAME}: {e}",
                hint=str(path),
            )
        )
    except RecursionError:
        return Err(
            HookError(
                kind="descriptor_invalid",
                message=f"{DESCRIPTOR_NAME} is nested too deeply",
                hint=str(path),
            )
        )

    data = as_str_dict(obj)
    if data is None:
        return Err(
            HookError(
                kind="descriptor_invalid",
                message=f"invalid JSON root in {DESCRIPTOR_NAME}",
                hint=str(path),
            )
        )

    return Ok(
        PackageDescriptor(
            path=path,
            name=get_str(data, "name") or "",
            version=get_str(data, "version") or "",
            private=data.get("private") is True,
            data=data,
            text=text,
        )
    )


def load_package(package_dir: str, *, cwd: Path | None = None) -> Result[PackageDescriptor, HookError]:
    """Validate ``package_dir`` and read the descriptor inside it."""
    resolved = validate_package_dir(package_dir, cwd=cwd)
    if isinstance(resolved, Err):
        return Err(
            HookError(
                kind="invalid_package_dir",
                message=f"package_dir: {resolved.error}",
            )
        )
    return read_descriptor(resolved.value)


def _skip_ws(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WS:
        pos += 1
    return pos


def _version_span(text: str) -> tuple[int, int] | None:
    """Offsets of the top-level ``version`` value in ``text``.

    ``text`` must already be known to hold a JSON object. When the key is
    repeated the last one wins, as with ``json.loads``.
    """
    decoder = json.JSONDecoder()
    pos = _skip_ws(text, 0)
    if text[pos : pos + 1] != "{":
        return None
    pos = _skip_ws(text, pos + 1)
    if text[pos : pos + 1] == "}":
        return None

    span: tuple[int, int] | None = None
    while True:
        key, pos = decoder.raw_decode(text, pos)
        pos = _skip_ws(text, pos)
        if text[pos : pos + 1] != ":":
            return None
        start = _skip_ws(text, pos + 1)
        _, end = decoder.raw_decode(text, start)
        if key == "version":
            span = (start, end)
        pos = _skip_ws(text, end)
        if text[pos : pos + 1] == ",":
            pos = _skip_ws(text, pos + 1)
            continue
        return span


def render_with_version(descriptor: PackageDescriptor, version: str) -> str:
    """Return the descriptor text with only ``version`` replaced.

    The existing value is spliced in place, so every other byte of the file
    is kept. A descriptor without a top-level ``version`` is re-serialized
    with the version appended, following the file's indentation and
    trailing newline.
    """
    value = json.dumps(version, ensure_ascii=False)
    span = _version_span(descriptor.text)
    if span is not None:
        start, end = span
        return descriptor.text[:start] + value + descriptor.text[end:]

    data = dict(descriptor.data)
    data["version"] = version

    m = _INDENT_RE.match(descriptor.text)
    if m is not None:
        out = json.dumps(data, indent=m.group(1), ensure_ascii=False)
    elif "\n" in descriptor.text.strip():
        out = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        out = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if descriptor.text.endswith("\n"):
        out += "\n"
    return out


def write_version(descriptor: PackageDescriptor, version: str) -> Result[None, HookError]:
    content = render_with_version(descriptor, version)
    try:
        atomic_write_text(descriptor.path, content, encoding="utf-8")
    except OSError as e:
        return Err(
            HookError(
                kind="io_failed",
                message=f"failed to write {DESCRIPTOR_NAME}: {e}",
                hint=str(descriptor.path),
            )
        )
    return Ok(None)
