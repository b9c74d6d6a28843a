"""Per-field checks for the npm hook configuration.

The registry, tag, access and OTP values end up as ``npm publish``
arguments, and ``package_dir`` becomes the working directory of that
command, so every check errs on the side of rejecting.
"""

from __future__ import annotations

import re
from pathlib import Path
from urllib.parse import urlsplit

from npmhook.core.result import Err, Ok, Result

__all__ = [
    "validate_access",
    "validate_otp",
    "validate_package_dir",
    "validate_registry",
    "validate_tag",
]

MAX_TAG_LENGTH = 128
LOCAL_REGISTRY_HOSTS = frozenset({"localhost", "127.0.0.1"})
ACCESS_LEVELS = frozenset({"public", "restricted"})

_TAG_RE = re.compile(r"[A-Za-z0-9_][A-Za-z0-9._-]*")
_OTP_RE = re.compile(r"[0-9]{6,8}")


def validate_registry(registry: str) -> Result[None, str]:
    if not registry:
        return Ok(None)

    # \n, \r, \t and friends would split or extend the npm argument list
    if any(c < " " or c == "\x7f" for c in registry):
        return Err("registry URL must not contain control characters")

    try:
        parts = urlsplit(registry)
        host = parts.hostname
    except ValueError as e:
        return Err(f"invalid registry URL: {e}")

    if not parts.scheme or not host:
        return Err("registry must be an absolute URL")

    scheme = parts.scheme.lower()
    if scheme == "https":
        return Ok(None)
    if scheme == "http":
        if host in LOCAL_REGISTRY_HOSTS:
            return Ok(None)
        return Err("registry must use https (http is only allowed for localhost)")
    return Err(f"unsupported registry scheme: {parts.scheme}")


def validate_tag(tag: str) -> Result[None, str]:
    """Check an npm dist-tag name."""
    if not tag:
        return Ok(None)
    if len(tag) > MAX_TAG_LENGTH:
        return Err(f"tag must be at most {MAX_TAG_LENGTH} characters")
    if _TAG_RE.fullmatch(tag) is None:
        return Err(
            "tag must contain only letters, digits, '.', '-' or '_' "
            "and must not start with '.' or '-'"
        )
    return Ok(None)


def validate_access(access: str) -> Result[None, str]:
    if not access or access in ACCESS_LEVELS:
        return Ok(None)
    return Err(f"access must be 'public' or 'restricted', got {access!r}")


def validate_otp(otp: str) -> Result[None, str]:
    if not otp:
        return Ok(None)
    # fullmatch with [0-9] rather than str.isdigit(): no unicode digits
    if _OTP_RE.fullmatch(otp) is None:
        return Err("otp must be 6 to 8 digits")
    return Ok(None)


def validate_package_dir(package_dir: str, *, cwd: Path | None = None) -> Result[Path, str]:
    """Resolve ``package_dir`` and make sure it is a directory under cwd.

    Symlinks and ``..`` segments are resolved before the containment check,
    so a link pointing outside the working tree is rejected as well.

    Args:
        package_dir: Path relative to cwd (absolute paths are accepted if
            they lie inside cwd). Empty means cwd itself.
        cwd: Base directory; defaults to the process working directory.

    Returns:
        Ok(absolute resolved path) or Err(message).
    """
    try:
        base = (cwd if cwd is not None else Path.cwd()).resolve()
        resolved = (base / package_dir).resolve() if package_dir else base
    except (OSError, RuntimeError, ValueError) as e:
        return Err(f"cannot resolve package directory {package_dir!r}: {e}")

    if resolved != base and not resolved.is_relative_to(base):
        return Err(f"package directory {package_dir!r} escapes the working directory")

    try:
        if not resolved.exists():
            return Err(f"package directory does not exist: {package_dir}")
        if not resolved.is_dir():
            return Err(f"package directory is not a directory: {package_dir}")
    except OSError as e:
        return Err(f"cannot access package directory {package_dir!r}: {e}")

    return Ok(resolved)
