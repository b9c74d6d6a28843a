"""Typed view of the npm hook configuration.

Resolution is lenient: anything missing or of the wrong type falls back to
its default. Deciding whether the values are acceptable is left to
``npmhook.hook.validation``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from npmhook.core.structured import get_bool, get_str

__all__ = [
    "DEFAULT_TAG",
    "NpmConfig",
    "effective_dry_run",
    "parse_config",
]

DEFAULT_TAG = "latest"


@dataclass(frozen=True, slots=True)
class NpmConfig:
    """Resolved hook configuration.

    Attributes:
        registry: Registry URL; empty means the npm default.
        tag: Dist-tag to publish under.
        access: "", "public" or "restricted".
        otp: One-time passcode for 2FA; empty when not used.
        dry_run: Config-level dry-run, OR-ed with the request flag.
        package_dir: Package directory relative to cwd; empty means cwd.
        update_version: Whether before-publish rewrites package.json.
    """

    registry: str = ""
    tag: str = DEFAULT_TAG
    access: str = ""
    otp: str = ""
    dry_run: bool = False
    package_dir: str = ""
    update_version: bool = True

    def __repr__(self) -> str:
        otp = "'[REDACTED]'" if self.otp else "''"
        return (
            f"NpmConfig(registry={self.registry!r}, tag={self.tag!r}, "
            f"access={self.access!r}, otp={otp}, dry_run={self.dry_run!r}, "
            f"package_dir={self.package_dir!r}, update_version={self.update_version!r})"
        )


def parse_config(raw: Mapping[str, object]) -> NpmConfig:
    """Resolve a raw configuration mapping. Never fails."""
    dry_run = get_bool(raw, "dry_run")
    update_version = get_bool(raw, "update_version")
    return NpmConfig(
        registry=get_str(raw, "registry", strip=False) or "",
        tag=get_str(raw, "tag", strip=False) or DEFAULT_TAG,
        access=get_str(raw, "access", strip=False) or "",
        otp=get_str(raw, "otp", strip=False) or "",
        dry_run=dry_run if dry_run is not None else False,
        package_dir=get_str(raw, "package_dir", strip=False) or "",
        update_version=update_version if update_version is not None else True,
    )


def effective_dry_run(request_dry_run: bool, cfg: NpmConfig) -> bool:
    """Combine the request-level and config-level dry-run flags."""
    return request_dry_run or cfg.dry_run
