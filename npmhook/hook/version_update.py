"""before-publish: write the release version into package.json."""

from __future__ import annotations

from pathlib import Path

from npmhook.core.result import Err, Ok, Result
from npmhook.hook.config import NpmConfig, effective_dry_run
from npmhook.hook.contracts import ExecutionResult, ReleaseContext
from npmhook.hook.descriptor import DESCRIPTOR_NAME, load_package, write_version
from npmhook.hook.errors import HookError
from npmhook.hook.validation import validate_config
from npmhook.output.console import ConsoleProtocol


def package_version(release: ReleaseContext) -> Result[str, HookError]:
    """Release version as npm expects it (``v1.2.3`` becomes ``1.2.3``)."""
    version = release.version.strip()
    if version[:1] in ("v", "V") and version[1:2].isdigit():
        version = version[1:]
    if not version:
        return Err(
            HookError(
                kind="invalid_context",
                message="release context has no target version",
            )
        )
    return Ok(version)


def update_package_version(
    cfg: NpmConfig,
    release: ReleaseContext,
    dry_run: bool,
    *,
    console: ConsoleProtocol,
    cwd: Path | None = None,
) -> ExecutionResult:
    if not cfg.update_version:
        return ExecutionResult.ok("Version update disabled")

    validation = validate_config(cfg)
    if not validation.valid:
        error = HookError(
            kind="invalid_config",
            message=f"invalid configuration: {validation.summary()}",
        )
        console.error(error.pretty())
        return error.to_result()

    dry_run = effective_dry_run(dry_run, cfg)

    loaded = load_package(cfg.package_dir, cwd=cwd)
    if isinstance(loaded, Err):
        console.error(loaded.error.pretty())
        return loaded.error.to_result()
    descriptor = loaded.value

    new = package_version(release)
    if isinstance(new, Err):
        console.error(new.error.pretty())
        return new.error.to_result()
    new_version = new.value
    old_version = descriptor.version

    outputs: dict[str, object] = {
        "package": descriptor.name,
        "old_version": old_version,
        "new_version": new_version,
        "path": str(descriptor.path),
    }

    if dry_run:
        message = f"Would update {DESCRIPTOR_NAME} version from {old_version} to {new_version}"
        console.info(message)
        return ExecutionResult.ok(message, outputs)

    written = write_version(descriptor, new_version)
    if isinstance(written, Err):
        console.error(written.error.pretty())
        return written.error.to_result()

    message = f"Updated {DESCRIPTOR_NAME} version from {old_version} to {new_version}"
    console.success(message)
    return ExecutionResult.ok(message, outputs)
