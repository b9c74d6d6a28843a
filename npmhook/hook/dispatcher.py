"""Route a hook invocation to its handler."""

from __future__ import annotations

from pathlib import Path

from npmhook.hook.config import NpmConfig
from npmhook.hook.contracts import ExecutionResult, Hook, ReleaseContext
from npmhook.hook.publish import publish_package
from npmhook.hook.version_update import update_package_version
from npmhook.output.console import ConsoleProtocol
from npmhook.platform.process import Runner, run


def dispatch(
    hook: str,
    cfg: NpmConfig,
    release: ReleaseContext,
    dry_run: bool,
    *,
    console: ConsoleProtocol,
    runner: Runner = run,
    cwd: Path | None = None,
) -> ExecutionResult:
    """Run the handler for ``hook``.

    | hook           | handler                  |
    |----------------|--------------------------|
    | before-publish | update_package_version   |
    | after-publish  | publish_package          |
    | anything else  | no-op success            |
    """
    match hook:
        case Hook.BEFORE_PUBLISH:
            return update_package_version(cfg, release, dry_run, console=console, cwd=cwd)
        case Hook.AFTER_PUBLISH:
            return publish_package(
                cfg, release, dry_run, console=console, runner=runner, cwd=cwd
            )
        case _:
            return ExecutionResult.ok(f"Hook {hook} not handled")
