"""after-publish: run ``npm publish`` for the package.

The OTP is only ever placed in the argument vector handed to the process
runner. Anything rendered for people (outputs, messages, console lines,
process diagnostics) goes through ``PublishCommand.display`` or ``redact``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlsplit, urlunsplit

from npmhook.core.result import Err
from npmhook.hook.config import NpmConfig, effective_dry_run
from npmhook.hook.contracts import ExecutionResult, ReleaseContext
from npmhook.hook.descriptor import DESCRIPTOR_NAME, load_package
from npmhook.hook.errors import HookError
from npmhook.hook.validation import validate_config
from npmhook.hook.version_update import package_version
from npmhook.output.console import ConsoleProtocol
from npmhook.platform.process import Runner, run

NPM = "npm"
REDACTED = "[REDACTED]"
PRIVATE_PACKAGE_MESSAGE = "Package is private, skipping npm publish"


def redact(text: str, secret: str) -> str:
    if not secret:
        return text
    return text.replace(secret, REDACTED)


def strip_userinfo(url: str) -> str:
    """Drop ``user:pass@`` from a registry URL before it is shown."""
    parts = urlsplit(url)
    if "@" not in parts.netloc:
        return url
    return urlunsplit(parts._replace(netloc=parts.netloc.rpartition("@")[2]))


@dataclass(frozen=True, slots=True)
class PublishCommand:
    """``npm publish`` invocation.

    ``argv`` holds the real arguments and is excluded from ``repr``; use
    ``display()`` (or ``str()``) for anything shown or returned.
    """

    argv: tuple[str, ...] = field(repr=False)
    cwd: Path
    secret: str = field(default="", repr=False)

    def display(self) -> str:
        shown: list[str] = []
        previous = ""
        for arg in self.argv:
            if previous == "--otp":
                shown.append(REDACTED)
            elif previous == "--registry":
                shown.append(redact(strip_userinfo(arg), self.secret))
            else:
                shown.append(redact(arg, self.secret))
            previous = arg
        return " ".join(shown)

    def __str__(self) -> str:
        return self.display()


def build_publish_command(cfg: NpmConfig, package_path: Path) -> PublishCommand:
    argv = [NPM, "publish"]
    if cfg.registry:
        argv += ["--registry", cfg.registry]
    if cfg.tag:
        argv += ["--tag", cfg.tag]
    if cfg.access:
        argv += ["--access", cfg.access]
    if cfg.otp:
        argv += ["--otp", cfg.otp]
    return PublishCommand(argv=tuple(argv), cwd=package_path, secret=cfg.otp)


def publish_package(
    cfg: NpmConfig,
    release: ReleaseContext,
    dry_run: bool,
    *,
    console: ConsoleProtocol,
    runner: Runner = run,
    cwd: Path | None = None,
) -> ExecutionResult:
    """Publish the package in ``cfg.package_dir`` unless it is private.

    The configuration is validated before anything else, dry-run or not.
    Failures of any kind come back as an unsuccessful ``ExecutionResult``.
    """
    validation = validate_config(cfg)
    if not validation.valid:
        error = HookError(
            kind="invalid_config",
            message=f"invalid configuration: {validation.summary()}",
        )
        console.error(error.pretty())
        return error.to_result()

    loaded = load_package(cfg.package_dir, cwd=cwd)
    if isinstance(loaded, Err):
        console.error(loaded.error.pretty())
        return loaded.error.to_result()
    descriptor = loaded.value

    if descriptor.private:
        console.info(f"{descriptor.name or DESCRIPTOR_NAME} is private")
        return ExecutionResult.ok(PRIVATE_PACKAGE_MESSAGE, {"package": descriptor.name})

    if not descriptor.name:
        error = HookError(
            kind="descriptor_invalid",
            message=f"missing name in {DESCRIPTOR_NAME}",
            hint=str(descriptor.path),
        )
        console.error(error.pretty())
        return error.to_result()

    version = package_version(release).unwrap_or(descriptor.version)
    command = build_publish_command(cfg, descriptor.path.parent)
    outputs: dict[str, object] = {
        "package": descriptor.name,
        "version": version,
        "registry": strip_userinfo(cfg.registry),
        "tag": cfg.tag,
        "command": command.display(),
    }

    if effective_dry_run(dry_run, cfg):
        message = f"Would publish {descriptor.name}@{version}: {command.display()}"
        console.info(message)
        return ExecutionResult.ok(message, outputs)

    console.info(f"running: {command.display()}")
    result = runner(list(command.argv), cwd=command.cwd)
    if isinstance(result, Err):
        process_error = result.error
        error = HookError(
            kind="publish_failed" if process_error.started else "npm_unavailable",
            message=f"npm publish failed (exit {process_error.returncode})",
            hint=redact(process_error.output, cfg.otp) or None,
        )
        console.error(error.pretty())
        return error.to_result()

    outputs["output"] = redact(result.value.strip(), cfg.otp)
    message = f"Published {descriptor.name}@{version}"
    console.success(message)
    return ExecutionResult.ok(message, outputs)
