"""Host-facing entry point.

``NpmPlugin`` is what a release host talks to: it resolves raw
configuration, folds in the ``NPM_OTP`` environment variable and hands off
to the validator or the dispatcher.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from npmhook.hook.config import NpmConfig, parse_config
from npmhook.hook.contracts import ExecuteRequest, ExecutionResult, ValidationResult
from npmhook.hook.dispatcher import dispatch
from npmhook.hook.info import PluginInfo, plugin_info
from npmhook.hook.validation import validate_config
from npmhook.output.console import ConsoleProtocol, NullConsole
from npmhook.platform.process import Runner, run

OTP_ENV_VAR = "NPM_OTP"


class NpmPlugin:
    """npm publishing plugin.

    Args:
        console: Where handlers report progress. Defaults to a console that
            discards output, so embedding hosts see nothing unless they
            pass one.
        runner: Process runner used for ``npm publish``.
        environ: Environment used for ``NPM_OTP``; defaults to os.environ.
        cwd: Base directory for ``package_dir``; defaults to the process
            working directory at call time.
    """

    def __init__(
        self,
        *,
        console: ConsoleProtocol | None = None,
        runner: Runner = run,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> None:
        self.console: ConsoleProtocol = console if console is not None else NullConsole()
        self._runner = runner
        self._environ = environ
        self._cwd = cwd

    def get_info(self) -> PluginInfo:
        return plugin_info()

    def resolve(self, raw: Mapping[str, object]) -> NpmConfig:
        return parse_config(self._with_env_otp(raw))

    def validate(self, raw: Mapping[str, object]) -> ValidationResult:
        return validate_config(self.resolve(raw))

    def execute(self, request: ExecuteRequest) -> ExecutionResult:
        cfg = self.resolve(request.config)
        return dispatch(
            request.hook,
            cfg,
            request.context,
            request.dry_run,
            console=self.console,
            runner=self._runner,
            cwd=self._cwd,
        )

    def _with_env_otp(self, raw: Mapping[str, object]) -> Mapping[str, object]:
        current = raw.get("otp")
        if isinstance(current, str) and current:
            return raw
        environ = self._environ if self._environ is not None else os.environ
        otp = environ.get(OTP_ENV_VAR, "")
        if not otp:
            return raw
        return {**raw, "otp": otp}
