"""Error payload for hook handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from npmhook.hook.contracts import ExecutionResult

HookErrorKind = Literal[
    "invalid_config",
    "invalid_package_dir",
    "invalid_context",
    "descriptor_missing",
    "descriptor_invalid",
    "io_failed",
    "npm_unavailable",
    "publish_failed",
]


@dataclass(frozen=True, slots=True)
class HookError:
    """Canonical handler error.

    ``message`` and ``hint`` are shown to users and returned to the host, so
    they must never contain the OTP.
    """

    kind: HookErrorKind
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message

    def to_result(self) -> ExecutionResult:
        return ExecutionResult(
            success=False,
            message=self.message,
            error=self.pretty(),
            outputs={"error_kind": self.kind},
        )
