"""Request and response types exchanged with the release host."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum


class Hook(StrEnum):
    """Lifecycle points this plugin acts on."""

    BEFORE_PUBLISH = "before-publish"
    AFTER_PUBLISH = "after-publish"


@dataclass(frozen=True, slots=True)
class ReleaseContext:
    """Read-only facts about the release being cut."""

    version: str = ""
    previous_version: str = ""
    tag_name: str = ""
    release_type: str = ""
    branch: str = ""
    commit_sha: str = ""


def _empty_config() -> dict[str, object]:
    return {}


@dataclass(frozen=True, slots=True)
class ExecuteRequest:
    """A single hook invocation.

    ``hook`` is a plain string: the host may send lifecycle points this
    plugin does not know, which are answered with a no-op.
    """

    hook: str
    config: Mapping[str, object] = field(default_factory=_empty_config)
    context: ReleaseContext = field(default_factory=ReleaseContext)
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Every problem found in a configuration, in check order."""

    errors: tuple[FieldError, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        return "; ".join(f"{e.field}: {e.message}" for e in self.errors)


def _empty_outputs() -> dict[str, object]:
    return {}


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Outcome of one hook invocation.

    Attributes:
        success: Whether the hook completed.
        message: Human-readable summary.
        error: Failure description; set iff ``success`` is False.
        outputs: Named values for the host (package name, versions,
            rendered command). Never contains secrets.
    """

    success: bool
    message: str = ""
    error: str | None = None
    outputs: dict[str, object] = field(default_factory=_empty_outputs)

    @classmethod
    def ok(cls, message: str, outputs: Mapping[str, object] | None = None) -> ExecutionResult:
        return cls(success=True, message=message, outputs=dict(outputs or {}))

    @classmethod
    def failure(cls, error: str, message: str = "") -> ExecutionResult:
        return cls(success=False, message=message or error, error=error)
