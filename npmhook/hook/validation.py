"""Aggregate validation of a resolved configuration."""

from __future__ import annotations

from collections.abc import Callable

from npmhook.core.result import Err, Result
from npmhook.hook.config import NpmConfig
from npmhook.hook.contracts import FieldError, ValidationResult
from npmhook.hook.validators import (
    validate_access,
    validate_otp,
    validate_registry,
    validate_tag,
)

_FieldCheck = tuple[str, Callable[[NpmConfig], str], Callable[[str], Result[None, str]]]

_CHECKS: tuple[_FieldCheck, ...] = (
    ("registry", lambda c: c.registry, validate_registry),
    ("tag", lambda c: c.tag, validate_tag),
    ("access", lambda c: c.access, validate_access),
    ("otp", lambda c: c.otp, validate_otp),
)


def validate_config(cfg: NpmConfig) -> ValidationResult:
    """Run every field check and collect all failures.

    ``package_dir`` is not checked here: a validation-only request must not
    depend on the directory layout of the machine doing the validating.
    Handlers that touch the filesystem check it themselves.
    """
    errors: list[FieldError] = []
    for name, getter, check in _CHECKS:
        result = check(getter(cfg))
        if isinstance(result, Err):
            errors.append(FieldError(field=name, message=result.error))
    return ValidationResult(errors=tuple(errors))
