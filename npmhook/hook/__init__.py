"""npm publish hook engine: validation, version update and publish."""

from .config import NpmConfig, parse_config
from .contracts import (
    ExecuteRequest,
    ExecutionResult,
    FieldError,
    Hook,
    ReleaseContext,
    ValidationResult,
)
from .dispatcher import dispatch
from .errors import HookError
from .info import PluginInfo, plugin_info
from .plugin import NpmPlugin
from .validation import validate_config

__all__ = [
    "ExecuteRequest",
    "ExecutionResult",
    "FieldError",
    "Hook",
    "HookError",
    "NpmConfig",
    "NpmPlugin",
    "PluginInfo",
    "ReleaseContext",
    "ValidationResult",
    "dispatch",
    "parse_config",
    "plugin_info",
    "validate_config",
]
