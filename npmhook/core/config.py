"""Loading raw hook configuration from disk.

The CLI accepts hook configuration as a TOML or JSON file. Loading only
checks that the document is a table; field types and values are left to
``npmhook.hook.config`` and ``npmhook.hook.validation``.
"""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict

__all__ = [
    "ConfigError",
    "load_config_file",
]


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when a config file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


def _decode(path: Path, text: str) -> Result[object, ConfigError]:
    if path.suffix.lower() == ".json":
        try:
            return Ok(json.loads(text))
        except json.JSONDecodeError as e:
            return Err(ConfigError(f"Invalid JSON syntax: {e}", path=path))

    try:
        return Ok(tomllib.loads(text))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))


def load_config_file(path: Path) -> Result[StrDict, ConfigError]:
    """Load a raw configuration mapping from a TOML or JSON file.

    Files ending in ``.json`` are parsed as JSON, anything else as TOML.

    Args:
        path: Path to the config file

    Returns:
        Ok(mapping) on success, Err(ConfigError) on failure
    """
    try:
        text = path.read_bytes().decode("utf-8")
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except (OSError, UnicodeDecodeError) as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    decoded = _decode(path, text)
    if isinstance(decoded, Err):
        return decoded

    data = as_str_dict(decoded.value)
    if data is None:
        return Err(ConfigError("Config root must be a table", path=path))
    return Ok(data)
