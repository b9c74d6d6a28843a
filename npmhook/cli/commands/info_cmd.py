from __future__ import annotations

from npmhook.cli.commands._helpers import echo_json
from npmhook.hook.info import plugin_info


def info() -> None:
    """Print plugin name, version, hooks and config schema as JSON."""
    echo_json(plugin_info().to_dict())
