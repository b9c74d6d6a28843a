from __future__ import annotations

from dataclasses import dataclass

from npmhook.hook.plugin import NpmPlugin
from npmhook.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    console: ConsoleProtocol
    plugin: NpmPlugin


def build_context() -> CLIContext:
    # stderr: stdout is reserved for JSON responses
    console = RichConsole(stderr=True)
    return CLIContext(console=console, plugin=NpmPlugin(console=console))
