"""Subprocess execution with Result-based error handling.

This is the only module allowed to call ``subprocess`` directly. Callers
get stdout on success and a ``ProcessError`` on non-zero exit or when the
program cannot be started.

Usage:
    result = run(["npm", "publish"], cwd=package_dir)
    match result:
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from npmhook.core.result import Err, Ok, Result

__all__ = ["ProcessError", "Runner", "run"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The argument vector that was executed.
        returncode: Exit code, or -1 when the process could not be started.
        stdout: Standard output (may be empty).
        stderr: Standard error, or the OS error text for start failures.
    """

    command: tuple[str, ...] = ()
    returncode: int = -1
    stdout: str = ""
    stderr: str = ""

    @property
    def started(self) -> bool:
        return self.returncode != -1

    @property
    def output(self) -> str:
        """Best diagnostic text the process produced."""
        return self.stderr.strip() or self.stdout.strip()

    def __str__(self) -> str:
        # Only the program name: later arguments may carry secrets.
        name = self.command[0] if self.command else "process"
        return f"{name} failed (exit {self.returncode})"


Runner = Callable[..., Result[str, ProcessError]]


def run(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
) -> Result[str, ProcessError]:
    """Execute a command and return stdout or error.

    Blocks until the command exits; no timeout is applied.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).

    Returns:
        Ok(stdout) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)
