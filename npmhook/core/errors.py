"""Error codes for CLI exit status.

Hook failures are reported as values; the CLI maps them onto these codes
when it has to turn a result into a process exit status.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (invalid configuration, unsafe package directory)
    - 2: Environment error (npm missing or failed to start)
    - 3: Publish error (npm publish exited non-zero)
    - 5: I/O error (package.json missing, unreadable or malformed)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    PUBLISH_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
