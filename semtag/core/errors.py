"""Error codes for CLI exit status.

Every command exits with one of these codes, so scripts wrapping semtag can
tell a configuration mistake apart from a repository problem.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad options, invalid config file)
    - 2: Environment error (not a git repository, git missing)
    - 3: Git error (a query needed for resolution failed)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    GIT_ERROR = 3

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
