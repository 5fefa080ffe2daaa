"""Read-only version-control queries used by release resolution.

The resolver talks to the repository only through ``VersionControlQuery``,
so tests can swap in a fake answering from canned output.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from semtag.core.result import Result

__all__ = ["GitError", "RefKind", "VersionControlQuery"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class RefKind(Enum):
    """Kind of ref that marks a release."""

    TAGS = "refs/tags/"
    BRANCHES = "refs/heads/"

    @property
    def prefix(self) -> str:
        return self.value


class VersionControlQuery(Protocol):
    async def tag_at_commit(self, pattern: str, commit: str) -> Result[list[str], GitError]:
        """Tags matching ``pattern`` that point exactly at ``commit``."""
        ...

    async def refs_merged_into(
        self, kind: RefKind, pattern: str, commit: str
    ) -> Result[list[str], GitError]:
        """Refs of ``kind`` matching ``pattern`` reachable from ``commit``.

        Ordered by git's descending version-like sort of ref names.
        """
        ...

    async def merge_base(self, ref_a: str, ref_b: str) -> Result[str, GitError]:
        """Most recent common ancestor of two refs."""
        ...

    async def has_remote(self) -> bool:
        """True if at least one remote is configured."""
        ...
