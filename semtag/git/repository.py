"""Git repository backed by the ``git`` executable.

Implements ``VersionControlQuery`` with read-only git commands. Every query
returns a Result; nothing here writes to the repository.

Usage:
    repo = Repository(Path("/path/to/repo"))

    match await repo.merge_base("v1.0.0", "HEAD"):
        case Ok(sha):
            print(f"Fork point: {sha}")
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from pathlib import Path

from semtag.core.result import Err, Ok, Result
from semtag.git.query import GitError, RefKind
from semtag.platform.process import run_async

_GIT_TIMEOUT_SECONDS = 30.0

__all__ = ["Repository"]


class Repository:
    """Read-only queries against a single git repository.

    Attributes:
        path: Path to the repository root
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        """Check if this is a git repository (``.git`` directory or file)."""
        return (self.path / ".git").exists()

    async def tag_at_commit(self, pattern: str, commit: str) -> Result[list[str], GitError]:
        """List tags matching ``pattern`` that point at ``commit``.

        Fails when ``commit`` cannot be resolved.
        """
        result = await self._run(
            ["tag", "--points-at", commit, "--sort=-v:refname", "--list", pattern]
        )
        match result:
            case Err(e):
                return Err(e)
            case Ok(stdout):
                return Ok(_lines(stdout))

    async def refs_merged_into(
        self, kind: RefKind, pattern: str, commit: str
    ) -> Result[list[str], GitError]:
        """List refs reachable from ``commit``, newest version first.

        Ordering is git's own ``-v:*refname`` sort and is kept as returned.
        """
        result = await self._run(
            [
                "for-each-ref",
                "--sort=-v:*refname",
                "--format=%(refname:short)",
                f"--merged={commit}",
                f"{kind.prefix}{pattern}",
            ]
        )
        match result:
            case Err(e):
                return Err(e)
            case Ok(stdout):
                return Ok(_lines(stdout))

    async def merge_base(self, ref_a: str, ref_b: str) -> Result[str, GitError]:
        result = await self._run(["merge-base", ref_a, ref_b])
        match result:
            case Err(e):
                return Err(e)
            case Ok(stdout):
                return Ok(stdout.strip())

    async def has_remote(self) -> bool:
        """Check if any remote is configured.

        Returns False if the remote list cannot be read.
        """
        result = await self._run(["remote"])
        match result:
            case Ok(stdout):
                return stdout.strip() != ""
            case Err(_):
                return False

    async def _run(self, args: list[str]) -> Result[str, GitError]:
        """Run a git command in this repository."""
        result = await run_async(
            ["git", "-C", str(self.path), *args], cwd=self.path, timeout=_GIT_TIMEOUT_SECONDS
        )
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command=" ".join(args[:1]),
                        message=e.stderr.strip() or e.stdout.strip() or f"git {args[0]} failed",
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                return Ok(stdout)


def _lines(output: str) -> list[str]:
    return [ln.strip() for ln in output.splitlines() if ln.strip()]
