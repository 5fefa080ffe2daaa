"""Last release resolution.

Finds, for a commit, the most recent release ref merged into it and the
release tag sitting on the commit itself (if any).

Usage:
    resolver = ReleaseResolver(Repository(path), console)
    match await resolver.resolve("HEAD", DefaultTagGrammar()):
        case Ok(info):
            print(info.version, info.root)
        case Err(e):
            print(e.message)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from semtag.core.result import Err, Ok, Result
from semtag.git.query import GitError, RefKind, VersionControlQuery
from semtag.output.console import ConsoleProtocol
from semtag.release.model import ReleaseInformation, SemVer

if TYPE_CHECKING:
    from semtag.grammar.base import TagGrammar

__all__ = ["ReleaseResolver"]


class ReleaseResolver:
    """Resolve the prior release of a commit.

    Queries are issued one at a time, each awaited before the next. The
    resolver keeps no state between calls.

    Args:
        query: Read-only access to the repository.
        console: Receives info and warning messages; never affects the result.
        use_branches: Look for release branches instead of release tags.
    """

    def __init__(
        self,
        query: VersionControlQuery,
        console: ConsoleProtocol,
        *,
        use_branches: bool = False,
    ) -> None:
        self._query = query
        self._console = console
        self._kind = RefKind.BRANCHES if use_branches else RefKind.TAGS

    async def resolve(
        self, current: str, grammar: TagGrammar
    ) -> Result[ReleaseInformation, GitError]:
        """Resolve release information for ``current``.

        Returns Err only when ``current`` cannot be resolved or the fork point
        of a selected release cannot be computed. Missing or malformed release
        refs yield an Ok result with an empty root.
        """
        pattern = grammar.pattern()

        match await self._query.tag_at_commit(pattern, current):
            case Err(e):
                return Err(e)
            case Ok(tags_here):
                current_tag = next((t for t in tags_here if grammar.is_valid(t)), "")

        if current_tag:
            self._console.info(f"Checked out tag is {current_tag}")
            current_version: SemVer | None = grammar.parse(current_tag)
        else:
            self._console.info("Current commit not tagged")
            current_version = None

        candidates = await self._candidates(pattern, current)
        previous = self._select(candidates, grammar, current_tag)

        if previous == "":
            if await self._query.has_remote():
                self._warn_no_release(len(candidates))
            return Ok(
                ReleaseInformation(
                    version=grammar.parse(""),
                    root="",
                    current=current_version,
                )
            )

        version = grammar.parse(previous)
        match await self._query.merge_base(previous, current):
            case Err(e):
                return Err(e)
            case Ok(root):
                return Ok(ReleaseInformation(version=version, root=root, current=current_version))

    async def _candidates(self, pattern: str, current: str) -> list[str]:
        match await self._query.refs_merged_into(self._kind, pattern, current):
            case Err(_):
                # Indistinguishable from a repository without release refs.
                return []
            case Ok(refs):
                self._console.info(
                    f"Found {len(refs)} ref(s) matching {pattern}: {' '.join(refs)}".rstrip()
                )
                return refs

    @staticmethod
    def _select(candidates: list[str], grammar: TagGrammar, current_tag: str) -> str:
        # When the commit is already tagged, skip its own tag so the result is
        # the release before it.
        for ref in candidates:
            if grammar.is_valid(ref) and ref != current_tag:
                return ref
        return ""

    def _warn_no_release(self, candidate_count: int) -> None:
        if candidate_count > 0:
            self._console.warning(
                f"None of the {candidate_count} tag(s) found were valid version tags for the "
                "present configuration. If this is unexpected, check to ensure that the "
                "configuration is correct and matches the tag format you are using."
            )
        else:
            self._console.warning(
                "No tags are present for this repository. If this is unexpected, check to "
                "ensure that tags have been pulled from the remote."
            )
