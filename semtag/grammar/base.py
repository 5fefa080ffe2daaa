"""Naming grammar contract for release refs."""

from __future__ import annotations

from typing import Protocol

from semtag.release.model import SemVer

__all__ = ["EMPTY_VERSION", "TagFormatError", "TagGrammar"]

# Version reported when a repository has no release yet.
EMPTY_VERSION = SemVer(0, 0, 0)


class TagFormatError(ValueError):
    """Raised when parsing a ref the grammar does not accept."""

    def __init__(self, ref: str) -> None:
        super().__init__(f"invalid release ref format: {ref!r}")
        self.ref = ref


class TagGrammar(Protocol):
    """Validates release ref names and extracts their version.

    Implementations must accept the empty string in ``parse`` and return
    ``EMPTY_VERSION``: it stands for "no release yet".
    """

    def pattern(self) -> str:
        """Git glob used to filter refs of interest."""
        ...

    def is_valid(self, ref: str) -> bool:
        """True if ``ref`` is a release ref under this grammar."""
        ...

    def parse(self, ref: str) -> SemVer:
        """Extract the version from ``ref``.

        Raises:
            TagFormatError: ``ref`` is neither empty nor parseable.
        """
        ...
