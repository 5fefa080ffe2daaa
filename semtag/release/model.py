"""Release resolution data model."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ReleaseInformation", "SemVer"]


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True, slots=True)
class ReleaseInformation:
    """Outcome of resolving the last release for a commit.

    Attributes:
        version: Version of the most recent prior release, or the grammar's
            default when there is none.
        root: Fork point between the prior release and the current commit,
            empty when no prior release was found.
        current: Version of the valid release tag on the current commit,
            None when the commit is not tagged.
    """

    version: SemVer
    root: str
    current: SemVer | None = None

    @property
    def major(self) -> int:
        return self.version.major

    @property
    def minor(self) -> int:
        return self.version.minor

    @property
    def patch(self) -> int:
        return self.version.patch

    @property
    def is_tagged(self) -> bool:
        """True if the current commit carries a valid release tag."""
        return self.current is not None

    @property
    def current_major(self) -> int | None:
        return self.current.major if self.current is not None else None

    @property
    def current_minor(self) -> int | None:
        return self.current.minor if self.current is not None else None

    @property
    def current_patch(self) -> int | None:
        return self.current.patch if self.current is not None else None

    @property
    def has_prior_release(self) -> bool:
        return self.root != ""

    def as_dict(self) -> dict[str, object]:
        """Flat mapping for JSON output."""
        return {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "root": self.root,
            "current_major": self.current_major,
            "current_minor": self.current_minor,
            "current_patch": self.current_patch,
            "is_tagged": self.is_tagged,
        }
