"""Git access for release resolution.

- VersionControlQuery: the read-only query contract
- Repository: implementation shelling out to ``git``

Usage:
    from semtag.git import RefKind, Repository

    repo = Repository(Path("/path/to/repo"))
    refs = await repo.refs_merged_into(RefKind.TAGS, "v*", "HEAD")
"""

from semtag.git.query import GitError, RefKind, VersionControlQuery
from semtag.git.repository import Repository

__all__ = [
    "GitError",
    "RefKind",
    "Repository",
    "VersionControlQuery",
]
