"""Release resolution: data model and resolver."""

from semtag.release.model import ReleaseInformation, SemVer
from semtag.release.resolver import ReleaseResolver

__all__ = [
    "ReleaseInformation",
    "ReleaseResolver",
    "SemVer",
]
