"""Grammar for release branches such as ``release/1.2`` or ``release/v2``."""

from __future__ import annotations

import re

from semtag.grammar.base import EMPTY_VERSION, TagFormatError
from semtag.release.model import SemVer

__all__ = ["BranchGrammar"]


class BranchGrammar:
    """Release branches: a prefix, an optional ``v`` and one to three numbers."""

    def __init__(self, prefix: str = "release/") -> None:
        self.prefix = prefix
        self._re = re.compile(
            rf"^{re.escape(prefix)}v?([0-9]+)(?:\.([0-9]+))?(?:\.([0-9]+))?$"
        )

    def pattern(self) -> str:
        return f"{self.prefix}*"

    def is_valid(self, ref: str) -> bool:
        return self._re.match(ref) is not None

    def parse(self, ref: str) -> SemVer:
        if ref == "":
            return EMPTY_VERSION
        m = self._re.match(ref)
        if m is None:
            raise TagFormatError(ref)
        return SemVer(int(m.group(1)), int(m.group(2) or 0), int(m.group(3) or 0))

    def __repr__(self) -> str:
        return f"BranchGrammar(prefix={self.prefix!r})"
