"""Grammar for version tags such as ``v1.2.3`` or ``v1.2.3-api``."""

from __future__ import annotations

import re

from semtag.grammar.base import EMPTY_VERSION, TagFormatError
from semtag.release.model import SemVer

__all__ = ["DefaultTagGrammar"]

_NAMESPACE_SEPARATOR = "-"


class DefaultTagGrammar:
    """Tags made of a prefix, three numeric components and an optional namespace.

    With ``prefix="v"`` and ``namespace="api"`` the accepted form is
    ``v1.2.3-api``. Parsing tolerates a leading path (``sub/v1.2.3``) and
    missing minor/patch components, which default to 0.
    """

    def __init__(self, prefix: str = "v", namespace: str = "") -> None:
        self.prefix = prefix
        self.namespace = namespace

        suffix = f"{re.escape(_NAMESPACE_SEPARATOR)}{re.escape(namespace)}" if namespace else ""
        self._valid_re = re.compile(rf"^{re.escape(prefix)}[0-9]+\.[0-9]+\.[0-9]+{suffix}$")
        self._parse_re = re.compile(
            rf"(?:^|/){re.escape(prefix)}([0-9]+)(?:\.([0-9]+))?(?:\.([0-9]+))?{suffix}$"
        )

    def pattern(self) -> str:
        base = f"{self.prefix}*[0-9].*[0-9].*[0-9]"
        if self.namespace:
            return f"{base}{_NAMESPACE_SEPARATOR}{self.namespace}"
        return base

    def is_valid(self, ref: str) -> bool:
        return self._valid_re.match(ref) is not None

    def parse(self, ref: str) -> SemVer:
        if ref == "":
            return EMPTY_VERSION
        m = self._parse_re.search(ref)
        if m is None:
            raise TagFormatError(ref)
        return SemVer(int(m.group(1)), int(m.group(2) or 0), int(m.group(3) or 0))

    def __repr__(self) -> str:
        return f"DefaultTagGrammar(prefix={self.prefix!r}, namespace={self.namespace!r})"
