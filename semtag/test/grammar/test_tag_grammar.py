from __future__ import annotations

import pytest

from semtag.core.config import ReleaseConfig
from semtag.grammar import (
    EMPTY_VERSION,
    BranchGrammar,
    DefaultTagGrammar,
    TagFormatError,
    build_grammar,
)
from semtag.release.model import SemVer


class TestPattern:
    def test_default(self) -> None:
        assert DefaultTagGrammar().pattern() == "v*[0-9].*[0-9].*[0-9]"

    def test_custom_prefix(self) -> None:
        assert DefaultTagGrammar(prefix="").pattern() == "*[0-9].*[0-9].*[0-9]"

    def test_namespace(self) -> None:
        assert DefaultTagGrammar(namespace="api").pattern() == "v*[0-9].*[0-9].*[0-9]-api"


class TestIsValid:
    @pytest.mark.parametrize("tag", ["v0.0.0", "v1.2.3", "v10.20.30"])
    def test_accepts(self, tag: str) -> None:
        assert DefaultTagGrammar().is_valid(tag)

    @pytest.mark.parametrize(
        "tag",
        ["", "1.2.3", "v1.2", "v1.2.3-rc.1", "v1.2.3.4", "vx.2.3", "release/v1.2.3", "v1.2.3 "],
    )
    def test_rejects(self, tag: str) -> None:
        assert not DefaultTagGrammar().is_valid(tag)

    def test_namespace_required(self) -> None:
        grammar = DefaultTagGrammar(namespace="api")
        assert grammar.is_valid("v1.2.3-api")
        assert not grammar.is_valid("v1.2.3")
        assert not grammar.is_valid("v1.2.3-web")

    def test_prefix_is_literal(self) -> None:
        grammar = DefaultTagGrammar(prefix="v.")
        assert grammar.is_valid("v.1.2.3")
        assert not grammar.is_valid("vx1.2.3")

    def test_empty_prefix(self) -> None:
        grammar = DefaultTagGrammar(prefix="")
        assert grammar.is_valid("1.2.3")
        assert not grammar.is_valid("v1.2.3")


class TestParse:
    def test_empty_is_default(self) -> None:
        assert DefaultTagGrammar().parse("") == EMPTY_VERSION == SemVer(0, 0, 0)

    def test_full(self) -> None:
        assert DefaultTagGrammar().parse("v1.2.3") == SemVer(1, 2, 3)

    def test_namespace_stripped(self) -> None:
        assert DefaultTagGrammar(namespace="api").parse("v4.5.6-api") == SemVer(4, 5, 6)

    def test_leading_path_ignored(self) -> None:
        assert DefaultTagGrammar().parse("origin/v2.0.1") == SemVer(2, 0, 1)

    def test_missing_components_default_to_zero(self) -> None:
        grammar = DefaultTagGrammar()
        assert grammar.parse("v3") == SemVer(3, 0, 0)
        assert grammar.parse("v3.1") == SemVer(3, 1, 0)

    def test_invalid_raises(self) -> None:
        with pytest.raises(TagFormatError, match="nightly"):
            DefaultTagGrammar().parse("nightly")


class TestBranchGrammar:
    def test_pattern(self) -> None:
        assert BranchGrammar().pattern() == "release/*"
        assert BranchGrammar("rel-").pattern() == "rel-*"

    @pytest.mark.parametrize("ref", ["release/1", "release/1.2", "release/v1.2.3"])
    def test_accepts(self, ref: str) -> None:
        assert BranchGrammar().is_valid(ref)

    @pytest.mark.parametrize("ref", ["release/", "release/next", "main", "release/1.2.3.4"])
    def test_rejects(self, ref: str) -> None:
        assert not BranchGrammar().is_valid(ref)

    def test_parse(self) -> None:
        grammar = BranchGrammar()
        assert grammar.parse("") == EMPTY_VERSION
        assert grammar.parse("release/2") == SemVer(2, 0, 0)
        assert grammar.parse("release/v2.4") == SemVer(2, 4, 0)
        assert grammar.parse("release/2.4.1") == SemVer(2, 4, 1)

    def test_parse_invalid_raises(self) -> None:
        with pytest.raises(TagFormatError):
            BranchGrammar().parse("feature/x")


class TestBuildGrammar:
    def test_tags_by_default(self) -> None:
        grammar = build_grammar(ReleaseConfig(tag_prefix="ver", namespace="cli"))
        assert isinstance(grammar, DefaultTagGrammar)
        assert grammar.prefix == "ver"
        assert grammar.namespace == "cli"

    def test_branches(self) -> None:
        grammar = build_grammar(ReleaseConfig(use_branches=True, branch_prefix="rel/"))
        assert isinstance(grammar, BranchGrammar)
        assert grammar.prefix == "rel/"
