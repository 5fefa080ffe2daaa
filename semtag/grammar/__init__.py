"""Release ref naming grammars.

Usage:
    from semtag.grammar import build_grammar

    grammar = build_grammar(config.release)
    grammar.is_valid("v1.2.3")  # True with the default config
"""

from semtag.core.config import ReleaseConfig
from semtag.grammar.base import EMPTY_VERSION, TagFormatError, TagGrammar
from semtag.grammar.branches import BranchGrammar
from semtag.grammar.tags import DefaultTagGrammar

__all__ = [
    "EMPTY_VERSION",
    "BranchGrammar",
    "DefaultTagGrammar",
    "TagFormatError",
    "TagGrammar",
    "build_grammar",
]


def build_grammar(config: ReleaseConfig) -> TagGrammar:
    """Pick the grammar matching the configured release ref kind."""
    if config.use_branches:
        return BranchGrammar(config.branch_prefix)
    return DefaultTagGrammar(config.tag_prefix, config.namespace)
