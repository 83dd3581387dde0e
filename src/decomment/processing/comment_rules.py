"""
comment_rules – Lexical rule table for every supported language.

COMMENT_RULES is the single source of truth consulted by the stripper. It is
plain, read-only data: one LexicalRules record per Language. Unsupported has
no entry, which the stripper treats as pass-through.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from decomment.core.models import Language, LexicalRules


CFAMILY_RULES = LexicalRules(
    line_comment="//",
    block_open="/*",
    block_close="*/",
    nesting=False,
    string_delimiters=('"', "'"),
    escape="\\",
)

# Triple quotes come first: '"""' must win over '"' at the same position.
PYTHON_RULES = LexicalRules(
    line_comment="#",
    string_delimiters=('"""', "'''", '"', "'"),
    escape="\\",
)

HASKELL_RULES = LexicalRules(
    line_comment="--",
    block_open="{-",
    block_close="-}",
    nesting=True,
    string_delimiters=('"',),
    escape="\\",
)

MARKUP_RULES = LexicalRules(
    block_open="<!--",
    block_close="-->",
)


COMMENT_RULES: Mapping[Language, LexicalRules] = MappingProxyType({
    Language.CFAMILY: CFAMILY_RULES,
    Language.PYTHON: PYTHON_RULES,
    Language.HASKELL: HASKELL_RULES,
    Language.MARKUP: MARKUP_RULES,
})


def rules_for(lang: Language) -> Optional[LexicalRules]:
    """Return the rule set for *lang*, or None for pass-through languages."""
    return COMMENT_RULES.get(lang)
