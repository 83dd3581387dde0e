from __future__ import annotations
"""Language-aware comment stripper.

Single forward pass over the whole text (not line by line: block comments and
string literals may span lines). At each position the current ScanMode and
the language's LexicalRules decide whether characters are copied or dropped.

Notes:
    - String literals are copied verbatim; they only exist to keep
      comment-looking sequences inside them from being removed.
    - Line breaks ending a line comment are kept, so line numbers survive.
    - Unterminated constructs are not errors: an open block comment drops the
      rest of the text, an open string copies it.
"""

from typing import List, Optional, Sequence

from decomment.core.models import Language, LexicalRules
from decomment.processing.comment_rules import rules_for
from decomment.processing.scan_state import (
    IN_LINE_COMMENT,
    NORMAL,
    InBlockComment,
    InString,
    Normal,
    ScanMode,
)

_LINE_BREAKS = ("\n", "\r")


def strip(text: str, lang: Language) -> str:
    """Remove the comments of *lang* from *text*.

    Args:
        text: Full source text.
        lang: Language whose lexical rules apply.

    Returns:
        The text with every comment (delimiters included) removed and every
        other character preserved in order. Unsupported languages return
        *text* unchanged.
    """
    rules = rules_for(lang)
    if rules is None or not text:
        return text
    return strip_with_rules(text, rules)


def _match(text: str, pos: int, candidates: Sequence[Optional[str]]) -> Optional[str]:
    for cand in candidates:
        if cand and text.startswith(cand, pos):
            return cand
    return None


def strip_with_rules(text: str, rules: LexicalRules) -> str:
    """Run the scanner over *text* with an explicit rule set."""
    out: List[str] = []
    n = len(text)
    i = 0
    mode: ScanMode = NORMAL

    while i < n:
        if isinstance(mode, Normal):
            # Priority: string start, block open, line marker, plain char.
            delim = _match(text, i, rules.string_delimiters)
            if delim is not None:
                out.append(delim)
                i += len(delim)
                mode = InString(delim)
                continue
            if rules.has_block_comments and text.startswith(rules.block_open, i):
                i += len(rules.block_open)
                mode = InBlockComment(1)
                continue
            if rules.line_comment and text.startswith(rules.line_comment, i):
                i += len(rules.line_comment)
                mode = IN_LINE_COMMENT
                continue
            out.append(text[i])
            i += 1

        elif isinstance(mode, InString):
            if rules.escape and text.startswith(rules.escape, i):
                # Escape plus exactly one following char, never a delimiter.
                end = i + len(rules.escape) + 1
                out.append(text[i:end])
                i = end
                continue
            if text.startswith(mode.delimiter, i):
                out.append(mode.delimiter)
                i += len(mode.delimiter)
                mode = NORMAL
                continue
            out.append(text[i])
            i += 1

        elif isinstance(mode, InBlockComment):
            if rules.nesting and text.startswith(rules.block_open, i):
                i += len(rules.block_open)
                mode = InBlockComment(mode.depth + 1)
                continue
            if text.startswith(rules.block_close, i):
                i += len(rules.block_close)
                depth = mode.depth - 1
                mode = InBlockComment(depth) if depth > 0 else NORMAL
                continue
            i += 1

        else:  # InLineComment
            ch = text[i]
            if ch in _LINE_BREAKS:
                # '\r\n': '\r' ends the comment, '\n' is then copied as code.
                out.append(ch)
                mode = NORMAL
            i += 1

    return "".join(out)
