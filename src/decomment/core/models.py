from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


class Language(str, Enum):
    """Lexical rule family a file is stripped with."""

    CFAMILY = 'cfamily'
    PYTHON = 'python'
    HASKELL = 'haskell'
    MARKUP = 'markup'
    UNSUPPORTED = 'unsupported'


@dataclass(frozen=True)
class LexicalRules:
    """Comment and string syntax of one language.

    Attributes:
        line_comment: Marker that starts a comment running to end-of-line.
        block_open: Opening delimiter of a block comment.
        block_close: Closing delimiter of a block comment.
        nesting: Whether block comments nest (depth counted).
        string_delimiters: Literal delimiters, longest first so that a
            triple quote is preferred over a single one.
        escape: Character that makes the next one literal inside strings.
    """

    line_comment: Optional[str] = None
    block_open: Optional[str] = None
    block_close: Optional[str] = None
    nesting: bool = False
    string_delimiters: Tuple[str, ...] = ()
    escape: Optional[str] = None

    @property
    def has_block_comments(self) -> bool:
        return bool(self.block_open and self.block_close)


class FileStatus(str, Enum):
    STRIPPED = 'stripped'
    UNCHANGED = 'unchanged'
    SKIPPED = 'skipped'
    FAILED = 'failed'


@dataclass(frozen=True)
class FileOutcome:
    """Result of processing a single file."""

    path: Path
    language: Language
    status: FileStatus
    chars_before: int = 0
    chars_after: int = 0
    error: Optional[str] = None
    written_to: Optional[Path] = None

    @property
    def chars_removed(self) -> int:
        return max(0, self.chars_before - self.chars_after)
