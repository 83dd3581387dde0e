from __future__ import annotations
"""Scan modes of the comment stripper.

ScanMode is a closed union of small frozen records. The stripper dispatches on
the concrete type, so every transition names the mode it produces:

    Normal | InLineComment | InBlockComment(depth) | InString(delimiter)
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Normal:
    pass


@dataclass(frozen=True)
class InLineComment:
    pass


@dataclass(frozen=True)
class InBlockComment:
    depth: int = 1


@dataclass(frozen=True)
class InString:
    delimiter: str


ScanMode = Union[Normal, InLineComment, InBlockComment, InString]

NORMAL = Normal()
IN_LINE_COMMENT = InLineComment()
