from __future__ import annotations
"""Comment stripper protocol definitions."""

from typing import Protocol

from decomment.core.models import Language


class StripperProtocol(Protocol):
    """Callable turning source text into the same text without comments.

    Implementations must be pure: the result depends only on the two
    arguments, so files can be processed concurrently.
    """

    def __call__(self, text: str, lang: Language) -> str:
        ...
