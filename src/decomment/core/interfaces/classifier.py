from __future__ import annotations
from pathlib import PurePath
from typing import Protocol, Union, runtime_checkable

from decomment.core.models import Language


@runtime_checkable
class FileClassifierProtocol(Protocol):
    """Maps a file name to the lexical rule family used to strip it."""

    def classify(self, filename: Union[str, PurePath]) -> Language:
        """Return the language for *filename*; never raises."""
        ...

    def register(self, extension: str, language: Language) -> None:
        """Add or override an extension mapping."""
        ...
