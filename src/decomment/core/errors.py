from __future__ import annotations

"""Exception taxonomy.

Only failures that concern the file system surface as exceptions. Unsupported
languages and malformed comments/strings are not errors: the stripper always
returns a result.
"""

from pathlib import Path
from typing import Optional


class DecommentError(Exception):
    """Base class; carries the offending path when one is known."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class TraversalError(DecommentError):
    """The root directory cannot be walked at all."""


class ReadError(DecommentError):
    """A file could not be read or decoded; it was left untouched."""


class WriteError(DecommentError):
    """A stripped result could not be written back."""
