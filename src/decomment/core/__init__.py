from __future__ import annotations

"""Public surface for decomment.core.

Stable import location for the data model, the error taxonomy and the
protocol seams:

    from decomment.core import Language, FileOutcome, ReadError, ...
"""

from decomment.core.errors import (
    DecommentError,
    ReadError,
    TraversalError,
    WriteError,
)
from decomment.core.models import FileOutcome, FileStatus, Language, LexicalRules
from decomment.core.report import RunReport, StageTimer

__all__ = [
    # Models
    "Language",
    "LexicalRules",
    "FileStatus",
    "FileOutcome",
    "RunReport",
    "StageTimer",
    # Errors
    "DecommentError",
    "TraversalError",
    "ReadError",
    "WriteError",
]
