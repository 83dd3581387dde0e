from __future__ import annotations

from decomment.core.errors import DecommentError, ReadError, TraversalError, WriteError
from decomment.core.models import FileOutcome, FileStatus, Language, LexicalRules
from decomment.core.report import RunReport
from decomment.processing.classifier import ExtensionClassifier, classify
from decomment.processing.comment_rules import COMMENT_RULES
from decomment.processing.stripper import strip
from decomment.runtime.runner import DecommentRunner
from decomment.cli import main

__version__ = '1.0.0'

__all__ = [
    'COMMENT_RULES',
    'DecommentError',
    'DecommentRunner',
    'ExtensionClassifier',
    'FileOutcome',
    'FileStatus',
    'Language',
    'LexicalRules',
    'ReadError',
    'RunReport',
    'TraversalError',
    'WriteError',
    'classify',
    'main',
    'strip',
]
