from __future__ import annotations
"""
ExtensionClassifier

Map file names to the Language whose lexical rules strip them.

Matching uses the last extension of the basename and is case-sensitive
('.c' is C, '.C' is not). Names without an extension, dot-files included
('.bashrc'), are Unsupported.

Extra mappings can be registered per instance; the module-level `classify`
always uses the built-in table.
"""
from pathlib import PurePath
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from decomment.core.interfaces.classifier import FileClassifierProtocol
from decomment.core.models import Language


def _table(language: Language, *suffixes: str) -> Dict[str, Language]:
    return {suf: language for suf in suffixes}


DEFAULT_EXTENSIONS: Mapping[str, Language] = MappingProxyType({
    **_table(
        Language.CFAMILY,
        '.c', '.h', '.cpp', '.hpp', '.cc', '.cxx', '.hh',
        '.java', '.rs', '.cs', '.js', '.ts', '.go', '.kt', '.swift', '.scala',
    ),
    **_table(Language.PYTHON, '.py', '.pyw', '.pyi'),
    **_table(Language.HASKELL, '.hs'),
    **_table(Language.MARKUP, '.html', '.htm', '.xml', '.xhtml', '.svg'),
})


def _extension_of(filename: Union[str, PurePath]) -> str:
    return PurePath(filename).suffix


def classify(filename: Union[str, PurePath]) -> Language:
    """Return the Language for *filename* from the built-in table."""
    return DEFAULT_EXTENSIONS.get(_extension_of(filename), Language.UNSUPPORTED)


class ExtensionClassifier(FileClassifierProtocol):
    def __init__(self, table: Optional[Mapping[str, Language]] = None) -> None:
        self._by_ext: Dict[str, Language] = dict(DEFAULT_EXTENSIONS if table is None else table)

    @classmethod
    def default(cls) -> 'ExtensionClassifier':
        return cls()

    def register(self, extension: str, language: Language) -> None:
        ext = extension if extension.startswith('.') else f'.{extension}'
        self._by_ext[ext] = Language(language)

    def classify(self, filename: Union[str, PurePath]) -> Language:
        return self._by_ext.get(_extension_of(filename), Language.UNSUPPORTED)

    @property
    def extensions(self) -> Mapping[str, Language]:
        return MappingProxyType(self._by_ext)
