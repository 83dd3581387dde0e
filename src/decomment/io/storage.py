from __future__ import annotations
"""Text file access for the runner.

Reads keep line endings exactly as stored (newline translation disabled), and
writes are atomic: the new content is written to a temporary sibling file
which then replaces the target with `os.replace`. A failed write therefore
never leaves a half-written file behind.
"""
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from decomment.constants import DEFAULT_ENCODING, FORMATTED_SUFFIX
from decomment.core.errors import ReadError, WriteError
from decomment.core.interfaces.fs import StorageProtocol
from decomment.logging.helpers import get_logger, trace_io


def formatted_copy_path(path: Path) -> Path:
    """Return the side-copy target for *path* (``foo.c`` -> ``foo_formatted.c``)."""
    return path.with_name(f'{path.stem}{FORMATTED_SUFFIX}{path.suffix}')


class TextFileStorage(StorageProtocol):
    def __init__(self, *, encoding: str = DEFAULT_ENCODING, logger: Optional[logging.Logger] = None) -> None:
        self._encoding = encoding
        self._log = logger or get_logger('io.storage')

    def read(self, path: Path) -> str:
        try:
            with open(path, 'r', encoding=self._encoding, newline='') as fh:
                text = fh.read()
        except UnicodeDecodeError as exc:
            raise ReadError(f'{path}: not valid {self._encoding} text ({exc.reason})', path=path) from exc
        except OSError as exc:
            raise ReadError(f'{path}: {exc.strerror or exc}', path=path) from exc
        trace_io(self._log, 'read', path=str(path), chars=len(text))
        return text

    def write(self, path: Path, text: str) -> None:
        self._atomic_write(path, text, mode_from=path)

    def write_copy(self, path: Path, text: str) -> Path:
        target = formatted_copy_path(path)
        self._atomic_write(target, text, mode_from=path)
        return target

    def _atomic_write(self, target: Path, text: str, *, mode_from: Path) -> None:
        tmp: Optional[Path] = None
        try:
            with tempfile.NamedTemporaryFile(
                'w',
                encoding=self._encoding,
                newline='',
                dir=target.parent,
                prefix=f'.{target.name}.',
                suffix='.tmp',
                delete=False,
            ) as fh:
                tmp = Path(fh.name)
                fh.write(text)
            shutil.copymode(mode_from, tmp)
            os.replace(tmp, target)
        except (OSError, UnicodeEncodeError) as exc:
            if tmp is not None:
                self._discard(tmp)
            reason = getattr(exc, 'strerror', None) or exc
            raise WriteError(f'{target}: {reason}', path=target) from exc
        trace_io(self._log, 'write', path=str(target), chars=len(text))

    def _discard(self, tmp: Path) -> None:
        try:
            tmp.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            self._log.warning('⚠  could not remove temporary file %s (%s)', tmp, exc)
