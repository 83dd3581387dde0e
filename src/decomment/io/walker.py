from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional

from decomment.core.errors import TraversalError
from decomment.core.interfaces.fs import WalkerProtocol
from decomment.logging.helpers import get_logger


class DirectoryWalker(WalkerProtocol):
    """Recursive, deterministic file enumeration below one root.

    Directories and files are visited in sorted order. Hidden entries (name
    starting with '.') are pruned unless `include_hidden` is set; the check
    applies below the root only, so a root inside a hidden directory still
    works. Symlinks are never followed nor yielded, since an in-place rewrite
    would replace the link with a regular file.
    """

    def __init__(self, *, include_hidden: bool = False, logger: Optional[logging.Logger] = None) -> None:
        self._include_hidden = include_hidden
        self._log = logger or get_logger('io.walker')
        self.errors: List[str] = []

    def _visible(self, name: str) -> bool:
        return self._include_hidden or not name.startswith('.')

    def _on_error(self, exc: OSError) -> None:
        where = exc.filename or '?'
        reason = exc.strerror or str(exc)
        self._log.error('⚠  cannot traverse %s (%s) – skipped', where, reason)
        self.errors.append(f'{where}: {reason}')

    def walk(self, root: Path) -> Iterator[Path]:
        root = Path(root)
        if not root.exists():
            raise TraversalError(f'{root} does not exist', path=root)
        if not root.is_dir():
            raise TraversalError(f'{root} is not a directory', path=root)
        try:
            with os.scandir(root):
                pass
        except OSError as exc:
            raise TraversalError(f'{root}: {exc.strerror or exc}', path=root) from exc

        self.errors = []
        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_error):
            dirnames[:] = sorted(d for d in dirnames if self._visible(d))
            for fn in sorted(filenames):
                if not self._visible(fn):
                    continue
                fp = Path(dirpath, fn)
                if fp.is_symlink():
                    self._log.debug('symlink %s – skipped', fp)
                    continue
                if not fp.is_file():
                    continue
                yield fp
