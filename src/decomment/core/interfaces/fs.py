from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Protocol, runtime_checkable


@runtime_checkable
class StorageProtocol(Protocol):
    def read(self, path: Path) -> str:
        ...

    def write(self, path: Path, text: str) -> None:
        ...

    def write_copy(self, path: Path, text: str) -> Path:
        ...


@runtime_checkable
class WalkerProtocol(Protocol):
    """Enumerates candidate files below a root directory."""

    errors: List[str]

    def walk(self, root: Path) -> Iterator[Path]:
        """Yield regular files; per-entry failures go to `errors`."""
        ...
