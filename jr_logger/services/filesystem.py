"""File system access used by run loggers and the run catalog."""

from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, Union

PathLike = Union[str, Path]


class FileSystem(Protocol):
    """Operations the run logger needs from a file system."""

    def join_path(self, *parts: PathLike) -> Path: ...

    def ensure_directory(self, path: PathLike) -> Path: ...

    def exists(self, path: PathLike) -> bool: ...

    def append_line(self, path: PathLike, text: str) -> None: ...

    def read_text(self, path: PathLike) -> str: ...

    def write_text(self, path: PathLike, text: str) -> None: ...

    def list_dirs(self, path: PathLike) -> List[Path]: ...


class LocalFileSystem:
    """pathlib-backed FileSystem.

    Errors surface as ``OSError``; callers decide whether to swallow them.
    Text is written without newline translation so ``\\r\\n`` survives as-is.
    """

    def join_path(self, *parts: PathLike) -> Path:
        if not parts:
            raise ValueError("join_path requires at least one part")
        return Path(parts[0]).joinpath(*parts[1:])

    def ensure_directory(self, path: PathLike) -> Path:
        target = Path(path)
        target.mkdir(parents=True, exist_ok=True)
        return target

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def append_line(self, path: PathLike, text: str) -> None:
        with Path(path).open("a", encoding="utf-8", newline="") as handle:
            handle.write(text)

    def read_text(self, path: PathLike) -> str:
        with Path(path).open("r", encoding="utf-8", newline="") as handle:
            return handle.read()

    def write_text(self, path: PathLike, text: str) -> None:
        with Path(path).open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)

    def list_dirs(self, path: PathLike) -> List[Path]:
        root = Path(path)
        if not root.is_dir():
            return []
        return sorted(entry for entry in root.iterdir() if entry.is_dir())
