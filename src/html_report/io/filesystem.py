from __future__ import annotations

import shutil
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """The filesystem operations a report needs."""

    def exists(self, path: Path) -> bool: ...

    def make_dirs(self, path: Path) -> None: ...

    def copy_file(self, src: Path, dst: Path) -> None: ...

    def write_text(self, path: Path, content: str, *, encoding: str = "utf-8") -> None: ...

    def write_bytes(self, path: Path, content: bytes) -> None: ...

    def remove_tree(self, path: Path) -> None: ...


class LocalFileSystem:
    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def copy_file(self, src: Path, dst: Path) -> None:
        # Byte-for-byte copy; metadata is not carried over.
        shutil.copyfile(src, dst)

    def write_text(self, path: Path, content: str, *, encoding: str = "utf-8") -> None:
        Path(path).write_text(content, encoding=encoding)

    def write_bytes(self, path: Path, content: bytes) -> None:
        Path(path).write_bytes(content)

    def remove_tree(self, path: Path) -> None:
        shutil.rmtree(path)
