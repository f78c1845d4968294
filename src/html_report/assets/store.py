from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from html_report.domain.errors import DuplicateAssetError, SourceNotFoundError
from html_report.io.filesystem import FileSystem

logger = logging.getLogger(__name__)


class AssetStore:
    """Owns the data folder of one report.

    Every asset is stored under its sanitized name. Names are never reused:
    a second asset with the same name is a caller error, not an overwrite.
    """

    def __init__(self, data_dir: Path, *, fs: FileSystem) -> None:
        self._data_dir = data_dir
        self._fs = fs
        self._claimed: set[str] = set()

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._claimed)

    def path_for(self, name: str) -> Path:
        return self._data_dir / name

    def rel(self, name: str) -> str:
        # link target as seen from report.html
        return PurePosixPath(self._data_dir.name, name).as_posix()

    def ensure_available(self, name: str, *, requested: str) -> None:
        if name in self._claimed or self._fs.exists(self.path_for(name)):
            raise DuplicateAssetError(
                f"{requested!r} maps to asset {name!r}, which already exists. "
                "Please choose a different name."
            )

    def write_bytes(self, name: str, content: bytes, *, requested: str) -> str:
        self.ensure_available(name, requested=requested)
        self._fs.write_bytes(self.path_for(name), content)
        self._claimed.add(name)
        logger.debug("Wrote asset %s (%d bytes)", name, len(content))
        return self.rel(name)

    def copy_in(self, source: Path, name: str, *, requested: str) -> str:
        self.ensure_available(name, requested=requested)
        if not self._fs.exists(source):
            raise SourceNotFoundError(f"Cannot link {str(source)!r}: no such file.")
        self._fs.copy_file(source, self.path_for(name))
        self._claimed.add(name)
        logger.debug("Copied %s to asset %s", source, name)
        return self.rel(name)
