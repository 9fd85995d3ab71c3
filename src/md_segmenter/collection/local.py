# src/md_segmenter/collection/local.py

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalFileHandle:
    local_path: Path
    encoding: str = "utf-8"

    @property
    def path(self) -> str:
        return str(self.local_path)

    @property
    def name(self) -> str:
        return self.local_path.name

    def is_dir(self) -> bool:
        return self.local_path.is_dir()

    def is_file(self) -> bool:
        return self.local_path.is_file()

    def open(self) -> TextIO:
        # newline="" hands carriage returns through to the parser untranslated
        return open(self.local_path, encoding=self.encoding, newline="")

    def children(self) -> Iterator["LocalFileHandle"]:
        for child in self.local_path.iterdir():
            yield LocalFileHandle(child, self.encoding)


class LocalFileResolver:
    """
    Resolves paths against the local filesystem.

    With a `root`, paths are taken relative to it, so "/docs" and "docs"
    both resolve to `root / "docs"`.
    """

    def __init__(self, root: str | Path | None = None, encoding: str = "utf-8") -> None:
        self._root = Path(root) if root is not None else None
        self._encoding = encoding

    def get(self, path: str) -> LocalFileHandle:
        if self._root is not None:
            local_path = self._root / path.lstrip("/")
        else:
            local_path = Path(path)

        if not local_path.exists():
            logger.error("Path not found: %s", local_path)
            raise FileNotFoundError(f"Path '{local_path}' not found")

        return LocalFileHandle(local_path, self._encoding)
