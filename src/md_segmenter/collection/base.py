# src/md_segmenter/collection/base.py

from collections.abc import Iterable
from typing import BinaryIO, Protocol, TextIO


class FileHandle(Protocol):
    """A file or directory supplied by the embedding system."""

    @property
    def path(self) -> str: ...

    @property
    def name(self) -> str: ...

    def is_dir(self) -> bool: ...

    def is_file(self) -> bool: ...

    def open(self) -> TextIO | BinaryIO: ...

    def children(self) -> Iterable["FileHandle"]: ...


class FileResolver(Protocol):
    def get(self, path: str) -> FileHandle: ...
