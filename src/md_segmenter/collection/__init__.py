from .base import FileHandle, FileResolver
from .collector import DirectoryCollector, collect_paragraphs, segment_file
from .document import MarkdownDocument
from .local import LocalFileHandle, LocalFileResolver

__all__ = [
    "DirectoryCollector",
    "FileHandle",
    "FileResolver",
    "LocalFileHandle",
    "LocalFileResolver",
    "MarkdownDocument",
    "collect_paragraphs",
    "segment_file",
]
