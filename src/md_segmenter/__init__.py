# Collection
from .collection import (
    DirectoryCollector,
    FileHandle,
    FileResolver,
    LocalFileHandle,
    LocalFileResolver,
    MarkdownDocument,
    collect_paragraphs,
    segment_file,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    DocumentParser,
    DocumentReadError,
    MarkdownParser,
    ParagraphSequence,
    SegmenterConfig,
    load_config,
    split_paragraphs,
)

__all__ = [
    # Collection
    "DirectoryCollector",
    "FileHandle",
    "FileResolver",
    "LocalFileHandle",
    "LocalFileResolver",
    "MarkdownDocument",
    "collect_paragraphs",
    "segment_file",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DocumentParser",
    "DocumentReadError",
    "MarkdownParser",
    "ParagraphSequence",
    "SegmenterConfig",
    "load_config",
    "split_paragraphs",
]
