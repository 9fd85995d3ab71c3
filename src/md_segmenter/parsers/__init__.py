from .base import DocumentParser, ParagraphSequence
from .config import SegmenterConfig, load_config
from .errors import DocumentReadError
from .markdown_parser import MarkdownParser, normalize_paragraph, split_paragraphs

__all__ = [
    "DocumentParser",
    "DocumentReadError",
    "MarkdownParser",
    "ParagraphSequence",
    "SegmenterConfig",
    "load_config",
    "normalize_paragraph",
    "split_paragraphs",
]
