# src/md_segmenter/parsers/markdown_parser.py

import codecs
import logging
import re
from collections.abc import Iterable, Iterator
from contextlib import closing
from time import monotonic
from typing import BinaryIO, TextIO

from md_segmenter.observability import names
from md_segmenter.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser, ParagraphSequence
from .config import SegmenterConfig
from .errors import DocumentReadError

logger = logging.getLogger(__name__)

FENCE = "```"

# An opener without a closer runs to the end of the text.
_HTML_COMMENT = re.compile(r"<!--.*?(?:-->|\Z)", re.DOTALL)


class MarkdownParser(DocumentParser):
    """
    Streaming markdown paragraph segmenter.
    - Splits on blank lines
    - Strips HTML comments from prose paragraphs
    - Keeps fenced code blocks whole, prefixed by the paragraph before them
    """

    def __init__(
        self,
        config: SegmenterConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._config = config or SegmenterConfig()
        self.metrics_hook = metrics_hook

    def parse(self, stream: TextIO | BinaryIO, path: str) -> ParagraphSequence:
        start = monotonic()
        logger.info("Parsing %s...", path)

        try:
            with closing(stream):
                paragraphs = split_paragraphs(self._read_chars(stream))
        except (OSError, UnicodeDecodeError) as e:
            self.metrics_hook.increment(names.SEGMENTER_READ_ERRORS_TOTAL)
            logger.error("Failed to read %s: %s", path, e)
            raise DocumentReadError(path, e) from e

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SEGMENTER_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.SEGMENTER_FILES_PARSED_TOTAL)
        self.metrics_hook.record_gauge(
            names.SEGMENTER_PARAGRAPHS_EMITTED, float(len(paragraphs))
        )
        logger.debug("Parsed %d paragraphs from %s", len(paragraphs), path)
        return paragraphs

    def _read_chars(self, stream: TextIO | BinaryIO) -> Iterator[str]:
        # Binary streams are decoded incrementally so multi-byte characters
        # may straddle read boundaries.
        decoder = None
        while True:
            chunk = stream.read(self._config.read_size)
            if not chunk:
                break
            if isinstance(chunk, bytes):
                if decoder is None:
                    decoder = codecs.getincrementaldecoder(self._config.encoding)()
                yield from decoder.decode(chunk)
            else:
                yield from chunk

        if decoder is not None:
            yield from decoder.decode(b"", final=True)


def split_paragraphs(chars: Iterable[str]) -> ParagraphSequence:
    """
    Segment a character sequence into paragraphs in a single pass.

    The fence check runs before each character is handled and only looks at
    the last three buffered characters, so any run of three backticks toggles
    code mode. Carriage returns are dropped before that check.

    Whatever is left in the buffer at the end is emitted as-is, without
    comment stripping or trimming.
    """
    paragraphs: list[str] = []
    buffer: list[str] = []
    in_code_block = False

    for c in chars:
        if c == "\r":
            continue

        if _ends_with_fence(buffer):
            in_code_block = not in_code_block

            if in_code_block and paragraphs:
                # give the code block its introduction
                buffer[:0] = list(paragraphs.pop() + "\n\n")

        if c == "\n" and not in_code_block and buffer and buffer[-1] == "\n":
            normalized = normalize_paragraph("".join(buffer))
            if normalized:
                paragraphs.append(normalized)
            buffer.clear()
        else:
            buffer.append(c)

    if buffer:
        paragraphs.append("".join(buffer))

    return paragraphs


def normalize_paragraph(text: str) -> str:
    """Trim a completed paragraph, removing HTML comments unless it holds a fence."""
    if FENCE in text:
        return text.strip()
    return _HTML_COMMENT.sub("", text).strip()


def _ends_with_fence(buffer: list[str]) -> bool:
    return len(buffer) >= 3 and buffer[-1] == buffer[-2] == buffer[-3] == "`"
