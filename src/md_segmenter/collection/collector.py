# src/md_segmenter/collection/collector.py

import logging
from collections.abc import Iterable
from time import monotonic

from md_segmenter.observability import names
from md_segmenter.observability.base import MetricsHook, NoOpMetricsHook
from md_segmenter.parsers.base import DocumentParser, ParagraphSequence
from md_segmenter.parsers.config import SegmenterConfig
from md_segmenter.parsers.errors import DocumentReadError
from md_segmenter.parsers.markdown_parser import MarkdownParser

from .base import FileHandle, FileResolver
from .local import LocalFileResolver

logger = logging.getLogger(__name__)


class DirectoryCollector:
    """
    Collects paragraphs from a markdown file or from every markdown file in a
    directory tree.

    Files are parsed one at a time and results are concatenated in visit
    order. The first read failure aborts the whole collection.
    """

    def __init__(
        self,
        resolver: FileResolver | None = None,
        parser: DocumentParser | None = None,
        config: SegmenterConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._config = config or SegmenterConfig()
        self._resolver = resolver or LocalFileResolver(encoding=self._config.encoding)
        self._parser = parser or MarkdownParser(self._config, metrics_hook)
        self.metrics_hook = metrics_hook

    def collect(self, root: str | FileHandle) -> ParagraphSequence:
        start = monotonic()
        handle = self._resolve(root)

        if handle.is_dir():
            logger.info("Collecting paragraphs under %s", handle.path)
            paragraphs = self._collect_directory(handle)
        else:
            paragraphs = self.segment(handle)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.COLLECTOR_COLLECT_DURATION, elapsed_ms)
        logger.info("Collected %d paragraphs from %s", len(paragraphs), handle.path)
        return paragraphs

    def segment(self, file: str | FileHandle) -> ParagraphSequence:
        """Parse a single file, whatever its extension."""
        handle = self._resolve(file)
        try:
            stream = handle.open()
        except OSError as e:
            self.metrics_hook.increment(names.SEGMENTER_READ_ERRORS_TOTAL)
            logger.error("Failed to open %s: %s", handle.path, e)
            raise DocumentReadError(handle.path, e) from e

        return self._parser.parse(stream, handle.path)

    def _collect_directory(self, directory: FileHandle) -> ParagraphSequence:
        results: list[str] = []

        for entry in self._entries(directory):
            if entry.is_dir():
                results.extend(self._collect_directory(entry))
            elif entry.is_file() and self._is_markdown(entry):
                results.extend(self.segment(entry))
            else:
                logger.debug("Skipping %s", entry.path)
                self.metrics_hook.increment(names.COLLECTOR_ENTRIES_SKIPPED_TOTAL)

        return results

    def _entries(self, directory: FileHandle) -> Iterable[FileHandle]:
        try:
            entries = list(directory.children())
        except OSError as e:
            logger.error("Failed to list %s: %s", directory.path, e)
            raise DocumentReadError(directory.path, e) from e

        if self._config.sort_entries:
            entries.sort(key=lambda entry: entry.name)
        return entries

    def _is_markdown(self, entry: FileHandle) -> bool:
        return entry.name.lower().endswith(self._config.extension.lower())

    def _resolve(self, target: str | FileHandle) -> FileHandle:
        if isinstance(target, str):
            return self._resolver.get(target)
        return target


def segment_file(path: str, resolver: FileResolver | None = None) -> ParagraphSequence:
    return DirectoryCollector(resolver).segment(path)


def collect_paragraphs(
    root: str, resolver: FileResolver | None = None
) -> ParagraphSequence:
    return DirectoryCollector(resolver).collect(root)
