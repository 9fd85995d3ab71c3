# src/md_segmenter/collection/document.py

from collections.abc import Iterator

from md_segmenter.observability.base import MetricsHook, NoOpMetricsHook
from md_segmenter.parsers.config import SegmenterConfig

from .base import FileResolver
from .collector import DirectoryCollector


class MarkdownDocument:
    """
    Iterable paragraphs of a markdown file, or of every markdown file below a
    directory. The source is re-read on each iteration.

    Example:
        >>> doc = MarkdownDocument("docs/", resolver=LocalFileResolver(root="site"))
        >>> paragraphs = list(doc)
    """

    def __init__(
        self,
        path: str | None = None,
        resolver: FileResolver | None = None,
        config: SegmenterConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.path = path
        self._collector = DirectoryCollector(
            resolver, config=config, metrics_hook=metrics_hook
        )

    def __iter__(self) -> Iterator[str]:
        if self.path is None:
            raise ValueError("MarkdownDocument has no path set")
        return iter(self._collector.collect(self.path))
