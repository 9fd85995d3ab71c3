# src/md_segmenter/parsers/base.py

from abc import ABC, abstractmethod
from typing import BinaryIO, TextIO, TypeAlias

ParagraphSequence: TypeAlias = list[str]


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, stream: TextIO | BinaryIO, path: str) -> ParagraphSequence:
        """
        Parse one document stream into an ordered list of paragraphs.

        Requirements:
        - Deterministic output for same input
        - The stream is closed before returning, on success or failure
        - Read failures surface as DocumentReadError naming `path`
        """
        raise NotImplementedError
