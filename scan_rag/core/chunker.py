"""
Text chunker with paragraph, sentence and hard-split fallback.

Splits document text into an ordered list of chunks no longer than a
character budget. Strategies are tried in order (paragraphs, then
sentences, then fixed-length slices) and only for the pieces that are
still too large.

Chunks are slices of the original text. Delimiters between units packed
into the same chunk are kept verbatim; delimiters that fall on a chunk
boundary are dropped.

Dependencies: re (stdlib)
System role: First stage of document ingestion
"""

import re
from abc import ABC, abstractmethod

from scan_rag.core.exceptions import ValidationError

Span = tuple[int, int]

PARAGRAPH_DELIMITER = re.compile(r"\n\s*\n")
SENTENCE_DELIMITER = re.compile(r"(?<=[.!?])\s+")


class SplitStrategy(ABC):
    """Splits a span of text into ordered, non-overlapping unit spans."""

    name: str = "strategy"

    @abstractmethod
    def units(self, text: str, start: int, end: int) -> list[Span]:
        """
        Split ``text[start:end]`` into unit spans.

        Args:
            text: Full document text
            start: Span start offset
            end: Span end offset (exclusive)

        Returns:
            list[Span]: Unit spans in reading order, delimiters excluded
        """


class DelimiterSplitter(SplitStrategy):
    """Splits on every match of a delimiter pattern."""

    def __init__(self, pattern: re.Pattern, name: str) -> None:
        self._pattern = pattern
        self.name = name

    def units(self, text: str, start: int, end: int) -> list[Span]:
        spans: list[Span] = []
        cursor = start
        for match in self._pattern.finditer(text, start, end):
            if match.start() > cursor:
                spans.append((cursor, match.start()))
            cursor = max(cursor, match.end())
        if cursor < end:
            spans.append((cursor, end))
        return spans


class ParagraphSplitter(DelimiterSplitter):
    """Splits on runs of blank lines."""

    def __init__(self) -> None:
        super().__init__(PARAGRAPH_DELIMITER, "paragraph")


class SentenceSplitter(DelimiterSplitter):
    """Splits on whitespace following end-of-sentence punctuation."""

    def __init__(self) -> None:
        super().__init__(SENTENCE_DELIMITER, "sentence")


class HardSplitter(SplitStrategy):
    """Cuts fixed-length slices; the last one may be shorter."""

    name = "hard"

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValidationError("Slice size must be positive", field="size")
        self._size = size

    def units(self, text: str, start: int, end: int) -> list[Span]:
        return [
            (offset, min(offset + self._size, end))
            for offset in range(start, end, self._size)
        ]


class TextChunker:
    """
    Greedy chunk packer over a chain of split strategies.

    The hard splitter is always the last link of the chain, so every unit
    that reaches it fits the budget and the recursion terminates.
    """

    def __init__(
        self,
        max_size: int,
        strategies: list[SplitStrategy] | None = None,
    ) -> None:
        """
        Initialize chunker with a size budget.

        Args:
            max_size: Maximum chunk length in characters
            strategies: Delimiter strategies tried before the hard split
                (defaults to paragraphs then sentences)

        Raises:
            ValidationError: When max_size is not positive
        """
        if max_size <= 0:
            raise ValidationError(
                f"max_size must be positive, got {max_size}",
                field="max_size",
            )
        self.max_size = max_size
        chain = strategies if strategies is not None else [ParagraphSplitter(), SentenceSplitter()]
        self._strategies: list[SplitStrategy] = [*chain, HardSplitter(max_size)]

    def chunk(self, text: str) -> list[str]:
        """
        Split text into ordered chunks of at most ``max_size`` characters.

        Args:
            text: Document text

        Returns:
            list[str]: Chunks in reading order; empty for blank input
        """
        if not text or not text.strip():
            return []
        if len(text) <= self.max_size:
            return [text]

        spans = self._pack(text, 0, len(text), level=0)
        return [text[start:end] for start, end in spans]

    def _pack(self, text: str, start: int, end: int, level: int) -> list[Span]:
        """Greedily pack the units of one strategy, recursing on oversized units."""
        strategy = self._strategies[level]
        packed: list[Span] = []
        buffer: Span | None = None

        for unit_start, unit_end in strategy.units(text, start, end):
            if not text[unit_start:unit_end].strip():
                continue

            if buffer is not None and unit_end - buffer[0] <= self.max_size:
                buffer = (buffer[0], unit_end)
                continue

            if buffer is not None:
                packed.append(buffer)
                buffer = None

            if unit_end - unit_start <= self.max_size:
                buffer = (unit_start, unit_end)
            else:
                packed.extend(self._pack(text, unit_start, unit_end, level + 1))

        if buffer is not None:
            packed.append(buffer)
        return packed


def chunk_text(text: str, max_size: int) -> list[str]:
    """
    Split text into bounded-size chunks.

    Args:
        text: Document text
        max_size: Maximum chunk length in characters

    Returns:
        list[str]: Ordered chunks; empty when the text is blank
    """
    return TextChunker(max_size).chunk(text)
