"""
Segmentation strategies.

A Segmenter turns text into chunks for a given SplitterConfig. Each
strategy is an independent class; the shared pieces (merge_splits,
resolve, pack_units) are plain functions they call, so a splitter is a
configuration plus one of these strategy objects rather than a subclass.

Strategies:
- CharacterSegmenter: one literal separator, merged directly
- RecursiveSegmenter: hierarchical separator fallback
- TokenSegmenter: fixed windows over token ids
- SentenceSegmenter: sentence boundaries, greedily packed
- ParagraphSegmenter: paragraph boundaries, greedily packed
"""

import re
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Pattern, Sequence, Union

from .boundaries import pack_units
from .logging_config import get_logger
from .merger import merge_splits
from .models import SplitterConfig
from .recursive import resolve
from .sentence_splitter import DEFAULT_ABBREVIATIONS, split_sentences
from .separators import (
    DEFAULT_SEPARATORS,
    Language,
    get_separators_for_language,
    split_on_separator,
)
from .tokenizer import Tokenizer

logger = get_logger(__name__)

DEFAULT_PARAGRAPH_PATTERN = r"\n\s*\n"


class Segmenter(ABC):
    """Capability interface shared by all splitting strategies."""

    name: str = "segmenter"

    @abstractmethod
    def split(self, text: str, config: SplitterConfig) -> list[str]:
        """Split text into chunks. Empty or whitespace-only text gives []."""


class CharacterSegmenter(Segmenter):
    """Split on a single literal separator, then merge. No recursion."""

    name = "character"

    def __init__(self, separator: str = "\n\n"):
        self.separator = separator

    def split(self, text: str, config: SplitterConfig) -> list[str]:
        if not text or not text.strip():
            return []
        splits = split_on_separator(text, self.separator, config.keep_separator)
        join_separator = "" if config.keep_separator else self.separator
        return merge_splits(splits, join_separator, config)


class RecursiveSegmenter(Segmenter):
    """Split on the most structural separator present, recursing as needed."""

    name = "recursive"

    def __init__(self, separators: Optional[Sequence[str]] = None):
        self.separators = list(separators) if separators is not None else list(DEFAULT_SEPARATORS)

    @classmethod
    def from_language(cls, language: Union[Language, str]) -> "RecursiveSegmenter":
        """Build a segmenter with the separator table of a language."""
        return cls(get_separators_for_language(language))

    def split(self, text: str, config: SplitterConfig) -> list[str]:
        if not text or not text.strip():
            return []
        return resolve(text, self.separators, config)


class TokenSegmenter(Segmenter):
    """
    Fixed windows of chunk_size token ids.

    After the first window, each window starts chunk_overlap tokens before
    the end of the previous one. Every window is decoded on its own, so
    text around window boundaries may not match the source exactly (a
    multi-byte character or merged sub-word can be cut in two). This is a
    property of sub-word tokenization and is not corrected here.
    """

    name = "token"

    def __init__(self, tokenizer: Tokenizer):
        self.tokenizer = tokenizer

    def split(self, text: str, config: SplitterConfig) -> list[str]:
        if not text or not text.strip():
            return []

        input_ids = self.tokenizer.encode(text)
        chunks: list[str] = []
        start = 0
        while start < len(input_ids):
            if start > 0:
                start -= config.chunk_overlap
            end = min(start + config.chunk_size, len(input_ids))
            chunk = self.tokenizer.decode(input_ids[start:end])
            if chunk.strip():
                chunks.append(chunk)
            start = end

        logger.debug(f"Split {len(input_ids)} tokens into {len(chunks)} windows")
        return chunks


class SentenceSegmenter(Segmenter):
    """
    Sentence-boundary chunks.

    Sentences are packed greedily up to chunk_size; sentences longer than
    that are hard-split at the last space before the limit. merge_splits
    runs afterwards only to add overlap when chunk_overlap > 0.

    Overlap rarely shows up in practice: merge_splits only carries a tail
    that leaves room for the next fragment, and two consecutive packed
    chunks never fit together (otherwise they would have been packed into
    one). Usually the only overlap comes next to a hard-split sentence.
    """

    name = "sentence"

    def __init__(self, abbreviations: Optional[Iterable[str]] = None):
        self.abbreviations = frozenset(
            abbreviations if abbreviations is not None else DEFAULT_ABBREVIATIONS
        )

    def split(self, text: str, config: SplitterConfig) -> list[str]:
        if not text or not text.strip():
            return []

        sentences = split_sentences(text, self.abbreviations)
        packed = pack_units(sentences, " ", config.chunk_size, config.length_function)

        if config.chunk_overlap > 0:
            return merge_splits(packed, " ", config)
        return packed


class ParagraphSegmenter(Segmenter):
    """
    Paragraph-boundary chunks.

    Paragraphs are delimited by paragraph_pattern (default: a blank line,
    i.e. two line breaks with optional whitespace in between) and packed
    like sentences, joined by a blank line. The same overlap limitation as
    SentenceSegmenter applies: packed paragraphs are emitted without a
    carried-over tail unless a hard split left room for one.
    """

    name = "paragraph"

    def __init__(self, paragraph_pattern: Optional[Union[str, Pattern[str]]] = None):
        self.paragraph_pattern = re.compile(
            paragraph_pattern if paragraph_pattern is not None else DEFAULT_PARAGRAPH_PATTERN
        )

    def split(self, text: str, config: SplitterConfig) -> list[str]:
        if not text or not text.strip():
            return []

        paragraphs = [
            p.strip() for p in self.paragraph_pattern.split(text) if p.strip()
        ]
        packed = pack_units(paragraphs, "\n\n", config.chunk_size, config.length_function)

        if config.chunk_overlap > 0:
            return merge_splits(packed, "\n\n", config)
        return packed
