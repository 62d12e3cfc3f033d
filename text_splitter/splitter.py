"""
TextSplitter - a SplitterConfig composed with a Segmenter.

The factory classmethods cover the usual setups (character, recursive,
language presets, token windows, sentences, paragraphs). A configured
splitter holds no mutable state, so one instance can be used from several
threads at once; splitting is synchronous and has no cancellation point,
callers wanting a timeout must impose it around the call.

Usage:
    from text_splitter import TextSplitter

    splitter = TextSplitter.recursive(chunk_size=500, chunk_overlap=50)
    chunks = splitter.split_text(long_text)

    code_splitter = TextSplitter.from_language("python", chunk_size=200, chunk_overlap=20)
    result = code_splitter.split_with_stats(source_code)
"""

from typing import Iterable, Optional, Pattern, Sequence, Union

from .exceptions import InvalidOverlapError
from .logging_config import get_logger
from .models import (
    LengthFunction,
    OversizeDiagnostic,
    SplitResult,
    SplitStats,
    SplitterConfig,
)
from .segmenters import (
    CharacterSegmenter,
    ParagraphSegmenter,
    RecursiveSegmenter,
    Segmenter,
    SentenceSegmenter,
    TokenSegmenter,
)
from .separators import Language
from .tokenizer import (
    DEFAULT_ENCODING,
    SpecialTokens,
    TiktokenTokenizer,
    token_length_function,
)

logger = get_logger(__name__)


class TextSplitter:
    """
    Splits text into ordered, size-bounded, optionally overlapping chunks.

    Args:
        config: Validated splitter configuration.
        segmenter: Strategy producing the chunks.
    """

    def __init__(self, config: Optional[SplitterConfig] = None, segmenter: Optional[Segmenter] = None):
        self.config = config or SplitterConfig()
        self.segmenter = segmenter or RecursiveSegmenter()

    @property
    def strategy(self) -> str:
        return self.segmenter.name

    def split_text(self, text: str) -> list[str]:
        """Split text into chunks in source order."""
        chunks = self.segmenter.split(text, self.config)
        logger.debug(f"{self.strategy}: {len(text or '')} chars -> {len(chunks)} chunks")
        return chunks

    def split_with_stats(self, text: str, document_id: str = "") -> SplitResult:
        """
        Split text and collect statistics and oversize diagnostics.

        Args:
            text: Text to split.
            document_id: Identifier stored on the result.

        Returns:
            SplitResult with chunks, stats and diagnostics.
        """
        chunks = self.split_text(text)
        lengths = [self.config.length_function(c) for c in chunks]
        diagnostics = [
            OversizeDiagnostic(chunk_index=i, length=n, chunk_size=self.config.chunk_size)
            for i, n in enumerate(lengths)
            if n > self.config.chunk_size
        ]
        return SplitResult(
            document_id=document_id,
            strategy=self.strategy,
            chunk_size=self.config.chunk_size,
            chunk_overlap=self.config.chunk_overlap,
            chunks=chunks,
            stats=self._compute_stats(lengths, len(diagnostics)),
            diagnostics=diagnostics,
        )

    def _compute_stats(self, lengths: list[int], oversized: int) -> SplitStats:
        if not lengths:
            return SplitStats()
        return SplitStats(
            total_chunks=len(lengths),
            total_length=sum(lengths),
            avg_chunk_length=sum(lengths) / len(lengths),
            min_chunk_length=min(lengths),
            max_chunk_length=max(lengths),
            oversized_chunks=oversized,
        )

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def character(
        cls,
        separator: str = "\n\n",
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        keep_separator: bool = False,
        length_function: LengthFunction = len,
    ) -> "TextSplitter":
        """Fixed-separator splitter."""
        config = SplitterConfig(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            keep_separator=keep_separator,
            length_function=length_function,
        )
        return cls(config, CharacterSegmenter(separator))

    @classmethod
    def recursive(
        cls,
        separators: Optional[Sequence[str]] = None,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        keep_separator: bool = True,
        length_function: LengthFunction = len,
    ) -> "TextSplitter":
        """Recursive splitter; defaults to paragraphs, lines, words, characters."""
        config = SplitterConfig(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            keep_separator=keep_separator,
            length_function=length_function,
        )
        return cls(config, RecursiveSegmenter(separators))

    @classmethod
    def from_language(
        cls,
        language: Union[Language, str],
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        keep_separator: bool = True,
        length_function: LengthFunction = len,
    ) -> "TextSplitter":
        """Recursive splitter using the separator table of a language."""
        config = SplitterConfig(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            keep_separator=keep_separator,
            length_function=length_function,
        )
        return cls(config, RecursiveSegmenter.from_language(language))

    @classmethod
    def markdown(cls, **kwargs) -> "TextSplitter":
        return cls.from_language(Language.MARKDOWN, **kwargs)

    @classmethod
    def latex(cls, **kwargs) -> "TextSplitter":
        return cls.from_language(Language.LATEX, **kwargs)

    @classmethod
    def from_tiktoken_encoder(
        cls,
        encoding_name: str = DEFAULT_ENCODING,
        separators: Optional[Sequence[str]] = None,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        keep_separator: bool = True,
    ) -> "TextSplitter":
        """Recursive splitter with chunk_size/chunk_overlap counted in tokens."""
        return cls.recursive(
            separators=separators,
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            keep_separator=keep_separator,
            length_function=token_length_function(encoding_name),
        )

    @classmethod
    def token(
        cls,
        encoding_name: str = "gpt2",
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        allowed_special: SpecialTokens = (),
        disallowed_special: SpecialTokens = "all",
    ) -> "TextSplitter":
        """Token-window splitter; sizes are token counts."""
        if chunk_overlap >= chunk_size:
            raise InvalidOverlapError(chunk_size, chunk_overlap)
        tokenizer = TiktokenTokenizer(encoding_name, allowed_special, disallowed_special)
        config = SplitterConfig(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            length_function=token_length_function(encoding_name),
        )
        return cls(config, TokenSegmenter(tokenizer))

    @classmethod
    def sentence(
        cls,
        max_length: int = 1000,
        overlap: int = 0,
        abbreviations: Optional[Iterable[str]] = None,
        length_function: LengthFunction = len,
    ) -> "TextSplitter":
        """Sentence-boundary splitter."""
        config = SplitterConfig(
            chunk_size=max_length,
            chunk_overlap=overlap,
            keep_separator=True,
            length_function=length_function,
        )
        return cls(config, SentenceSegmenter(abbreviations))

    @classmethod
    def paragraph(
        cls,
        max_length: int = 1000,
        overlap: int = 0,
        paragraph_pattern: Optional[Union[str, Pattern[str]]] = None,
        length_function: LengthFunction = len,
    ) -> "TextSplitter":
        """Paragraph-boundary splitter."""
        config = SplitterConfig(
            chunk_size=max_length,
            chunk_overlap=overlap,
            keep_separator=True,
            length_function=length_function,
        )
        return cls(config, ParagraphSegmenter(paragraph_pattern))
