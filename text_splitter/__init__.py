"""
Text Splitter - size-bounded, overlapping text chunking

Turns arbitrary text into an ordered list of chunks no larger than a
configured size (characters by default, tokens with a token counter),
with optional overlap between consecutive chunks, for embedding and
indexing pipelines.

Quick Start:
    from text_splitter import TextSplitter, DocumentMapper

    splitter = TextSplitter.recursive(chunk_size=500, chunk_overlap=50)
    chunks = splitter.split_text(text)

    docs = DocumentMapper(splitter).create_documents([text], [{"source": "a.txt"}])
    docs[0].metadata["loc"]["lines"]  # {"from": 1, "to": 12}
"""

__version__ = "1.0.0"

from .splitter import TextSplitter
from .documents import DocumentMapper
from .merger import merge_splits
from .recursive import resolve
from .models import (
    ChunkHeaderOptions,
    Document,
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
from .separators import (
    DEFAULT_SEPARATORS,
    Language,
    get_separators_for_language,
)
from .sentence_splitter import split_sentences
from .tokenizer import TiktokenTokenizer, count_tokens
from .exceptions import (
    ConfigurationError,
    InvalidOverlapError,
    SplitterError,
    TokenizerError,
    UnknownStrategyError,
    UnsupportedLanguageError,
)

__all__ = [
    "__version__",
    "TextSplitter",
    "DocumentMapper",
    "merge_splits",
    "resolve",
    "ChunkHeaderOptions",
    "Document",
    "OversizeDiagnostic",
    "SplitResult",
    "SplitStats",
    "SplitterConfig",
    "CharacterSegmenter",
    "ParagraphSegmenter",
    "RecursiveSegmenter",
    "Segmenter",
    "SentenceSegmenter",
    "TokenSegmenter",
    "DEFAULT_SEPARATORS",
    "Language",
    "get_separators_for_language",
    "split_sentences",
    "TiktokenTokenizer",
    "count_tokens",
    "ConfigurationError",
    "InvalidOverlapError",
    "SplitterError",
    "TokenizerError",
    "UnknownStrategyError",
    "UnsupportedLanguageError",
]
