"""
Pytest fixtures for text splitter tests.
"""

import pytest

from text_splitter import SplitterConfig


class WordTokenizer:
    """Deterministic whitespace tokenizer: one id per word."""

    def __init__(self):
        self.vocab: dict[str, int] = {}
        self.words: list[str] = []

    def encode(self, text: str) -> list[int]:
        ids = []
        for word in text.split():
            if word not in self.vocab:
                self.vocab[word] = len(self.words)
                self.words.append(word)
            ids.append(self.vocab[word])
        return ids

    def decode(self, ids: list[int]) -> str:
        return " ".join(self.words[i] for i in ids)


@pytest.fixture
def word_tokenizer():
    """A tokenizer that needs no encoding files."""
    return WordTokenizer()


@pytest.fixture
def lines_text():
    """Three short lines separated by single line breaks."""
    return "This is a long text.\nIt will be split.\nInto smaller chunks."


@pytest.fixture
def paragraphs_text():
    """Three paragraphs separated by blank lines."""
    return "First paragraph.\n\nSecond paragraph.\n\nThird paragraph."


@pytest.fixture
def small_config():
    """A character-measured config with room for a few words per chunk."""
    return SplitterConfig(chunk_size=10, chunk_overlap=0)
