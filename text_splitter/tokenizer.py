"""
Tokenizer support for the Text Splitter

Wraps tiktoken behind a small encode/decode capability used by the token
window strategy, and exposes token counting as a pluggable length measure
for the character-based strategies.

Encodings are loaded once per name and reused across calls. A loaded
tiktoken.Encoding is safe for concurrent read-only use, so one splitter
instance can be shared between threads.

Usage:
    from text_splitter.tokenizer import TiktokenTokenizer, count_tokens

    tokenizer = TiktokenTokenizer("cl100k_base")
    ids = tokenizer.encode("Hello world")
    n = count_tokens("Hello world")
"""

from typing import Collection, Literal, Protocol, Union

import tiktoken

from .exceptions import TokenizerError
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_ENCODING = "cl100k_base"

SpecialTokens = Union[Literal["all"], Collection[str]]

# Encoders by name - initialized once, reused across calls.
_encoders: dict[str, tiktoken.Encoding] = {}


def _get_encoder(encoding_name: str = DEFAULT_ENCODING) -> tiktoken.Encoding:
    """Get or initialize the tiktoken encoder for an encoding name."""
    encoder = _encoders.get(encoding_name)
    if encoder is None:
        try:
            encoder = tiktoken.get_encoding(encoding_name)
        except (KeyError, ValueError, OSError) as e:
            raise TokenizerError(encoding_name, original_error=e) from e
        logger.debug(f"Loaded tiktoken encoding {encoding_name}")
        _encoders[encoding_name] = encoder
    return encoder


class Tokenizer(Protocol):
    """Opaque encode/decode capability consumed by the token window strategy."""

    def encode(self, text: str) -> list[int]:
        ...

    def decode(self, ids: list[int]) -> str:
        ...


class TiktokenTokenizer:
    """
    Tokenizer backed by a tiktoken encoding.

    Args:
        encoding_name: tiktoken encoding (default "gpt2")
        allowed_special: Special tokens encoded as such, or "all"
        disallowed_special: Special tokens that raise when found, or "all"
    """

    def __init__(
        self,
        encoding_name: str = "gpt2",
        allowed_special: SpecialTokens = (),
        disallowed_special: SpecialTokens = "all",
    ):
        self.encoding_name = encoding_name
        self.allowed_special = (
            allowed_special if allowed_special == "all" else set(allowed_special)
        )
        self.disallowed_special = (
            disallowed_special
            if disallowed_special == "all"
            else set(disallowed_special)
        )
        self._encoder = _get_encoder(encoding_name)

    def encode(self, text: str) -> list[int]:
        return self._encoder.encode(
            text,
            allowed_special=self.allowed_special,
            disallowed_special=self.disallowed_special,
        )

    def decode(self, ids: list[int]) -> str:
        return self._encoder.decode(ids)


def count_tokens(text: str, encoding_name: str = DEFAULT_ENCODING) -> int:
    """
    Count the number of tokens in a text string.

    Special-token text is counted as ordinary text, so arbitrary user
    input never raises.

    Args:
        text: The text to tokenize.
        encoding_name: tiktoken encoding to count with.

    Returns:
        Number of tokens.
    """
    if not text:
        return 0
    return len(_get_encoder(encoding_name).encode(text, disallowed_special=()))


def count_tokens_batch(
    texts: list[str], encoding_name: str = DEFAULT_ENCODING
) -> list[int]:
    """
    Count tokens for a list of texts.

    Args:
        texts: List of text strings.
        encoding_name: tiktoken encoding to count with.

    Returns:
        List of token counts, one per input text.
    """
    encoder = _get_encoder(encoding_name)
    return [len(encoder.encode(t, disallowed_special=())) if t else 0 for t in texts]


def token_length_function(encoding_name: str = DEFAULT_ENCODING):
    """Return a length measure counting tokens of the given encoding."""
    # Load eagerly so a bad encoding name fails at configuration time.
    _get_encoder(encoding_name)

    def _length(text: str) -> int:
        return count_tokens(text, encoding_name)

    return _length
