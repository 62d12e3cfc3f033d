"""
Custom Exceptions for the Text Splitter.

Only configuration problems are raised. Anomalies found while splitting
(oversized fragments, unsplittable units) are logged and the content is
still emitted, so a splitting call never fails half-way.

Exception Hierarchy:
    SplitterError (base)
    ├── ConfigurationError
    │   ├── InvalidOverlapError
    │   ├── UnsupportedLanguageError
    │   └── UnknownStrategyError
    └── TokenizerError

Usage:
    from text_splitter.exceptions import ConfigurationError

    try:
        splitter = TextSplitter.recursive(chunk_size=10, chunk_overlap=20)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class SplitterError(Exception):
    """
    Base exception for all text splitter errors.

    Not a ValueError subclass: pydantic wraps ValueError/AssertionError
    raised by validators into ValidationError, these reach the caller
    unchanged.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "A text splitter error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigurationError(SplitterError):
    """Base class for invalid splitter configurations. Always fatal."""

    pass


class InvalidOverlapError(ConfigurationError):
    """
    Raised when chunk_overlap is not smaller than chunk_size.

    Attributes:
        chunk_size: The configured chunk size
        chunk_overlap: The configured overlap
    """

    def __init__(self, chunk_size: int, chunk_overlap: int):
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        super().__init__(
            f"chunk_overlap ({chunk_overlap}) must be less than "
            f"chunk_size ({chunk_size})"
        )


class UnsupportedLanguageError(ConfigurationError):
    """
    Raised when no separator table exists for a language tag.

    Attributes:
        language: The requested language tag
    """

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Language {language!r} is not supported")


class UnknownStrategyError(ConfigurationError):
    """
    Raised when a splitting strategy name is not registered.

    Attributes:
        strategy: The requested strategy name
    """

    def __init__(self, strategy: str, available: Optional[list[str]] = None):
        self.strategy = strategy
        details = f"available: {', '.join(available)}" if available else None
        super().__init__(f"Unknown splitting strategy: {strategy!r}", details)


# =============================================================================
# TOKENIZER ERRORS
# =============================================================================


class TokenizerError(SplitterError):
    """
    Raised when a tokenizer backend cannot be loaded.

    Attributes:
        encoding_name: The encoding that failed to load
        original_error: The underlying error from tiktoken
    """

    def __init__(
        self,
        encoding_name: str,
        original_error: Optional[Exception] = None,
    ):
        self.encoding_name = encoding_name
        self.original_error = original_error
        details = str(original_error) if original_error else None
        super().__init__(f"Cannot load tokenizer encoding: {encoding_name}", details)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def format_error_chain(error: Exception) -> str:
    """
    Format an exception and its chain for logging.

    Returns a multi-line string showing the error hierarchy.
    """
    lines = []
    current = error
    depth = 0

    while current is not None:
        prefix = "  " * depth + ("└─ " if depth > 0 else "")
        lines.append(f"{prefix}{type(current).__name__}: {current}")

        if getattr(current, "original_error", None):
            current = current.original_error
            depth += 1
        elif current.__cause__:
            current = current.__cause__
            depth += 1
        else:
            break

    return "\n".join(lines)
