"""
Tests for text splitter exceptions.
"""

import logging

import pytest
from pydantic import ValidationError

from text_splitter import (
    ConfigurationError,
    InvalidOverlapError,
    SplitterConfig,
    SplitterError,
    TokenizerError,
    UnknownStrategyError,
    UnsupportedLanguageError,
)
from text_splitter.exceptions import format_error_chain
from text_splitter.logging_config import get_logger, setup_logging


class TestSplitterError:
    """Tests for base SplitterError."""

    def test_create_simple(self):
        """Test creating error with message only."""
        error = SplitterError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.details is None

    def test_create_with_details(self):
        """Test creating error with details."""
        error = SplitterError("Error occurred", details="More info here")
        assert "Error occurred" in str(error)
        assert "More info here" in str(error)
        assert error.details == "More info here"


class TestConfigurationErrors:
    """Tests for configuration errors."""

    def test_invalid_overlap(self):
        error = InvalidOverlapError(chunk_size=10, chunk_overlap=20)
        assert error.chunk_size == 10
        assert error.chunk_overlap == 20
        assert str(error) == "chunk_overlap (20) must be less than chunk_size (10)"

    def test_unsupported_language(self):
        error = UnsupportedLanguageError("cobol")
        assert error.language == "cobol"
        assert "cobol" in str(error)

    def test_unknown_strategy_lists_available(self):
        error = UnknownStrategyError("semantic", ["character", "recursive"])
        assert error.strategy == "semantic"
        assert "character, recursive" in str(error)

    def test_not_wrapped_by_pydantic(self):
        """Overlap errors escape model validation unchanged."""
        with pytest.raises(InvalidOverlapError):
            SplitterConfig(chunk_size=5, chunk_overlap=5)
        assert not issubclass(InvalidOverlapError, ValidationError)
        assert not issubclass(ConfigurationError, ValueError)


class TestTokenizerError:
    def test_wraps_original(self):
        original = ValueError("Unknown encoding foo")
        error = TokenizerError("foo", original_error=original)
        assert error.encoding_name == "foo"
        assert error.original_error is original
        assert "Unknown encoding foo" in str(error)


class TestHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidOverlapError(10, 20),
            UnsupportedLanguageError("cobol"),
            UnknownStrategyError("semantic"),
        ],
    )
    def test_configuration_errors(self, error):
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, SplitterError)

    def test_tokenizer_error_is_not_configuration(self):
        error = TokenizerError("foo")
        assert isinstance(error, SplitterError)
        assert not isinstance(error, ConfigurationError)


class TestFormatErrorChain:
    def test_single_error(self):
        assert format_error_chain(SplitterError("Test")) == "SplitterError: Test"

    def test_follows_original_error(self):
        error = TokenizerError("foo", original_error=KeyError("foo"))
        chain = format_error_chain(error)
        assert "TokenizerError" in chain
        assert "└─ KeyError" in chain

    def test_follows_cause(self):
        try:
            try:
                raise KeyError("inner")
            except KeyError as inner:
                raise ConfigurationError("outer") from inner
        except ConfigurationError as e:
            chain = format_error_chain(e)

        assert chain.splitlines()[0] == "ConfigurationError: outer"
        assert "KeyError" in chain.splitlines()[1]


class TestLogging:
    def test_get_logger_nests_under_package(self):
        assert get_logger("custom").name == "text_splitter.custom"
        assert get_logger("text_splitter.merger").name == "text_splitter.merger"

    def test_setup_logging_replaces_handlers(self, tmp_path):
        log_file = tmp_path / "split.log"
        logger = setup_logging(level=logging.DEBUG, log_file=log_file)
        assert len(logger.handlers) == 2

        logger = setup_logging(level=logging.WARNING)
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
