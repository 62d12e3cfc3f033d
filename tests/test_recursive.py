"""Tests for text_splitter.recursive."""

import logging

from text_splitter.models import SplitterConfig
from text_splitter.recursive import resolve, select_separator
from text_splitter.separators import DEFAULT_SEPARATORS


class TestSelectSeparator:
    def test_first_present_separator_wins(self):
        separator, fallback = select_separator("a b\nc", DEFAULT_SEPARATORS)
        assert separator == "\n"
        assert fallback == [" ", ""]

    def test_empty_separator_reached(self):
        separator, fallback = select_separator("abc", DEFAULT_SEPARATORS)
        assert separator == ""
        assert fallback is None

    def test_nothing_matches_uses_last(self):
        separator, fallback = select_separator("abc", ["\n\n", "\n"])
        assert separator == "\n"
        assert fallback is None

    def test_last_matching_separator_has_empty_fallback(self):
        separator, fallback = select_separator("a\nb", ["\n"])
        assert separator == "\n"
        assert fallback == []


class TestResolve:
    def test_words_packed(self):
        config = SplitterConfig(chunk_size=10, chunk_overlap=0)
        assert resolve("aaaa bbbb cccc", DEFAULT_SEPARATORS, config) == ["aaaa bbbb", "cccc"]

    def test_words_packed_keep_separator(self):
        config = SplitterConfig(chunk_size=10, chunk_overlap=0, keep_separator=True)
        assert resolve("aaaa bbbb cccc", DEFAULT_SEPARATORS, config) == ["aaaa bbbb", "cccc"]

    def test_falls_back_to_characters(self):
        config = SplitterConfig(chunk_size=5, chunk_overlap=0)
        chunks = resolve("abcdefghijklmnop", DEFAULT_SEPARATORS, config)
        assert chunks == ["abcde", "fghij", "klmno", "p"]

    def test_only_oversized_fragment_recursed(self):
        config = SplitterConfig(chunk_size=10, chunk_overlap=0)
        text = "short\n\n" + "x" * 12 + " yy"
        chunks = resolve(text, DEFAULT_SEPARATORS, config)
        assert chunks == ["short", "x" * 10, "xx", "yy"]

    def test_exhausted_separators_emit_oversized_fragment(self, caplog):
        config = SplitterConfig(chunk_size=10, chunk_overlap=0)
        text = "x" * 20 + "\n" + "yyy"
        with caplog.at_level(logging.WARNING, logger="text_splitter"):
            chunks = resolve(text, ["\n"], config)

        assert chunks == ["x" * 20, "yyy"]
        assert "cannot be split" in caplog.text

    def test_no_separator_present_keeps_text(self, caplog):
        config = SplitterConfig(chunk_size=100, chunk_overlap=0)
        with caplog.at_level(logging.WARNING, logger="text_splitter"):
            chunks = resolve("x" * 500, ["\n"], config)

        assert chunks == ["x" * 500]
        assert caplog.records

    def test_content_never_dropped(self):
        config = SplitterConfig(chunk_size=7, chunk_overlap=0)
        text = "alpha beta\ngamma delta epsilon\n\nzeta eta theta"
        chunks = resolve(text, DEFAULT_SEPARATORS, config)
        assert " ".join(chunks).split() == text.split()
        assert all(len(c) <= 7 for c in chunks)

    def test_empty_separator_list_splits_characters(self):
        config = SplitterConfig(chunk_size=2, chunk_overlap=0)
        assert resolve("abcd", [], config) == ["ab", "cd"]

    def test_python_code_splits_on_definitions(self):
        code = (
            "def hello_world():\n"
            '    print("Hello, World!")\n'
            "\n"
            "# Call the function\n"
            "hello_world()\n"
            "\n"
            "class MyClass:\n"
            "    def __init__(self):\n"
            "        self.value = 42\n"
        )
        separators = ["\nclass ", "\ndef ", "\n\tdef ", "\n\n", "\n", " ", ""]
        config = SplitterConfig(chunk_size=50, chunk_overlap=10, keep_separator=True)
        chunks = resolve(code, separators, config)

        assert any(c.startswith("class MyClass:") for c in chunks)
        assert all(len(c) <= 50 for c in chunks)
