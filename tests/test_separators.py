"""Tests for text_splitter.separators."""

import pytest

from text_splitter.exceptions import UnsupportedLanguageError
from text_splitter.separators import (
    DEFAULT_SEPARATORS,
    Language,
    get_separators_for_language,
    split_on_separator,
)


class TestSplitOnSeparator:
    def test_drops_separator(self):
        assert split_on_separator("a\nb\nc", "\n", False) == ["a", "b", "c"]

    def test_keeps_separator_on_following_fragment(self):
        assert split_on_separator("a\nb\nc", "\n", True) == ["a", "\nb", "\nc"]

    def test_empty_separator_gives_characters(self):
        assert split_on_separator("abc", "", False) == ["a", "b", "c"]
        assert split_on_separator("abc", "", True) == ["a", "b", "c"]

    def test_discards_empty_fragments(self):
        assert split_on_separator("\n\na\n\n", "\n", False) == ["a"]

    def test_leading_separator_kept(self):
        assert split_on_separator("\nclass A", "\nclass ", True) == ["\nclass A"]

    def test_regex_metacharacters_are_literal(self):
        assert split_on_separator("a$b$$c", "$", False) == ["a", "b", "c"]
        assert split_on_separator("x.*y", ".*", True) == ["x", ".*y"]

    def test_separator_absent(self):
        assert split_on_separator("plain", "\n", True) == ["plain"]

    def test_reassembles_source_with_keep_separator(self):
        text = "one\n\ntwo\n\nthree"
        assert "".join(split_on_separator(text, "\n\n", True)) == text


class TestSeparatorTables:
    def test_default_separators(self):
        assert DEFAULT_SEPARATORS == ["\n\n", "\n", " ", ""]

    @pytest.mark.parametrize("language", list(Language))
    def test_every_table_ends_with_character_split(self, language):
        separators = get_separators_for_language(language)
        assert separators[-1] == ""
        assert all(isinstance(s, str) for s in separators)

    def test_python_table(self):
        assert get_separators_for_language("python") == [
            "\nclass ", "\ndef ", "\n\tdef ", "\n\n", "\n", " ", "",
        ]

    def test_markdown_table_starts_at_level_two_headings(self):
        separators = get_separators_for_language(Language.MARKDOWN)
        assert separators[0] == "\n## "
        assert "\n# " not in separators

    def test_latex_table(self):
        separators = get_separators_for_language(Language.LATEX)
        assert "\n\\section{" in separators
        assert separators.index("\n\\chapter{") < separators.index("\n\\section{")

    def test_html_table_has_no_line_separators(self):
        separators = get_separators_for_language(Language.HTML)
        assert separators[0] == "<body>"
        assert "\n" not in separators

    def test_returns_copy(self):
        first = get_separators_for_language(Language.GO)
        first.clear()
        assert get_separators_for_language(Language.GO)

    def test_unsupported_language(self):
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            get_separators_for_language("cobol")
        assert exc_info.value.language == "cobol"
        assert "cobol" in str(exc_info.value)
