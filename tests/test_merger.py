"""Tests for text_splitter.merger."""

import logging

from text_splitter.merger import join_fragments, merge_splits
from text_splitter.models import SplitterConfig


class TestJoinFragments:
    def test_joins_and_strips(self):
        assert join_fragments([" a", "b "], "-") == "a-b"

    def test_empty_window(self):
        assert join_fragments([], " ") is None

    def test_whitespace_only(self):
        assert join_fragments(["  ", "\n"], " ") is None


class TestMergeSplits:
    def test_packs_up_to_chunk_size(self):
        config = SplitterConfig(chunk_size=5, chunk_overlap=0)
        chunks = merge_splits(["a", "b", "c", "d", "e"], " ", config)
        assert chunks == ["a b c", "d e"]

    def test_separator_counts_toward_size(self):
        """Four one-char fragments joined by spaces need 7 units, not 4."""
        config = SplitterConfig(chunk_size=4, chunk_overlap=0)
        chunks = merge_splits(["a", "b", "c", "d"], " ", config)
        assert chunks == ["a b", "c d"]
        assert all(len(c) <= 4 for c in chunks)

    def test_overlap_carries_tail_fragments(self):
        config = SplitterConfig(chunk_size=5, chunk_overlap=2)
        chunks = merge_splits(["a", "b", "c", "d", "e"], " ", config)
        assert chunks == ["a b c", "c d e"]

    def test_overlap_with_custom_length_function(self):
        config = SplitterConfig(
            chunk_size=3,
            chunk_overlap=1,
            length_function=lambda s: len(s.split()),
        )
        words = [f"w{i}" for i in range(1, 8)]
        chunks = merge_splits(words, " ", config)
        assert chunks == ["w1 w2 w3", "w3 w4 w5", "w5 w6 w7"]

    def test_overlap_dropped_when_next_fragment_would_not_fit(self):
        config = SplitterConfig(chunk_size=10, chunk_overlap=4)
        chunks = merge_splits(["aaaa", "bb", "cccccccc"], " ", config)
        assert chunks == ["aaaa bb", "cccccccc"]

    def test_output_in_source_order(self):
        config = SplitterConfig(chunk_size=8, chunk_overlap=0)
        fragments = [f"f{i}" for i in range(20)]
        chunks = merge_splits(fragments, " ", config)
        rebuilt = " ".join(chunks).split()
        assert rebuilt == fragments

    def test_empty_input(self):
        assert merge_splits([], " ", SplitterConfig()) == []

    def test_never_emits_empty_chunks(self):
        config = SplitterConfig(chunk_size=3, chunk_overlap=0)
        chunks = merge_splits(["  ", " ", "a", "  ", "b"], "", config)
        assert chunks
        assert all(c.strip() for c in chunks)

    def test_oversized_fragment_passes_through(self, caplog):
        config = SplitterConfig(chunk_size=10, chunk_overlap=0)
        with caplog.at_level(logging.WARNING, logger="text_splitter"):
            chunks = merge_splits(["a" * 12, "b"], " ", config)

        assert chunks == ["a" * 12, "b"]
        assert "longer than the specified 10" in caplog.text

    def test_single_oversized_fragment(self, caplog):
        config = SplitterConfig(chunk_size=100, chunk_overlap=0)
        with caplog.at_level(logging.WARNING, logger="text_splitter"):
            chunks = merge_splits(["x" * 500], "", config)

        assert chunks == ["x" * 500]
        assert "size 500" in caplog.text

    def test_no_warning_when_within_bounds(self, caplog):
        config = SplitterConfig(chunk_size=5, chunk_overlap=0)
        with caplog.at_level(logging.WARNING, logger="text_splitter"):
            merge_splits(["a", "b", "c"], " ", config)
        assert caplog.records == []

    def test_large_chunk_size_restores_fragments(self):
        """Splitting a merged chunk on the same separator gives back the fragments."""
        fragments = ["one", "two", "three"]
        config = SplitterConfig(chunk_size=1000, chunk_overlap=0)
        chunks = merge_splits(fragments, "\n", config)
        assert chunks == ["one\ntwo\nthree"]
        assert chunks[0].split("\n") == fragments
