"""
Recursive separator fallback.

Splits text on the most structural separator it contains and, for every
fragment that is still too large, retries with the finer separators that
follow it in the list. Fragments that fit are packed with merge_splits.

Algorithm:
1. Pick the separator: the empty string is taken as soon as it is reached;
   otherwise the first separator present in the text, whose successors
   become the fallback list. If nothing matches, the last separator of the
   list is used without fallback.
2. Split on it (keeping the separator on the fragment it introduces when
   keep_separator is set).
3. Collect fragments smaller than chunk_size into a run. An oversized
   fragment flushes the run through merge_splits and is then either
   resolved recursively with the fallback list or, with no fallback left,
   emitted as-is.

The empty separator is the base case: character fragments are never
recursed into, which guarantees termination.
"""

from typing import Optional, Sequence

from .logging_config import get_logger
from .merger import merge_splits
from .models import SplitterConfig
from .separators import split_on_separator

logger = get_logger(__name__)


def select_separator(
    text: str, separators: Sequence[str]
) -> tuple[str, Optional[list[str]]]:
    """
    Choose the separator to split text on.

    Returns:
        Tuple of (separator, fallback) where fallback is the list of finer
        separators to recurse with, or None when there is none.
    """
    separator = separators[-1]
    fallback: Optional[list[str]] = None
    for i, candidate in enumerate(separators):
        if candidate == "":
            separator = candidate
            break
        if candidate in text:
            separator = candidate
            fallback = list(separators[i + 1:])
            break
    return separator, fallback


def resolve(
    text: str,
    separators: Sequence[str],
    config: SplitterConfig,
) -> list[str]:
    """
    Split text into chunks, falling back to finer separators as needed.

    Args:
        text: Text to split.
        separators: Candidate separators, most structural first.
        config: Splitter configuration.

    Returns:
        Chunks in source order.
    """
    if not separators:
        separators = [""]

    separator, fallback = select_separator(text, separators)
    splits = split_on_separator(text, separator, config.keep_separator)
    join_separator = "" if config.keep_separator else separator

    chunks: list[str] = []
    good_splits: list[str] = []

    for split in splits:
        if config.length_function(split) < config.chunk_size:
            good_splits.append(split)
            continue

        if good_splits:
            chunks.extend(merge_splits(good_splits, join_separator, config))
            good_splits = []

        if fallback:
            chunks.extend(resolve(split, fallback, config))
        elif split.strip():
            logger.warning(
                f"Fragment of size {config.length_function(split)} cannot be "
                f"split below chunk_size {config.chunk_size}; emitting it as-is"
            )
            chunks.append(split)

    if good_splits:
        chunks.extend(merge_splits(good_splits, join_separator, config))

    return chunks
