"""
Size-bounded merging of fragments into chunks.

Every strategy ends up here: an ordered list of fragments is packed into
chunks no larger than chunk_size, with the tail of each emitted chunk
carried over as the head of the next one.

Algorithm:
1. Walk the fragments, keeping the current window as an index range
   [window_start, index) over the fragment list and its running size.
2. When the next fragment would push the window over chunk_size, join and
   emit the window, then drop fragments from the front of the window until
   its size is at most chunk_overlap and the new fragment fits after it.
3. Emit whatever is left in the window at the end.

Overlap is fragment-granular: the carried-over tail is made of whole
fragments, so the actual overlap depends on fragment boundaries.
"""

from typing import Optional, Sequence

from .logging_config import get_logger
from .models import SplitterConfig

logger = get_logger(__name__)


def join_fragments(fragments: Sequence[str], separator: str) -> Optional[str]:
    """Join fragments with separator and strip; None if nothing is left."""
    text = separator.join(fragments).strip()
    return text if text else None


def merge_splits(
    splits: Sequence[str],
    separator: str,
    config: SplitterConfig,
) -> list[str]:
    """
    Merge fragments into chunks of at most config.chunk_size.

    A fragment that is on its own larger than chunk_size is emitted as its
    own chunk and reported with a warning; it is never dropped.

    Args:
        splits: Fragments in source order.
        separator: String placed between fragments of the same chunk.
        config: Splitter configuration (size, overlap, length measure).

    Returns:
        Chunks in source order. Never contains empty strings.
    """
    length = config.length_function
    separator_length = length(separator)
    sizes = [length(s) for s in splits]

    chunks: list[str] = []
    window_start = 0
    total = 0

    for index, size in enumerate(sizes):
        window_len = index - window_start
        join_cost = separator_length if window_len > 0 else 0

        if total + size + join_cost > config.chunk_size:
            if total > config.chunk_size:
                logger.warning(
                    f"Created a chunk of size {total}, which is longer than "
                    f"the specified {config.chunk_size}"
                )
            if window_len > 0:
                chunk = join_fragments(splits[window_start:index], separator)
                if chunk is not None:
                    chunks.append(chunk)

                # Keep the last few fragments for overlap, as long as the
                # incoming fragment still fits after them
                while window_start < index and (
                    total > config.chunk_overlap
                    or total + size + separator_length > config.chunk_size
                ):
                    remaining = index - window_start
                    total -= sizes[window_start]
                    if remaining > 1:
                        total -= separator_length
                    window_start += 1

        total += size + (separator_length if index > window_start else 0)

    if total > config.chunk_size:
        logger.warning(
            f"Created a chunk of size {total}, which is longer than "
            f"the specified {config.chunk_size}"
        )
    chunk = join_fragments(splits[window_start:], separator)
    if chunk is not None:
        chunks.append(chunk)

    return chunks
