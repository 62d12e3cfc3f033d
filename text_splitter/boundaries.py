"""
Greedy packing of boundary-delimited units (sentences, paragraphs).

Units are concatenated with a joiner while the result stays within
max_length. A unit that is on its own longer than max_length is hard-split
at the last space before the limit and its pieces are emitted directly.
"""

from typing import Iterable

from .logging_config import get_logger
from .models import LengthFunction

logger = get_logger(__name__)


def hard_split(text: str, max_length: int) -> list[str]:
    """
    Cut text into pieces of at most max_length characters.

    Each cut is placed at the last space inside the window; a window
    without spaces is cut at max_length. Positions are characters, whatever
    length measure the caller packs with, so a piece can still be over the
    limit under a non-character measure (pack_units reports those).
    """
    pieces: list[str] = []
    remaining = text
    while remaining:
        if len(remaining) <= max_length:
            pieces.append(remaining)
            break
        window = remaining[:max_length]
        last_space = window.rfind(" ")
        cut = last_space if last_space > 0 else max_length
        pieces.append(remaining[:cut])
        remaining = remaining[cut:].strip()
    return pieces


def pack_units(
    units: Iterable[str],
    joiner: str,
    max_length: int,
    length_function: LengthFunction = len,
) -> list[str]:
    """
    Greedily concatenate units up to max_length.

    Args:
        units: Stripped, non-empty units in source order.
        joiner: String placed between units of the same chunk.
        max_length: Maximum chunk size, measured with length_function.
        length_function: Size measure.

    Returns:
        Packed chunks in source order.
    """
    packed: list[str] = []
    current = ""

    for unit in units:
        if length_function(unit) > max_length:
            logger.debug(
                f"Unit of size {length_function(unit)} exceeds {max_length}; "
                f"hard-splitting"
            )
            # The pending chunk is emitted before the pieces of the long unit.
            if current:
                packed.append(current.strip())
            for piece in hard_split(unit, max_length):
                if length_function(piece) > max_length:
                    logger.warning(
                        f"Hard-split piece of size {length_function(piece)} is still "
                        f"longer than the specified {max_length}"
                    )
                packed.append(piece)
            current = ""
        elif current and length_function(f"{current}{joiner}{unit}") <= max_length:
            current = f"{current}{joiner}{unit}"
        else:
            if current:
                packed.append(current.strip())
            current = unit

    if current:
        packed.append(current.strip())

    return packed
