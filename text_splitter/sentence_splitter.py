"""
Sentence Splitter for the Text Splitter

Regex-based sentence boundary detection. Handles a configurable set of
abbreviations (Mr., Dr., e.g., Ph.D., ...) without requiring external NLP
libraries.

Design:
- Split at sentence-ending punctuation (.!?), optionally followed by a
  closing quote or bracket, then whitespace and an uppercase letter or an
  opening quote/bracket
- Known abbreviations are located first; a candidate boundary that starts
  right where an abbreviation ends is skipped. The text itself is never
  rewritten apart from whitespace collapsing
- Whitespace runs (including line breaks) are collapsed to single spaces

Usage:
    from text_splitter.sentence_splitter import split_sentences

    sentences = split_sentences("Mr. Smith arrived. He sat down.")
    # ["Mr. Smith arrived.", "He sat down."]
"""

import re
from functools import lru_cache
from typing import Iterable, Optional

DEFAULT_ABBREVIATIONS = frozenset({
    # Titles
    "Mr.", "Mrs.", "Ms.", "Dr.", "Prof.", "Sr.", "Jr.", "St.",
    # Latin
    "etc.", "vs.", "i.e.", "e.g.",
    # Time
    "a.m.", "p.m.", "B.C.", "A.D.",
    # Places / degrees
    "U.S.", "U.K.", "Ph.D.", "M.D.",
})

_CLOSERS = "\"'”’)]"

_SENTENCE_START = r"(?=[A-ZÀ-ÖØ-Þ\"'“‘(\[])"

_BOUNDARY_PATTERN = re.compile(
    r"(?<=[.!?])\s+" + _SENTENCE_START
    + r"|(?<=[.!?][\"'”’)\]])\s+" + _SENTENCE_START
)


def _normalize_abbreviation(abbreviation: str) -> str:
    abbreviation = abbreviation.strip()
    return abbreviation if abbreviation.endswith(".") else f"{abbreviation}."


@lru_cache(maxsize=32)
def _abbreviation_pattern(abbreviations: frozenset[str]) -> Optional[re.Pattern]:
    """Compile one regex matching any of the abbreviations as a whole word."""
    if not abbreviations:
        return None
    # Longest first so "Ph.D." wins over a shorter overlapping entry.
    ordered = sorted(abbreviations, key=len, reverse=True)
    return re.compile(
        r"(?<![\w.])(?:" + "|".join(re.escape(a) for a in ordered) + r")"
    )


def _abbreviation_ends(text: str, pattern: Optional[re.Pattern]) -> set[int]:
    """Positions right after each abbreviation occurrence."""
    if pattern is None:
        return set()
    return {match.end() for match in pattern.finditer(text)}


def _is_protected(text: str, position: int, protected: set[int]) -> bool:
    """True if the boundary at position directly follows an abbreviation."""
    if position in protected:
        return True
    # Abbreviation closed by a quote or bracket: 'He said "Dr." Then'
    return (
        position - 1 in protected
        and position > 0
        and text[position - 1] in _CLOSERS
    )


def split_sentences(
    text: Optional[str],
    abbreviations: Iterable[str] = DEFAULT_ABBREVIATIONS,
) -> list[str]:
    """
    Split text into sentences at proper sentence boundaries.

    Args:
        text: Input text to split into sentences.
        abbreviations: Abbreviations (with their trailing dot) after which
            a sentence never ends.

    Returns:
        List of sentence strings. Empty/whitespace input returns empty list.
        Each sentence is stripped of leading/trailing whitespace.
    """
    if not text or not text.strip():
        return []

    normalized = re.sub(r"\s+", " ", text).strip()

    # Step 1: Find where abbreviations end
    pattern = _abbreviation_pattern(
        frozenset(_normalize_abbreviation(a) for a in abbreviations if a.strip())
    )
    protected = _abbreviation_ends(normalized, pattern)

    # Step 2: Cut at real sentence boundaries
    sentences = []
    start = 0
    for boundary in _BOUNDARY_PATTERN.finditer(normalized):
        if _is_protected(normalized, boundary.start(), protected):
            continue
        sentence = normalized[start:boundary.start()].strip()
        if sentence:
            sentences.append(sentence)
        start = boundary.end()

    # Step 3: Whatever follows the last boundary
    tail = normalized[start:].strip()
    if tail:
        sentences.append(tail)

    return sentences
