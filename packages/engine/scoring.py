"""
Points for an accepted word.

Rule:
  - pangram (uses every one of the 7 board letters at least once) -> 3
  - any other accepted word                                       -> 1

Only called for words that already passed validation; it does not re-check
the letter set or the dictionary.
"""

from __future__ import annotations

from typing import Iterable

PANGRAM_POINTS = 3
WORD_POINTS = 1


def is_pangram(word: str, letters: Iterable[str]) -> bool:
    """True if `word` contains every board letter (case-insensitive)."""
    w = word.upper()
    return all(c in w for c in letters)


def score_word(word: str, letters: Iterable[str]) -> int:
    """
    Points for one accepted submission.

    Examples:
      score_word("PATRICIAN", "TCAPIRN") -> 3
      score_word("BADGE", "GABCDEF")     -> 1
    """
    return PANGRAM_POINTS if is_pangram(word, letters) else WORD_POINTS
