"""
Submission validation.

This module answers: "why would this word be rejected on this board?"
Checks run in a fixed order and stop at the first failure:

  1. letter set   : every character is the center or a peripheral letter
  2. length       : empty input, then fewer than MIN_WORD_LENGTH characters
  3. center       : the center letter appears at least once
  4. dictionary   : the lowercased word is in the dictionary

The letter-set check runs first on purpose: "XYZ" reports the bad "X"
rather than the length problem.

Duplicate detection is not a validation concern; the game engine owns the
found-word set and handles repeats after a word passes here.
"""

from __future__ import annotations

from typing import AbstractSet, Optional

from .letters import LetterSet

MIN_WORD_LENGTH = 4

ERR_NO_INPUT = "No input entered."
ERR_TOO_SHORT = f"Words must be at least {MIN_WORD_LENGTH} characters."
ERR_DUPLICATE = "You already found that word!"


def check_submission(word: str, letters: LetterSet, dictionary: AbstractSet[str]) -> Optional[str]:
    """
    Return the rejection message for `word`, or None if it is acceptable.

    Args:
      word       : the typed word (expected uppercase, as the engine stores it)
      letters    : current board
      dictionary : set of lowercase words; may be empty while loading
    """
    has_center = False
    for c in word:
        if c == letters.center:
            has_center = True
        elif c not in letters.peripheral:
            return f"{c} is not in the letter set."

    if len(word) == 0:
        return ERR_NO_INPUT
    if len(word) < MIN_WORD_LENGTH:
        return ERR_TOO_SHORT

    if not has_center:
        return f"Words must include the center letter ({letters.center})."

    if word.lower() not in dictionary:
        return f"{word} is not in the dictionary."

    return None


def is_acceptable(word: str, letters: LetterSet, dictionary: AbstractSet[str]) -> bool:
    """Boolean form of check_submission (case-insensitive on `word`)."""
    return check_submission(word.upper(), letters, dictionary) is None
