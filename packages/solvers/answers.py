"""
Enumerate every answer a board admits.

An answer is a dictionary word the engine would accept on a fresh round of
that board. This reuses the engine's own validation so the two can never
disagree about what counts.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, List

from packages.engine.letters import LetterSet
from packages.engine.scoring import is_pangram, score_word
from packages.engine.validation import MIN_WORD_LENGTH, check_submission


def find_answers(letters: LetterSet, dictionary: Iterable[str]) -> List[str]:
    """
    All accepted words for `letters`, uppercase, sorted.

    Cheap prefilters (length, letter subset) run before the full check so
    a 100k-word list is a single pass.
    """
    allowed = set(letters.letters)
    center = letters.center
    dict_set: AbstractSet[str] = dictionary if isinstance(dictionary, (set, frozenset)) else set(dictionary)

    out: List[str] = []
    for w in dict_set:
        if len(w) < MIN_WORD_LENGTH:
            continue
        upper = w.upper()
        if center not in upper or not set(upper) <= allowed:
            continue
        if check_submission(upper, letters, dict_set) is None:
            out.append(upper)
    return sorted(out)


def find_pangrams(letters: LetterSet, dictionary: Iterable[str]) -> List[str]:
    return [w for w in find_answers(letters, dictionary) if is_pangram(w, letters)]


def max_score(letters: LetterSet, dictionary: Iterable[str]) -> int:
    """Score a player would reach by finding every answer."""
    return sum(score_word(w, letters) for w in find_answers(letters, dictionary))
