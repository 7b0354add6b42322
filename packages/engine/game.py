"""
Game engine: all mutable state for one round, plus the dictionary.

Round state (reset together by restart):
  - letters : current LetterSet (index 0 = center)
  - input   : word being typed, stored uppercase
  - words   : accepted words this round
  - score   : running total
  - error   : message from the last failed action, or None

The dictionary is not round state; it survives restarts and may be supplied
after construction (e.g. by a background loader). Until then every submission
fails the dictionary check.

The engine does no I/O. Every rejection is reported through `error`; nothing
here raises for player input.
"""

from __future__ import annotations

import random
from typing import AbstractSet, FrozenSet, Iterable, List, Optional, Set

from .letters import LetterSet, generate
from .scoring import score_word
from .validation import ERR_DUPLICATE, check_submission


class Game:
    def __init__(self, *, rng: random.Random | None = None,
                 dictionary: Iterable[str] | None = None,
                 letters: LetterSet | None = None):
        """
        Args:
          rng        : RNG for board generation (seed it for reproducible boards)
          dictionary : initial word set; usually supplied later via set_dictionary
          letters    : fixed first board; restart() always draws a new one
        """
        self._rng = rng or random.Random()
        self._dict: FrozenSet[str] = frozenset(dictionary or ())
        self._input: List[str] = []
        self._letters: LetterSet = letters if letters is not None else generate(self._rng)
        self._words: Set[str] = set()
        self._score: int = 0
        self._error: Optional[str] = None

    # ---- read-only views for rendering ----

    @property
    def letters(self) -> LetterSet:
        return self._letters

    @property
    def input(self) -> str:
        return "".join(self._input)

    @property
    def words(self) -> List[str]:
        """Found words in string order."""
        return sorted(self._words)

    @property
    def score(self) -> int:
        return self._score

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def dictionary(self) -> AbstractSet[str]:
        return self._dict

    # ---- round lifecycle ----

    def set_dictionary(self, dictionary: Iterable[str]) -> None:
        """Replace the dictionary wholesale (safe to call at any time)."""
        self._dict = frozenset(dictionary)

    def restart(self) -> None:
        """New board, empty input/words, zero score. Dictionary is kept."""
        self._letters = generate(self._rng)
        self._input.clear()
        self._words.clear()
        self._score = 0
        self._error = None

    # ---- input buffer ----

    def push(self, c: str) -> None:
        self._input.append(c.upper())

    def backspace(self) -> None:
        if self._input:
            self._input.pop()

    def clear(self) -> None:
        self._input.clear()

    def clear_error(self) -> None:
        self._error = None

    # ---- submission ----

    def submit(self) -> None:
        """
        Validate the typed word and score it.

        - rejected       : error set, input discarded
        - accepted, new  : word recorded, score += points, input cleared
        - accepted, seen : score unchanged, error set, input KEPT so the
                           player can see which word repeated
        """
        word = self.input

        err = check_submission(word, self._letters, self._dict)
        if err is not None:
            self._error = err
            self._input.clear()
            return

        if word in self._words:
            self._error = ERR_DUPLICATE
            return

        self._words.add(word)
        self._score += score_word(word, self._letters)
        self._input.clear()
