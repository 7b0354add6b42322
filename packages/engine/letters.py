"""
Letter-set generation for one round.

A board is seven distinct uppercase letters:
  - position 0 is the center letter (mandatory in every answer)
  - positions 1..6 are the peripheral letters (order only matters for layout)

Letter mix:
  - 1 or 2 letters from VOWELS (Y counts as a vowel here)
  - the rest from CONSONANTS
  - no repeats; the final order is a uniform shuffle, so the center can be
    a vowel or a consonant.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, Tuple

VOWELS: Tuple[str, ...] = ("A", "E", "I", "O", "U", "Y")
CONSONANTS: Tuple[str, ...] = (
    "B", "C", "D", "F", "G", "H", "J", "K", "L", "M",
    "N", "P", "Q", "R", "S", "T", "V", "W", "X", "Z",
)

BOARD_SIZE = 7
MIN_VOWELS = 1
MAX_VOWELS = 2


@dataclass(frozen=True)
class LetterSet:
    """Ordered, immutable board. `letters[0]` is the center."""
    letters: Tuple[str, ...]

    def __post_init__(self) -> None:
        letters = tuple(self.letters)
        object.__setattr__(self, "letters", letters)

        if len(letters) != BOARD_SIZE:
            raise ValueError(f"a letter set needs {BOARD_SIZE} letters; got {len(letters)}")
        if len(set(letters)) != BOARD_SIZE:
            raise ValueError(f"letters must be distinct; got {''.join(letters)}")
        for c in letters:
            if c not in VOWELS and c not in CONSONANTS:
                raise ValueError(f"not an uppercase latin letter: {c!r}")

        n_vowels = sum(1 for c in letters if c in VOWELS)
        if not MIN_VOWELS <= n_vowels <= MAX_VOWELS:
            raise ValueError(
                f"a letter set needs {MIN_VOWELS}-{MAX_VOWELS} vowels; got {n_vowels}"
            )

    @classmethod
    def from_string(cls, s: str) -> "LetterSet":
        """Build from e.g. "GABCDEF" (first character is the center)."""
        return cls(tuple(s.strip().upper()))

    @property
    def center(self) -> str:
        return self.letters[0]

    @property
    def peripheral(self) -> Tuple[str, ...]:
        return self.letters[1:]

    def __iter__(self) -> Iterator[str]:
        return iter(self.letters)

    def __getitem__(self, idx: int) -> str:
        return self.letters[idx]

    def __len__(self) -> int:
        return len(self.letters)

    def __contains__(self, c: object) -> bool:
        return c in self.letters

    def __str__(self) -> str:
        return "".join(self.letters)


def generate(rng: random.Random | None = None) -> LetterSet:
    """
    Draw a fresh board.

    Args:
      rng : optional seeded RNG for reproducible boards; a fresh, unseeded
            random.Random() is created when omitted.
    """
    rng = rng or random.Random()

    num_vowels = rng.randint(MIN_VOWELS, MAX_VOWELS)
    picked = rng.sample(VOWELS, num_vowels) + rng.sample(CONSONANTS, BOARD_SIZE - num_vowels)

    # randomizes which letter lands in the center
    rng.shuffle(picked)
    return LetterSet(tuple(picked))
