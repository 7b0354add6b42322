"""
Word-list provider.

Loads a newline-separated word list (by default the system one at
/usr/share/dict/words) into a frozenset of lowercase words.

Only lines that are entirely lowercase letters are kept, which drops proper
nouns, abbreviations and possessives ("Alice", "NASA", "cat's").

Reading a large word list takes long enough to notice, so DictionaryLoader
runs it on a worker thread: the host draws the board right away and joins
the future before it reads the first key. An unreadable file is fatal and
surfaces as DictionaryLoadError; an empty file is not (the game just has no
valid words).
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple

log = logging.getLogger(__name__)

DEFAULT_DICT_PATH = "/usr/share/dict/words"


class DictionaryLoadError(RuntimeError):
    """The word list could not be read; the game cannot start."""


def is_dictionary_word(w: str) -> bool:
    """Non-empty, alphabetic and all lowercase."""
    return bool(w) and w.isalpha() and w.islower()


def read_word_list(path: Path | str) -> List[str]:
    """
    Raw lines of a UTF-8 word list, line endings removed and nothing else.

    Surrounding whitespace is kept, so "  badge " is not a usable word.

    Raises:
      DictionaryLoadError if the file is missing, unreadable or not UTF-8.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            return [ln.rstrip("\r\n") for ln in f]
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"cannot read word list {p}: {e}") from e


def split_words(lines: List[str]) -> Tuple[List[str], int]:
    """
    Returns:
      (usable_words in file order, skipped_line_count)
    """
    words = [w for w in lines if is_dictionary_word(w)]
    return words, len(lines) - len(words)


def load_dictionary(path: Path | str = DEFAULT_DICT_PATH) -> FrozenSet[str]:
    """
    Read `path` and return the usable words.

    Raises:
      DictionaryLoadError if the file is missing or unreadable.
    """
    log.info("loading word list from %s", path)
    words, skipped = split_words(read_word_list(path))
    log.info("loaded %d words from %s (%d lines skipped)", len(set(words)), path, skipped)
    return frozenset(words)


class DictionaryLoader:
    """
    Background load with an explicit join.

        loader = DictionaryLoader(path).start()
        ...draw the board...
        game.set_dictionary(loader.result())   # may raise DictionaryLoadError
    """

    def __init__(self, path: Path | str = DEFAULT_DICT_PATH):
        self.path = Path(path)
        self._executor: Optional[ThreadPoolExecutor] = None
        self._future: Optional[Future] = None

    def start(self) -> "DictionaryLoader":
        if self._future is not None:
            raise RuntimeError("dictionary load already started")
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="dictionary")
        self._future = self._executor.submit(load_dictionary, self.path)
        return self

    def done(self) -> bool:
        return self._future is not None and self._future.done()

    def result(self, timeout: float | None = None) -> FrozenSet[str]:
        """Wait for the load; re-raises DictionaryLoadError from the worker."""
        if self._future is None:
            raise RuntimeError("dictionary load was never started")
        try:
            return self._future.result(timeout=timeout)
        finally:
            if self._future.done():
                self.close()

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None

    def __enter__(self) -> "DictionaryLoader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
