from pathlib import Path

import pytest
from packages.datasets import (
    DictionaryLoadError, DictionaryLoader, load_dictionary, validate_wordlist, write_word_list,
)


def test_load_dictionary_keeps_lowercase_alpha(tmp_path: Path):
    p = tmp_path / "words"
    p.write_text("badge\nAlice\ncat's\n\nNASA\ncage\r\nbadge\n", encoding="utf-8")

    words = load_dictionary(p)
    assert words == frozenset({"badge", "cage"})


def test_load_dictionary_empty_file_is_fine(tmp_path: Path):
    p = tmp_path / "words"
    p.write_text("", encoding="utf-8")
    assert load_dictionary(p) == frozenset()


def test_load_dictionary_missing_file_is_fatal(tmp_path: Path):
    with pytest.raises(DictionaryLoadError) as ei:
        load_dictionary(tmp_path / "missing")
    assert isinstance(ei.value.__cause__, OSError)


def test_loader_background_result(tmp_path: Path):
    p = tmp_path / "words"
    p.write_text("badge\ncage\n", encoding="utf-8")

    with DictionaryLoader(p).start() as loader:
        assert loader.result(timeout=10) == frozenset({"badge", "cage"})
        assert loader.done()


def test_loader_propagates_failure(tmp_path: Path):
    loader = DictionaryLoader(tmp_path / "missing").start()
    with pytest.raises(DictionaryLoadError):
        loader.result(timeout=10)


def test_loader_result_before_start():
    with pytest.raises(RuntimeError):
        DictionaryLoader("unused").result()


def test_loader_start_twice(tmp_path: Path):
    p = tmp_path / "words"
    p.write_text("badge\n", encoding="utf-8")
    with DictionaryLoader(p).start() as loader:
        with pytest.raises(RuntimeError):
            loader.start()


def test_validator_and_loader_agree_on_usable_words(tmp_path: Path):
    p = tmp_path / "words"
    # padded lines are not words to either reader
    p.write_text("  badge  \n cage\nbagged\ncage\nAlice\n", encoding="utf-8")

    rep = validate_wordlist(str(p))
    words = load_dictionary(p)
    assert words == frozenset({"bagged", "cage"})
    assert rep["unique_count"] == len(words)
    assert rep["count"] == 2 and rep["invalid_lines"] == 3


def test_padded_only_list_fails_validation_and_loads_empty(tmp_path: Path):
    p = tmp_path / "words"
    p.write_text("  badge  \n cage\n", encoding="utf-8")

    assert validate_wordlist(str(p))["passed"] is False
    assert load_dictionary(p) == frozenset()


def test_load_dictionary_not_utf8_is_fatal(tmp_path: Path):
    p = tmp_path / "words"
    p.write_bytes(b"badge\n\xff\xfe\n")
    with pytest.raises(DictionaryLoadError) as ei:
        load_dictionary(p)
    assert isinstance(ei.value.__cause__, UnicodeDecodeError)


def test_written_word_list_loads_back(tmp_path: Path):
    n = write_word_list(["cage", "badge", "cage"], tmp_path / "out" / "words.txt", sort=True)
    assert n == 2
    assert (tmp_path / "out" / "words.txt").read_text(encoding="utf-8") == "badge\ncage\n"
    assert load_dictionary(tmp_path / "out" / "words.txt") == frozenset({"badge", "cage"})
