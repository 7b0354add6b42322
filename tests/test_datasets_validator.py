from pathlib import Path
from packages.datasets import validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["badge", "cage", "bagged", "cat"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["count"] == 4 and rep["unique_count"] == 4
    assert rep["invalid_lines"] == 0
    assert rep["playable"] == 3  # "cat" is too short
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "words=4" in s and "OK" in s


def test_validate_wordlist_counts_invalid_and_duplicates(tmp_path: Path):
    words = tmp_path / "words.txt"
    # proper nouns, possessives and blanks are skipped, not fatal
    _write(words, ["Alice", "cat's", "", "badge", "badge", "NASA"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["count"] == 2 and rep["unique_count"] == 1
    assert rep["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_no_usable_words(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["Alice", "Bob"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is False
    assert any("0 usable" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert "FAIL" in pretty_summary(rep)


def test_too_many_distinct_letters_not_playable(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["abcdefgh"])  # 8 distinct letters never fit a board

    rep = validate_wordlist(str(words))
    assert rep["playable"] == 0
    assert any("long enough" in msg for msg in rep["issues"])


def test_validate_wordlist_not_utf8(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_bytes(b"badge\n\xff\xfe\n")

    rep = validate_wordlist(str(words))
    assert rep["passed"] is False and rep["exists"] is True
    assert rep["count"] == 0
    assert any("cannot read" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)
