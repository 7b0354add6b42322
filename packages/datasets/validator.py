"""
Word-list validator.

What this module does:
- Inspect a single word list (one word per line) before it is used as a
  game dictionary.
- Count usable words (lowercase letters only), invalid lines and duplicates;
  compute SHA-256 of the raw file.
- Count "playable" words: long enough to submit and built from at most
  seven distinct letters, i.e. words that can appear on some board.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

System word lists carry plenty of capitalised and punctuated entries, so
invalid lines are reported but do not fail validation. Validation fails only
when the file is missing, is not UTF-8, or holds no usable words.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("/usr/share/dict/words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from packages.engine.letters import BOARD_SIZE
from packages.engine.validation import MIN_WORD_LENGTH
from .dictionary import DictionaryLoadError, read_word_list, split_words


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of usable words (may include duplicates)
    unique_count: int    # unique usable words
    invalid_lines: int   # lines that are not lowercase-alphabetic words
    playable: int        # unique words that could be an answer on some board
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def is_playable(word: str) -> bool:
    """Long enough to submit and uses no more distinct letters than a board has."""
    return len(word) >= MIN_WORD_LENGTH and len(set(word)) <= BOARD_SIZE


def _failed_report(path: str, exists: bool, issue: str, sha: str = "") -> Dict:
    rep = WordListReport(
        path=path, exists=exists, count=0, unique_count=0, invalid_lines=0,
        playable=0, sha256=sha, passed=False, issues=[issue],
    )
    return asdict(rep)


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str) -> Dict:
    """
    Validate one word list.

    Lines are read exactly as load_dictionary reads them, so `count` is the
    number of words the game will actually see.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport schema).
    """
    p = Path(path)

    if not p.exists():
        return _failed_report(path, False, f"word list not found: {path}")

    try:
        words, invalid = split_words(read_word_list(p))
    except DictionaryLoadError as e:
        # e.g. not UTF-8; same condition the game treats as fatal
        return _failed_report(str(p), True, str(e), sha=_sha256_file(p))
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 usable words")
    if invalid:
        issues.append(f"{invalid} invalid line(s) skipped")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    playable = sum(1 for w in unique if is_playable(w))
    if words and playable == 0:
        issues.append("no word is long enough to play")

    rep = WordListReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        playable=playable,
        sha256=_sha256_file(p),
        passed=len(words) > 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        /usr/share/dict/words | words=104334 (uniq=104334, playable=61211, invalid=130895, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, playable={report['playable']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
