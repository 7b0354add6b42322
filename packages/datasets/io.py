from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def unique_preserve_order(lines: Iterable[str], key=None) -> List[str]:
    """Drop repeats (by `key`, default identity), keeping first occurrences in order."""
    seen, out = set(), []
    for s in lines:
        k = key(s) if key else s
        if k not in seen:
            seen.add(k)
            out.append(s)
    return out


def write_word_list(words: Iterable[str], p: Path | str, *, sort: bool = False) -> int:
    """
    Write a word list the dictionary loader can read back unchanged:
    one entry per line, UTF-8, "\\n" endings, repeats dropped.

    Returns the number of lines written.
    """
    out = unique_preserve_order(words)
    if sort:
        out.sort()

    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="\n") as f:
        f.writelines(f"{w}\n" for w in out)
    return len(out)
