"""
Download a plain-text word list and write a clean dictionary file.

What it does:
- Downloads a newline-separated word list (default: dwyl/english-words,
  alphabetic entries only).
- Lowercases, keeps alphabetic tokens only, de-duplicates.
- Writes the result sorted, one word per line, ready for `--dict`.

Usage:
    python -m script.fetch_wordlist --out data/words.txt
    python -m script.fetch_wordlist --min-length 4 --out data/words_4plus.txt
"""

import argparse

import requests

from packages.datasets.io import unique_preserve_order, write_word_list

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def clean_words(lines, min_length: int = 1) -> list[str]:
    """Lowercase, keep alphabetic tokens of at least `min_length`, drop repeats."""
    words = [ln.strip().lower() for ln in lines]
    words = [w for w in words if w.isalpha() and len(w) >= min_length]
    return unique_preserve_order(words)


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.text.splitlines()


def main():
    ap = argparse.ArgumentParser(description="Fetch and clean a word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/words.txt")
    ap.add_argument("--min-length", type=int, default=1,
                    help="drop words shorter than this (4 keeps only playable lengths)")
    args = ap.parse_args()

    n = write_word_list(clean_words(fetch_words(args.url), min_length=args.min_length),
                        args.out, sort=True)
    print(f"Wrote {n} unique words -> {args.out}")

if __name__ == "__main__":
    main()
