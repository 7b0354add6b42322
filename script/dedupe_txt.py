"""
Remove duplicate lines from a word list.

Features:
- Preserves original order by default (stable dedupe).
- Optional lowercasing, so 'Apple' and 'apple' collapse to 'apple'
  (the game only reads all-lowercase lines).
- Optional stripping of blank/whitespace-only lines.
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.dedupe_txt --in data/words.txt --lowercase --strip-blanks
"""

import argparse
from pathlib import Path

from packages.datasets.dictionary import read_word_list
from packages.datasets.io import unique_preserve_order, write_word_list


def dedupe(lines: list[str], *, lowercase: bool = False, strip_blanks: bool = False,
           sort: bool = False) -> list[str]:
    if strip_blanks:
        lines = [s.strip() for s in lines if s.strip()]
    if lowercase:
        lines = [s.lower() for s in lines]
    out = unique_preserve_order(lines)
    return sorted(out) if sort else out


def main():
    ap = argparse.ArgumentParser(description="Remove duplicate lines from a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--lowercase", action="store_true", help="lowercase every line before dedupe")
    ap.add_argument("--strip-blanks", action="store_true", help="drop empty/whitespace-only lines")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_word_list(inp)
    out = dedupe(lines, lowercase=args.lowercase, strip_blanks=args.strip_blanks, sort=args.sort)

    write_word_list(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} unique)")

if __name__ == "__main__":
    main()
