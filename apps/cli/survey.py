# apps/cli/survey.py
"""
CLI entry point for surveying generated boards against a word list.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the dictionary and generates N boards (reproducible by seed).
  3) Solves each board with a live progress bar and writes:
       - CSV:  one row per board (answer/pangram counts, max score)
       - JSON: manifest with config, word-list report, summary stats, git commit
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from packages.datasets import (
    DEFAULT_DICT_PATH, DictionaryLoadError, load_dictionary, validate_wordlist, pretty_summary,
)
from packages.harness import run_survey, summarize
from packages.harness.io import write_csv, write_manifest, survey_paths, source_revision


def main(argv=None) -> int:
    """
    Parse CLI args, validate the word list, run the survey and write outputs.
    """
    ap = argparse.ArgumentParser(description="hive — survey generated boards")
    ap.add_argument("--dict", default=DEFAULT_DICT_PATH, help="word list, one word per line")
    ap.add_argument("--boards", type=int, default=200, help="number of boards to generate")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show run progress (auto=bar when stderr is a terminal)."
    )
    args = ap.parse_args(argv)

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.dict)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for msg in rep["issues"]:
            print(f"  - {msg}", file=sys.stderr)
        return 1

    # 2) Load; same parser as the validator, so the counts above are what we get
    try:
        dictionary = load_dictionary(args.dict)
    except DictionaryLoadError as e:
        print(f"  - {e}", file=sys.stderr)
        return 1

    # 3) Run
    show_bar = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    results = run_survey(dictionary, boards=args.boards, seed=args.seed, progress=show_bar)
    summary = summarize(results)

    # 4) Write outputs (CSV + manifest)
    run_id, csv_path, manifest_path = survey_paths(args.outdir)

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "revision": source_revision(Path(__file__).resolve().parent),
        "config": vars(args),
        "wordlist": rep,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    a = summary["answers"]
    print(f"boards={summary['boards']} | answers mean={a['mean']} median={a['median']} "
          f"p10={a['p10']} p90={a['p90']} | no pangram={summary['no_pangram_share']:.1%}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
