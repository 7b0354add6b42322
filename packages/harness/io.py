"""
I/O utilities for survey runs.

Responsibilities:
- write_csv:     flatten per-board results into a tidy CSV (one row per board).
- write_manifest:dump a JSON manifest with config, word-list report and summary.
- survey_paths:  UTC run id and output paths that never clobber an earlier run.
- source_revision: best-effort `git describe` of the code that generated the boards.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = ["letters", "center", "seed", "num_answers", "num_pangrams",
              "max_score", "time_ms", "pangrams"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a survey to CSV.

    Schema (columns):
      letters, center, seed, num_answers, num_pangrams, max_score, time_ms,
      pangrams (space-separated)

    The full answer lists are not written; they can be large and are
    reproducible from `letters` and the word list.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()

        for r in results:
            w.writerow({
                "letters": r["letters"],
                "center": r["center"],
                "seed": "" if r.get("seed") is None else r["seed"],
                "num_answers": len(r["answers"]),
                "num_pangrams": len(r["pangrams"]),
                "max_score": r["max_score"],
                "time_ms": round(float(r.get("time_ms", 0.0)), 3),
                "pangrams": " ".join(r["pangrams"]),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a survey run.

    Typical keys:
      - run_id, revision
      - config: CLI args (dict path, boards, seed, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def survey_paths(outdir: Path | str, now: dt.datetime | None = None) -> Tuple[str, Path, Path]:
    """
    Run id plus CSV and manifest paths for one survey, e.g.
      ("20250820T024121Z", <outdir>/survey_20250820T024121Z.csv,
       <outdir>/survey_20250820T024121Z_manifest.json)

    Two runs in the same second get "-2", "-3", ... suffixes instead of
    overwriting each other.
    """
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    stamp = (now or dt.datetime.now(dt.timezone.utc)).strftime("%Y%m%dT%H%M%SZ")

    run_id, n = stamp, 1
    while (outdir / f"survey_{run_id}.csv").exists():
        n += 1
        run_id = f"{stamp}-{n}"
    return run_id, outdir / f"survey_{run_id}.csv", outdir / f"survey_{run_id}_manifest.json"


def source_revision(repo_dir: Path | str | None = None) -> str:
    """
    `git describe --always --dirty` of the checkout that produced a survey,
    so a manifest records whether board generation had local edits.
    Returns 'unknown' outside a git checkout or without git.
    """
    cmd = ["git"]
    if repo_dir is not None:
        cmd += ["-C", str(repo_dir)]
    cmd += ["describe", "--always", "--dirty"]
    try:
        out = subprocess.check_output(cmd, stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip() or "unknown"
