"""
Board survey harness.

- survey_board: solve one board (all answers, pangrams, max score).
- run_survey:   generate and solve many boards in sequence.
- summarize:    aggregate stats over a survey (numpy).

Useful for checking how playable the generator's boards are against a given
word list: how many answers a typical board has, how often a board has no
pangram at all, and so on.

These functions are UI-agnostic so they can be reused by the CLI, a
notebook, or tests without changes.
"""

from __future__ import annotations
import random
import time
from typing import AbstractSet, Dict, Iterable, List

import numpy as np
from tqdm import tqdm

from packages.engine.letters import LetterSet, generate
from packages.engine.scoring import is_pangram, score_word
from packages.solvers import find_answers


def survey_board(letters: LetterSet, dictionary: AbstractSet[str]) -> Dict:
    """
    Solve a single board.

    Returns:
        dict with keys:
            letters (str), center (str), answers (list[str]),
            pangrams (list[str]), max_score (int), time_ms (float)
    """
    t0 = time.perf_counter_ns()
    answers = find_answers(letters, dictionary)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "letters": str(letters),
        "center": letters.center,
        "answers": answers,
        "pangrams": [w for w in answers if is_pangram(w, letters)],
        "max_score": sum(score_word(w, letters) for w in answers),
        "time_ms": dt,
    }


def run_survey(
        dictionary: Iterable[str],
        *,
        boards: int,
        seed: int | None = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Generate and solve `boards` letter sets.

    Each board's seed is derived from the base seed (seed + index) so a run
    is reproducible but boards differ. With seed=None boards are random.
    """
    if boards < 1:
        raise ValueError(f"boards must be >= 1; got {boards}")

    dict_set = frozenset(dictionary)
    out: List[Dict] = []
    for idx in tqdm(range(1, boards + 1), ncols=80, desc="Surveying", unit="board",
                    disable=not progress):
        board_seed = None if seed is None else (seed + idx)
        letters = generate(random.Random(board_seed))
        r = survey_board(letters, dict_set)
        r["seed"] = board_seed
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate answer counts and max scores across a survey.

    Returns a JSON-serializable dict (plain floats, not numpy scalars).
    """
    if not results:
        raise ValueError("cannot summarize an empty survey")

    n_answers = np.array([len(r["answers"]) for r in results], dtype=float)
    n_pangrams = np.array([len(r["pangrams"]) for r in results], dtype=float)
    scores = np.array([r["max_score"] for r in results], dtype=float)

    def _stats(a: np.ndarray) -> Dict[str, float]:
        p10, p50, p90 = np.percentile(a, [10, 50, 90])
        return {
            "mean": round(float(a.mean()), 3),
            "median": round(float(p50), 3),
            "p10": round(float(p10), 3),
            "p90": round(float(p90), 3),
            "max": float(a.max()),
        }

    return {
        "boards": len(results),
        "answers": _stats(n_answers),
        "max_score": _stats(scores),
        "no_pangram_share": round(float(np.mean(n_pangrams == 0)), 4),
        "no_answer_share": round(float(np.mean(n_answers == 0)), 4),
    }
