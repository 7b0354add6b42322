from __future__ import annotations
from .answers import find_answers, find_pangrams, max_score

__all__ = ["find_answers", "find_pangrams", "max_score"]
