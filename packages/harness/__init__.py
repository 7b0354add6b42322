from .core import survey_board, run_survey, summarize
from .io import write_csv, write_manifest

__all__ = ["survey_board", "run_survey", "summarize", "write_csv", "write_manifest"]
