from .letters import LetterSet, generate
from .scoring import score_word, is_pangram
from .validation import check_submission, is_acceptable
from .game import Game
from .commands import Command, CommandKind, apply_command

__all__ = [
    "LetterSet", "generate",
    "score_word", "is_pangram",
    "check_submission", "is_acceptable",
    "Game",
    "Command", "CommandKind", "apply_command",
]
