"""
The closed set of commands a host feeds into the engine.

Raw keystrokes are mapped to these elsewhere (see packages.terminal.keys);
this module only defines the commands and how one is applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .game import Game


class CommandKind(Enum):
    QUIT = "quit"
    RESTART = "restart"
    BACKSPACE = "backspace"
    SUBMIT = "submit"
    CLEAR_INPUT = "clear_input"
    INSERT_CHAR = "insert_char"


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is CommandKind.INSERT_CHAR:
            if not self.char or len(self.char) != 1 or not self.char.isalnum():
                raise ValueError(f"INSERT_CHAR needs one alphanumeric character; got {self.char!r}")
        elif self.char is not None:
            raise ValueError(f"{self.kind.name} takes no character")

    @classmethod
    def insert(cls, c: str) -> "Command":
        return cls(CommandKind.INSERT_CHAR, c)


QUIT = Command(CommandKind.QUIT)
RESTART = Command(CommandKind.RESTART)
BACKSPACE = Command(CommandKind.BACKSPACE)
SUBMIT = Command(CommandKind.SUBMIT)
CLEAR_INPUT = Command(CommandKind.CLEAR_INPUT)


def apply_command(game: Game, command: Command) -> bool:
    """
    Run one command against `game`.

    The previous error is cleared first, so a message stays visible for
    exactly one render unless the new command sets it again.

    Returns False when the host loop should stop (QUIT), True otherwise.
    """
    game.clear_error()

    kind = command.kind
    if kind is CommandKind.QUIT:
        return False
    if kind is CommandKind.RESTART:
        game.restart()
    elif kind is CommandKind.BACKSPACE:
        game.backspace()
    elif kind is CommandKind.SUBMIT:
        game.submit()
    elif kind is CommandKind.CLEAR_INPUT:
        game.clear()
    elif kind is CommandKind.INSERT_CHAR:
        game.push(command.char)
    return True
