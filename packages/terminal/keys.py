"""
Keystroke -> Command mapping for the curses front end.

Keys (as returned by window.getch()):
  Esc             quit
  Ctrl-N          new board
  Backspace/DEL   delete last letter
  Enter           submit
  Space           clear the typed word
  letters/digits  type (upper-cased)

Anything else maps to None and is ignored by the loop.
"""

from __future__ import annotations

import curses
from typing import Optional

from packages.engine import commands
from packages.engine.commands import Command

KEY_ESC = 27
KEY_CTRL_N = 14
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)
ENTER_KEYS = (curses.KEY_ENTER, 10, 13)


def command_for_key(ch: int) -> Optional[Command]:
    if ch == KEY_ESC:
        return commands.QUIT
    if ch == KEY_CTRL_N:
        return commands.RESTART
    if ch in BACKSPACE_KEYS:
        return commands.BACKSPACE
    if ch in ENTER_KEYS:
        return commands.SUBMIT
    if ch == ord(" "):
        return commands.CLEAR_INPUT

    # plain ASCII only; curses hands multi-byte input over one byte at a time
    if 0 <= ch < 128 and chr(ch).isalnum():
        return Command.insert(chr(ch).upper())
    return None
