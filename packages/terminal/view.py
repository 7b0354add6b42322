"""
Curses rendering of a Game onto an 80x24 screen.

Layout:
  - left: seven hexagons in a honeycomb, center letter highlighted
  - right: found words, in columns
  - row 22: pending error (red bar) or a status line
  - row 23: input line and the score
"""

from __future__ import annotations

import curses
from typing import List, Optional, Tuple

from packages.engine.game import Game

TERM_HEIGHT = 24
TERM_WIDTH = 80

START_X = 1
START_Y = 0
HALF_X = 4
HALF_Y = 3

LIST_START_X = 44
LIST_START_Y = 1
LIST_ROWS = 20
LIST_COL_WIDTH = 12

INPUT_WIDTH = 67
SCORE_X = 69

COLOR_CENTER = 1
COLOR_INPUT = 2
COLOR_ERROR = 3
COLOR_STATUS = 4

# hexagon outline relative to its top-left corner; 00B7 is a centered dot
_DOT = "·"
HEX_ROWS: List[Tuple[int, int, str]] = [
    (0, 3, _DOT * 7),
    (1, 2, _DOT * 9),
    (2, 1, _DOT * 3 + " " * 5 + _DOT * 3),
    (3, 0, _DOT * 3 + " " * 3),
    (3, 7, " " * 3 + _DOT * 3),
    (4, 1, _DOT * 3 + " " * 5 + _DOT * 3),
    (5, 2, _DOT * 9),
    (6, 3, _DOT * 7),
]
HEX_LETTER = (3, 6)

# top-left corners for letters[1..6]; letters[0] sits in the middle
PERIPHERAL_HEXES: List[Tuple[int, int]] = [
    (START_Y + HALF_Y + 1, START_X),
    (START_Y, START_X + 3 * HALF_X - 1),
    (START_Y + HALF_Y + 1, START_X + 6 * HALF_X - 2),
    (START_Y + 3 * HALF_Y + 2, START_X),
    (START_Y + 4 * HALF_Y + 2, START_X + 3 * HALF_X - 1),
    (START_Y + 3 * HALF_Y + 2, START_X + 6 * HALF_X - 2),
]
CENTER_HEX = (START_Y + 2 * HALF_Y + 1, START_X + 3 * HALF_X - 1)


def init_colors() -> None:
    """Initialize curses color pairs (call once inside curses.wrapper)."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_CENTER, curses.COLOR_YELLOW, -1)
    curses.init_pair(COLOR_INPUT, curses.COLOR_WHITE, curses.COLOR_BLACK)
    curses.init_pair(COLOR_ERROR, curses.COLOR_WHITE, curses.COLOR_RED)
    curses.init_pair(COLOR_STATUS, curses.COLOR_CYAN, -1)


def safe_addstr(win, y, x, text, attr=0):
    """addstr that silently ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def draw_hex(win, top: int, left: int, letter: str, attr=0, letter_attr=0) -> None:
    for dy, dx, text in HEX_ROWS:
        safe_addstr(win, top + dy, left + dx, text, attr)
    safe_addstr(win, top + HEX_LETTER[0], left + HEX_LETTER[1], letter, letter_attr or attr)


def draw_words(win, words: List[str]) -> None:
    for idx, word in enumerate(words):
        col, row = divmod(idx, LIST_ROWS)
        safe_addstr(win, LIST_START_Y + row, LIST_START_X + col * LIST_COL_WIDTH, word)


def draw_score(win, score: int) -> None:
    safe_addstr(win, TERM_HEIGHT - 1, SCORE_X, f"Score: {score:03d}")


def draw_message(win, game: Game, status: Optional[str]) -> None:
    if game.error:
        safe_addstr(win, TERM_HEIGHT - 2, START_X, game.error.ljust(TERM_WIDTH - 2),
                    curses.color_pair(COLOR_ERROR))
    elif status:
        safe_addstr(win, TERM_HEIGHT - 2, START_X, status, curses.color_pair(COLOR_STATUS))


def draw_board(win, game: Game, status: Optional[str] = None) -> None:
    """Redraw everything from scratch; caller refreshes."""
    win.erase()

    letters = game.letters
    for (top, left), letter in zip(PERIPHERAL_HEXES, letters.peripheral):
        draw_hex(win, top, left, letter)

    yellow = curses.color_pair(COLOR_CENTER)
    draw_hex(win, CENTER_HEX[0], CENTER_HEX[1], letters.center, yellow, yellow | curses.A_BOLD)

    safe_addstr(win, TERM_HEIGHT - 1, START_X, game.input[:INPUT_WIDTH].ljust(INPUT_WIDTH),
                curses.color_pair(COLOR_INPUT))

    draw_words(win, game.words)
    draw_score(win, game.score)
    draw_message(win, game, status)
