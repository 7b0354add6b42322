# apps/cli/play.py
"""
Interactive terminal game.

This script:
  1) Starts loading the word list on a worker thread.
  2) Draws the first board immediately (curses, 80x24).
  3) Joins the word-list load before reading any key; an unreadable word
     list aborts with exit status 1.
  4) Maps keys to commands and redraws after each one until Esc.

Keys: letters type, Enter submits, Backspace deletes, Space clears the word,
Ctrl-N starts a new board, Esc quits.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --dict words.txt --seed 7 --log-file hive.log
"""

from __future__ import annotations

import argparse
import curses
import logging
import os
import random
import sys

from packages.datasets import DEFAULT_DICT_PATH, DictionaryLoadError, DictionaryLoader
from packages.engine import Game, apply_command
from packages.terminal import command_for_key, draw_board, init_colors

log = logging.getLogger("hive.play")

LOADING_STATUS = "Loading word list..."


def _play(stdscr, loader: DictionaryLoader, rng: random.Random) -> int:
    """
    The curses loop. Returns the final score.
    """
    curses.curs_set(0)
    init_colors()

    game = Game(rng=rng)
    log.info("new board %s", game.letters)

    # board is visible but not interactive until the word list is in
    draw_board(stdscr, game, status=LOADING_STATUS)
    stdscr.refresh()

    game.set_dictionary(loader.result())
    log.info("dictionary ready (%d words)", len(game.dictionary))

    draw_board(stdscr, game)
    stdscr.refresh()

    while True:
        cmd = command_for_key(stdscr.getch())
        if cmd is None:
            continue  # noise

        if not apply_command(game, cmd):
            break
        if game.error:
            log.debug("rejected: %s", game.error)

        draw_board(stdscr, game)
        stdscr.refresh()

    return game.score


def main(argv=None) -> int:
    """
    Parse CLI args, start the word-list load and run the game.
    """
    ap = argparse.ArgumentParser(description="hive — seven-letter word puzzle")
    ap.add_argument("--dict", default=DEFAULT_DICT_PATH,
                    help="word list, one word per line (lowercase words are used)")
    ap.add_argument("--seed", type=int, help="RNG seed for reproducible boards")
    ap.add_argument("--log-file", help="write logs here instead of stderr")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=args.log_file,
    )

    # Esc should quit promptly instead of waiting for an escape sequence
    os.environ.setdefault("ESCDELAY", "25")

    rng = random.Random(args.seed)
    loader = DictionaryLoader(args.dict).start()
    try:
        score = curses.wrapper(_play, loader, rng)
    except DictionaryLoadError as e:
        log.error("startup failed: %s", e)
        print(f"hive: {e}", file=sys.stderr)
        return 1
    finally:
        loader.close()

    print(f"Final score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
