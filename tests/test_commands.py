import curses

import pytest
from packages.engine import Command, CommandKind, Game, LetterSet, apply_command
from packages.engine import commands
from packages.terminal import command_for_key

BOARD = LetterSet.from_string("GABCDEF")


def _run(game, cmds):
    for c in cmds:
        if not apply_command(game, c):
            return False
    return True


def test_apply_command_sequence():
    g = Game(letters=BOARD, dictionary={"badge"})
    keep_going = _run(g, [Command.insert(c) for c in "badgex"] + [commands.BACKSPACE, commands.SUBMIT])
    assert keep_going is True
    assert g.score == 1 and g.input == ""


def test_error_visible_for_one_command_only():
    g = Game(letters=BOARD)
    apply_command(g, commands.SUBMIT)
    assert g.error == "No input entered."
    apply_command(g, Command.insert("b"))
    assert g.error is None
    assert g.input == "B"


def test_clear_input_and_restart():
    g = Game(letters=BOARD, dictionary={"badge"})
    _run(g, [Command.insert(c) for c in "BADGE"] + [commands.SUBMIT])
    _run(g, [Command.insert("c"), commands.CLEAR_INPUT])
    assert g.input == ""
    apply_command(g, commands.RESTART)
    assert g.score == 0 and g.words == []


def test_quit_stops_loop():
    g = Game(letters=BOARD)
    assert apply_command(g, commands.QUIT) is False


@pytest.mark.parametrize("char", [None, "", "ab", " ", "!"])
def test_insert_requires_single_alnum(char):
    with pytest.raises(ValueError):
        Command(CommandKind.INSERT_CHAR, char)


def test_non_insert_takes_no_char():
    with pytest.raises(ValueError):
        Command(CommandKind.SUBMIT, "a")


# --- key mapping ---
@pytest.mark.parametrize("key,expected", [
    (27, commands.QUIT),
    (14, commands.RESTART),
    (127, commands.BACKSPACE),
    (8, commands.BACKSPACE),
    (curses.KEY_BACKSPACE, commands.BACKSPACE),
    (10, commands.SUBMIT),
    (13, commands.SUBMIT),
    (curses.KEY_ENTER, commands.SUBMIT),
    (ord(" "), commands.CLEAR_INPUT),
    (ord("q"), Command.insert("Q")),
    (ord("Z"), Command.insert("Z")),
    (ord("7"), Command.insert("7")),
])
def test_command_for_key(key, expected):
    assert command_for_key(key) == expected


@pytest.mark.parametrize("key", [ord("!"), ord("-"), 9, curses.KEY_LEFT, 0xC3, -1])
def test_noise_keys_ignored(key):
    assert command_for_key(key) is None
