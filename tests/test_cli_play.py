from pathlib import Path

from apps.cli import play


def _run_loader_then(score):
    """Stand-in for curses.wrapper: join the load like _play does, skip the screen."""
    def wrapper(fn, loader, rng):
        loader.result(timeout=10)
        return score
    return wrapper


def test_play_exits_1_when_word_list_unreadable(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setenv("ESCDELAY", "25")
    monkeypatch.setattr(play.curses, "wrapper", _run_loader_then(0))

    rc = play.main(["--dict", str(tmp_path / "missing"), "--log-file", str(tmp_path / "hive.log")])
    assert rc == 1
    assert "cannot read word list" in capsys.readouterr().err


def test_play_exits_1_when_word_list_not_utf8(tmp_path: Path, monkeypatch):
    words = tmp_path / "words"
    words.write_bytes(b"badge\n\xff\xfe\n")
    monkeypatch.setenv("ESCDELAY", "25")
    monkeypatch.setattr(play.curses, "wrapper", _run_loader_then(0))

    assert play.main(["--dict", str(words), "--log-file", str(tmp_path / "hive.log")]) == 1


def test_play_reports_final_score(tmp_path: Path, monkeypatch, capsys):
    words = tmp_path / "words"
    words.write_text("badge\n", encoding="utf-8")
    monkeypatch.setenv("ESCDELAY", "25")
    monkeypatch.setattr(play.curses, "wrapper", _run_loader_then(7))

    assert play.main(["--dict", str(words), "--seed", "3",
                      "--log-file", str(tmp_path / "hive.log")]) == 0
    assert "Final score: 7" in capsys.readouterr().out
