import json
from pathlib import Path

from apps.cli import survey


def test_survey_cli_writes_reports(tmp_path: Path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("patrician\npaint\ntapir\nbadge\ncage\nbagged\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    rc = survey.main(["--dict", str(words), "--boards", "5", "--seed", "1",
                      "--outdir", str(outdir), "--progress", "off"])
    assert rc == 0

    manifests = list(outdir.glob("survey_*_manifest.json"))
    assert len(manifests) == 1 and len(list(outdir.glob("survey_*.csv"))) == 1
    data = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert data["summary"]["boards"] == 5
    assert data["wordlist"]["count"] == 6
    assert isinstance(data["revision"], str) and data["revision"]
    assert "Wrote:" in capsys.readouterr().out


def test_survey_cli_fails_on_missing_wordlist(tmp_path: Path):
    rc = survey.main(["--dict", str(tmp_path / "missing.txt"), "--outdir", str(tmp_path)])
    assert rc == 1


def test_survey_cli_fails_on_non_utf8_wordlist(tmp_path: Path, capsys):
    words = tmp_path / "words.txt"
    words.write_bytes(b"badge\n\xff\xfe\n")

    rc = survey.main(["--dict", str(words), "--outdir", str(tmp_path / "reports"),
                      "--progress", "off"])
    assert rc == 1
    assert "cannot read" in capsys.readouterr().err
    assert not (tmp_path / "reports").exists()
