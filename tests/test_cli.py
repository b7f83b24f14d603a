import pytest

from vokabeltrainer.cli import main
from vokabeltrainer.db import VokabelDB

SD1 = "spanisch_deutsch_erster_versuch"
PAIRS = [("hola", "hallo"), ("gato", "Katze"), ("perro", "Hund")]


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    (tmp_path / "db").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_import_csv(workdir, capsys):
    csv_path = workdir / "words.csv"
    csv_path.write_text("".join(f"{s};{d}\n" for s, d in PAIRS), encoding="utf-8")
    assert main(["-c", str(csv_path)]) == 0
    out = capsys.readouterr().out
    assert "erfolgreich angelegt" in out
    assert "[+] argc: 3" in out
    with VokabelDB(workdir / "db" / "vokabeln.db") as db:
        assert db.count(SD1) == len(PAIRS)


def test_import_missing_csv(workdir, capsys):
    assert main(["-c", str(workdir / "missing.csv")]) == 1
    assert "Fehler: Konnte CSV-Datei nicht öffnen" in capsys.readouterr().err


@pytest.mark.parametrize("args", [["-x"], ["-c"], ["-c", "a.csv", "extra"]])
def test_usage_on_bad_arguments(workdir, capsys, args):
    assert main(args) == 1
    err = capsys.readouterr().err
    assert "Usage:" in err
    assert "-c dateiname.csv" in err


def test_missing_db_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-c", "words.csv"]) == 1
    assert "DB open failed" in capsys.readouterr().err