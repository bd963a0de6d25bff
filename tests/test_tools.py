import pytest

from dictation import config
from tools import validate_templates


def test_validate_templates_ok(tmp_path, capsys):
    path = tmp_path / "ditado.txt"
    path.write_text("O [cachorro] late. A [gata] mia.", encoding="utf-8")
    assert validate_templates.main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "blanks=2" in out
    assert out.strip().endswith("OK")


def test_validate_templates_reports_errors(tmp_path, capsys):
    good = tmp_path / "good.txt"
    good.write_text("um [gato] e um [rato", encoding="utf-8")
    bad = tmp_path / "bad.txt"
    bad.write_text("sem lacunas", encoding="utf-8")
    assert validate_templates.main([str(good), str(bad)]) == 1
    out = capsys.readouterr().out
    assert "WARNING" in out and "never closed" in out
    assert "ERROR" in out and "no [bracketed] blanks" in out


def test_import_dictation_creates_row(tmp_path, monkeypatch, capsys):
    pytest.importorskip("aiosqlite")
    from tools import import_dictation

    db_path = tmp_path / "dictation.db"
    monkeypatch.setattr(config, "load_dotenv", lambda *a, **k: False)
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("AUDIO_MIME_TYPE", raising=False)

    text = tmp_path / "ditado.txt"
    text.write_text("O [cachorro] late.", encoding="utf-8")
    audio = tmp_path / "leitura.mp3"
    audio.write_bytes(b"ID3fake")

    code = import_dictation.main([str(text), "--audio", str(audio), "--title", "Animais"])
    assert code == 0
    assert "OK dictation_id=1" in capsys.readouterr().out
    assert db_path.exists()


def test_import_dictation_rejects_text_without_blanks(tmp_path, monkeypatch, capsys):
    pytest.importorskip("aiosqlite")
    from tools import import_dictation

    monkeypatch.setattr(config, "load_dotenv", lambda *a, **k: False)
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'x.db'}")
    text = tmp_path / "ditado.txt"
    text.write_text("nada aqui", encoding="utf-8")
    assert import_dictation.main([str(text), "--title", "Vazio"]) == 1
    assert "ERROR" in capsys.readouterr().out


def test_init_db_creates_schema(tmp_path, monkeypatch):
    pytest.importorskip("aiosqlite")
    import asyncio
    import sqlite3
    from dictation import init_db

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "load_dotenv", lambda *a, **k: False)
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./data/dictation.db")
    asyncio.run(init_db.main())

    with sqlite3.connect(tmp_path / "data" / "dictation.db") as conn:
        tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
    assert {"dictations", "dictation_segments", "attempts", "attempt_answers"} <= tables
