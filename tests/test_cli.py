import logging

from termnotes import cli, settings
from termnotes.logging_setup import setup_logging


def test_unopenable_database_exits_nonzero(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv(settings.DB_ENV, str(tmp_path / "no-such-dir" / "notes.db"))
    monkeypatch.setattr(cli, "setup_logging", lambda: None)
    started = []
    monkeypatch.setattr("termnotes.tui.start_curses", started.append)

    assert cli.main() == 1
    assert "termnotes:" in capsys.readouterr().err
    assert started == []


def test_clean_run_returns_zero(tmp_path, monkeypatch):
    db = tmp_path / "notes.db"
    monkeypatch.setenv(settings.DB_ENV, str(db))
    monkeypatch.setattr(cli, "setup_logging", lambda: None)

    def fake_ui(state):
        state.new_note()
        state.commit()
        state.quit()

    monkeypatch.setattr("termnotes.tui.start_curses", fake_ui)

    assert cli.main() == 0
    assert db.exists()


def test_db_path_default_and_override(monkeypatch):
    monkeypatch.delenv(settings.DB_ENV, raising=False)
    assert settings.db_path() == "notes.db"
    monkeypatch.setenv(settings.DB_ENV, "/tmp/other.db")
    assert settings.db_path() == "/tmp/other.db"


def test_setup_logging_writes_file(tmp_path):
    logger = logging.getLogger(settings.APP_NAME)
    saved = logger.handlers[:]
    logger.handlers.clear()
    try:
        path = tmp_path / "logs" / "termnotes.log"
        setup_logging(path)
        setup_logging(path)
        assert len(logger.handlers) == 1
        logging.getLogger("termnotes.storage").info("hello")
        logger.handlers[0].flush()
        text = path.read_text(encoding="utf-8")
        assert "hello" in text
        assert "sid=" in text
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers[:] = saved
