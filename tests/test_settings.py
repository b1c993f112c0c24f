from pathlib import Path

from pastebin.settings import WEBUI_DIR, Settings


def test_defaults():
    s = Settings()
    assert s.host == "127.0.0.1"
    assert s.port == 8080
    assert s.database_url == "sqlite:///pastes.db"
    assert s.static_dir == WEBUI_DIR
    assert s.escape_html is True


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # keep a developer's .env out of the test
    monkeypatch.setenv("PASTEBIN_HOST", "0.0.0.0")
    monkeypatch.setenv("PASTEBIN_PORT", "9000")
    monkeypatch.setenv("PASTEBIN_DATABASE_URL", "sqlite:///other.db")
    monkeypatch.setenv("PASTEBIN_STATIC_DIR", str(tmp_path))
    monkeypatch.setenv("PASTEBIN_ESCAPE_HTML", "0")
    monkeypatch.setenv("PASTEBIN_LOG_LEVEL", "debug")

    s = Settings.from_env()
    assert s.host == "0.0.0.0"
    assert s.port == 9000
    assert s.database_url == "sqlite:///other.db"
    assert s.static_dir == Path(tmp_path)
    assert s.escape_html is False
    assert s.log_level == "DEBUG"


def test_packaged_webui_exists():
    assert (WEBUI_DIR / "index.html").is_file()
    assert (WEBUI_DIR / "style.css").is_file()
