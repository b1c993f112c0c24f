import importlib.util
from pathlib import Path

import pytest

CLI_PATH = Path(__file__).resolve().parent.parent / "examples" / "paste_cli.py"


@pytest.fixture
def paste_cli():
    spec = importlib.util.spec_from_file_location("paste_cli", CLI_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class _FakeResponse:
    def __init__(self, status_code, headers=None, text=""):
        self.status_code = status_code
        self.headers = headers or {}
        self.text = text


def test_submit_returns_absolute_url(paste_cli, monkeypatch):
    calls = {}

    def fake_post(url, data, allow_redirects, timeout):
        calls.update(url=url, data=data, allow_redirects=allow_redirects)
        return _FakeResponse(303, {"Location": "/paste/abcDEF1234"})

    monkeypatch.setattr(paste_cli.requests, "post", fake_post)
    url = paste_cli.submit("hello world", server="http://localhost:8080/")
    assert url == "http://localhost:8080/paste/abcDEF1234"
    assert calls["url"] == "http://localhost:8080/submit"
    assert calls["data"] == {"content": "hello world"}
    assert calls["allow_redirects"] is False


def test_submit_rejects_server_error(paste_cli, monkeypatch):
    monkeypatch.setattr(
        paste_cli.requests, "post", lambda *a, **kw: _FakeResponse(500, text="Internal Server Error")
    )
    with pytest.raises(RuntimeError, match="HTTP 500"):
        paste_cli.submit("x", server="http://localhost:8080")
