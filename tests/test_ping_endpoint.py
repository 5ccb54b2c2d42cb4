from __future__ import annotations

from fastapi.testclient import TestClient

from user_directory.main import app


def test_ping_returns_pong() -> None:
    client = TestClient(app)

    resp = client.get("/ping")

    assert resp.status_code == 200
    assert resp.text == "pong"
    assert resp.headers["content-type"].startswith("text/plain")


def test_ping_does_not_depend_on_store(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("USERS_FILE", str(tmp_path / "does-not-exist.txt"))
    client = TestClient(app)

    assert client.get("/ping").text == "pong"
    # The store is still broken for the users resource.
    assert client.get("/users").status_code == 500
