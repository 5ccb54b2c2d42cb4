from __future__ import annotations

from user_directory.settings import Settings, get_settings


def test_settings_defaults(monkeypatch) -> None:
    for name in ("USERS_FILE", "HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.users_file == "./users.txt"
    assert s.port == 8888


def test_settings_read_from_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("USERS_FILE", str(tmp_path / "u.txt"))
    monkeypatch.setenv("PORT", "9000")

    s = get_settings()

    assert s.users_file == str(tmp_path / "u.txt")
    assert s.port == 9000
