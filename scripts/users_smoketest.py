from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

# Allow running as: python scripts/users_smoketest.py
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from fastapi.testclient import TestClient

from user_directory.main import app


def main() -> int:
    with tempfile.TemporaryDirectory() as tmp:
        users_file = Path(tmp) / "users.txt"
        users_file.write_text("", encoding="utf-8")
        os.environ["USERS_FILE"] = str(users_file)

        c = TestClient(app)

        r = c.get("/ping")
        print("/ping", r.status_code, r.text)

        r = c.get("/users")
        print("/users(empty)", r.status_code, r.json())

        r = c.post("/users", json={"user": "bob"})
        print("POST /users", r.status_code, r.json())
        if r.status_code != 200:
            return 1

        r = c.post("/users", json={"user": "bob"})
        print("POST /users(duplicate)", r.status_code, r.json())
        if r.status_code != 500:
            return 1

        r = c.get("/users")
        print("/users(after)", r.status_code, r.json())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
