from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import List, Protocol

from user_directory.errors import USER_EXISTS_MSG, ConflictError, StorageError

logger = logging.getLogger("user_directory.store")


def split_users(content: str) -> List[str]:
    """Split raw store content into usernames.

    Literal newline split: nothing is trimmed or dropped, so an empty store
    reads as ``[""]`` and the leading newline written by ``add_user`` shows up
    as an empty first entry.
    """
    return content.split("\n")


class UserStore(Protocol):
    def read_users(self) -> List[str]: ...

    def add_user(self, *, username: str) -> str: ...


class FileUserStore:
    """Newline-delimited user list kept in a single text file.

    Storage semantics:
    - Read fresh on every call; nothing is cached between requests.
    - Append-only. Each add writes ``"\\n" + username`` even when the file
      already ends with a newline.
    - A missing file is a storage failure, not an empty store.

    The duplicate check and the append run under one process-wide lock, so two
    requests in this process cannot both add the same name. Other processes
    writing the same file are not coordinated.
    """

    _write_lock = threading.Lock()

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> str:
        # newline="" keeps "\r" intact; only "\n" separates entries.
        try:
            with self.path.open(encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.exception("Failed to read user store", extra={"users_file": str(self.path)})
            raise StorageError() from e

    def read_users(self) -> List[str]:
        return split_users(self._read())

    def add_user(self, *, username: str) -> str:
        with self._write_lock:
            if username in split_users(self._read()):
                logger.warning("Rejected duplicate user %r", username)
                raise ConflictError(USER_EXISTS_MSG)
            try:
                with self.path.open("a", encoding="utf-8", newline="") as f:
                    f.write("\n" + username)
            except OSError as e:
                logger.exception("Failed to append to user store", extra={"users_file": str(self.path)})
                raise StorageError() from e
        logger.info("Added user %r", username)
        return username


class InMemoryUserStore:
    """Same semantics as FileUserStore over an in-memory string.

    Useful in tests that should not touch the filesystem.
    """

    def __init__(self, content: str = ""):
        self._lock = threading.Lock()
        self.content = content

    def read_users(self) -> List[str]:
        with self._lock:
            return split_users(self.content)

    def add_user(self, *, username: str) -> str:
        with self._lock:
            if username in split_users(self.content):
                raise ConflictError(USER_EXISTS_MSG)
            self.content += "\n" + username
            return username
