from __future__ import annotations

from fastapi import Depends

from user_directory.settings import Settings, get_settings
from user_directory.user_store import FileUserStore, UserStore


def get_settings_dep() -> Settings:
    """Settings for the current request; override this in tests to swap config."""
    return get_settings()


# A fresh store per request: USERS_FILE may change between requests (tests
# point it at temp files). FileUserStore shares its write lock across instances.


def get_user_store(settings: Settings = Depends(get_settings_dep)) -> UserStore:
    return FileUserStore(settings.users_file)
