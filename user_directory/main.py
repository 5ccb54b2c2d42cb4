from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from user_directory.error_handlers import register_error_handlers
from user_directory.logging_config import configure_logging
from user_directory.routers.users import router as users_router
from user_directory.settings import get_settings

configure_logging(get_settings().log_level)

logger = logging.getLogger("user_directory")

APP_VERSION = "1.0.0"

app = FastAPI(title="User Directory", version=APP_VERSION)
register_error_handlers(app)
app.include_router(users_router)


@app.get("/ping", response_class=PlainTextResponse)
def ping() -> str:
    # Health check only; never touches the user store.
    return "pong"


def run() -> None:
    import uvicorn

    settings = get_settings()
    logger.info("server running on port: %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
