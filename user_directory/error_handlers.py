"""Convert raised errors into ``{"msg": ...}`` responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_directory.errors import INTERNAL_ERROR_MSG, UserDirectoryError

logger = logging.getLogger("user_directory")


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(UserDirectoryError)
    async def user_directory_error_handler(request: Request, exc: UserDirectoryError):
        return JSONResponse(status_code=exc.status_code, content={"msg": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=422,
            content={"msg": _format_validation_errors(exc)},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(status_code=500, content={"msg": INTERNAL_ERROR_MSG})


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        # Drop the leading "body" segment; clients only see their own field names.
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        where = ".".join(loc)
        parts.append(f"{where}: {err.get('msg')}" if where else str(err.get("msg")))
    return "; ".join(parts) or "invalid request"
