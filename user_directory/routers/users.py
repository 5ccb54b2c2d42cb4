from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends

from user_directory.deps import get_user_store
from user_directory.errors import LINE_BREAK_MSG, MISSING_USER_MSG, NOT_A_STRING_MSG, ValidationError
from user_directory.models import AddUserRequest, MessageResponse, UsersResponse
from user_directory.user_store import UserStore

logger = logging.getLogger("user_directory")

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UsersResponse)
def list_users(store: UserStore = Depends(get_user_store)) -> UsersResponse:
    return UsersResponse(users=store.read_users())


@router.post("", response_model=MessageResponse)
def add_user(
    payload: Optional[AddUserRequest] = Body(default=None),
    store: UserStore = Depends(get_user_store),
) -> MessageResponse:
    """Append a user to the store.

    Accepts:
      {"user": "alice"}

    Missing, falsy, non-string and multi-line names are rejected before the
    store is touched.
    """
    user = payload.user if payload is not None else None
    if not user:
        logger.warning("Add user request without a `user` value")
        raise ValidationError(MISSING_USER_MSG)
    if not isinstance(user, str):
        raise ValidationError(NOT_A_STRING_MSG)
    if "\n" in user or "\r" in user:
        raise ValidationError(LINE_BREAK_MSG)

    store.add_user(username=user)
    return MessageResponse(msg=f"{user} is added to users")
