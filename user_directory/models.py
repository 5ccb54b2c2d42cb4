from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class AddUserRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Checked by the route: any falsy value is a missing user, not a type error.
    user: Optional[Any] = Field(default=None, description="Username to append to the store")


class UsersResponse(BaseModel):
    users: list[str]


class MessageResponse(BaseModel):
    msg: str
