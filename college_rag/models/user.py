"""User and session data models."""

from typing import Literal

from pydantic import BaseModel


class User(BaseModel):
    id: str
    username: str
    role: Literal["student", "teacher", "admin"]


class LoginResponse(BaseModel):
    """Tokens and user returned by the auth service on sign-in."""

    access_token: str
    refresh_token: str
    expires_in: int
    user: User
