"""
dating_api/schemas/account.py

Request and response models for the account endpoints (register / login).

Every text field is validated with an explicit non-empty check: presence of
the key alone is not enough, ``""`` and whitespace-only values are rejected.
"""

from __future__ import annotations

from pydantic import Field, field_validator

from .common import APIModel, RequestModel, require_text


class RegisterRequest(RequestModel):
    """
    Payload for ``POST /api/account/register``.
    """

    email: str = Field(..., max_length=320, description="Login email (case-insensitive).")
    display_name: str = Field(..., max_length=255, description="Name shown in the UI.")
    password: str = Field(..., max_length=256, description="Plaintext password.")

    @field_validator("email", "display_name", mode="after")
    @classmethod
    def _strip_and_require(cls, value: str) -> str:
        return require_text(value)

    @field_validator("password", mode="after")
    @classmethod
    def _require_password(cls, value: str) -> str:
        # Whitespace is significant in passwords; only reject blank ones.
        require_text(value)
        return value


class LoginRequest(RequestModel):
    """
    Payload for ``POST /api/account/login``.
    """

    email: str = Field(..., max_length=320)
    password: str = Field(..., max_length=256)

    @field_validator("email", mode="after")
    @classmethod
    def _strip_and_require(cls, value: str) -> str:
        return require_text(value)

    @field_validator("password", mode="after")
    @classmethod
    def _require_password(cls, value: str) -> str:
        require_text(value)
        return value


class UserDto(APIModel):
    """
    Member projection returned after register / login, with a bearer token.
    """

    id: str
    display_name: str
    email: str
    token: str


__all__ = ["RegisterRequest", "LoginRequest", "UserDto"]
