# dating_api/schemas/members.py

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import APIModel


class MemberDto(APIModel):
    """
    Public projection of a member. Password hash and salt never leave the
    credential store.
    """

    id: str = Field(..., description="Member identifier (UUID)")
    display_name: str
    email: str
    created_at: datetime = Field(
        ...,
        description="Registration timestamp (UTC)",
    )


__all__ = ["MemberDto"]
