# dating_api/db/models.py

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, LargeBinary, String
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class AppUser(Base):
    """
    A registered member.

    Rows are only ever inserted by the registration path. ``email`` is stored
    normalized (trimmed, lower-cased) so the unique index doubles as the
    case-insensitive uniqueness guarantee.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    email: Mapped[str] = mapped_column(
        String(320),
        unique=True,
        index=True,
        nullable=False,
    )
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)

    # HMAC-SHA512 digest keyed by password_salt
    password_hash: Mapped[bytes] = mapped_column(LargeBinary(64), nullable=False)
    password_salt: Mapped[bytes] = mapped_column(LargeBinary(128), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<AppUser id={self.id!r} email={self.email!r}>"


__all__ = ["Base", "AppUser"]
