# dating_api/repositories/users.py

from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from ..db import models


class UsersRepository:
    """
    Thin data-access layer around the AppUser model.

    The repository never commits; the calling service owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return select(models.AppUser)

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list_users(self) -> Sequence[models.AppUser]:
        """
        Return every user, ordered by display name (ties broken by id).
        """
        stmt = self._base_select().order_by(
            models.AppUser.display_name,
            models.AppUser.id,
        )
        result = self.session.execute(stmt)
        return list(result.scalars().all())

    def get_by_id(self, user_id: str) -> Optional[models.AppUser]:
        return self.session.get(models.AppUser, user_id)

    def get_by_email(self, email: str) -> Optional[models.AppUser]:
        """
        Fetch a user by an already-normalized email, or None.
        """
        stmt = self._base_select().where(models.AppUser.email == email)
        result = self.session.execute(stmt)
        return result.scalar_one_or_none()

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def add(
        self,
        *,
        email: str,
        display_name: str,
        password_hash: bytes,
        password_salt: bytes,
    ) -> models.AppUser:
        """
        Stage a new user and flush so the id and unique index are checked
        immediately. Raises ``sqlalchemy.exc.IntegrityError`` on a duplicate
        email.
        """
        user = models.AppUser(
            email=email,
            display_name=display_name,
            password_hash=password_hash,
            password_salt=password_salt,
        )
        self.session.add(user)
        self.session.flush()
        return user
