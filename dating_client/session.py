# dating_client/session.py

"""
Client-side session state.

``AccountSession`` is what the navigation bar binds to: it owns the
``logged_in`` / ``current_user`` / ``error`` signals and drives them from the
Account API. ``MembersState`` holds the member list loaded at app start.

Not handled here:

- ``logout()`` only forgets the session locally; the token stays valid on
  the server until it expires.
- ``restore()`` trusts the persisted user and does not re-validate its token.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from dating_client.api import AccountApi, ApiError
from dating_client.models import LoginCredentials, Member, RegisterForm, User
from dating_client.state import Signal
from dating_client.storage import LocalStorage

logger = logging.getLogger(__name__)

USER_STORAGE_KEY = "user"


class AccountSession:
    """
    Reactive session store.
    """

    def __init__(self, api: AccountApi, storage: LocalStorage) -> None:
        self._api = api
        self._storage = storage

        self.logged_in: Signal[bool] = Signal(False)
        self.current_user: Signal[Optional[User]] = Signal(None)
        self.error: Signal[Optional[str]] = Signal(None)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def login(self, credentials: LoginCredentials) -> Optional[User]:
        """
        Log in once with ``credentials``.

        On success the form is cleared and the user is persisted. On failure
        the server's message lands in ``error`` and None is returned.
        """
        try:
            user = await self._api.login(credentials)
        except ApiError as exc:
            self._fail(exc)
            return None

        self._start(user)
        credentials.clear()
        return user

    async def register(self, form: RegisterForm) -> Optional[User]:
        """
        Register and log in as the new member.
        """
        try:
            user = await self._api.register(form)
        except ApiError as exc:
            self._fail(exc)
            return None

        self._start(user)
        form.clear()
        return user

    def logout(self) -> None:
        self._storage.remove_item(USER_STORAGE_KEY)
        self.logged_in.set(False)
        self.current_user.set(None)

    def restore(self) -> Optional[User]:
        """
        Restore a previously persisted user at app start, without contacting
        the server. Unreadable entries are discarded.
        """
        raw = self._storage.get_item(USER_STORAGE_KEY)
        if not raw:
            return None

        try:
            user = User.loads(raw)
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Discarding unreadable stored user: %s", exc)
            self._storage.remove_item(USER_STORAGE_KEY)
            return None

        self.current_user.set(user)
        self.logged_in.set(True)
        return user

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _start(self, user: User) -> None:
        self._storage.set_item(USER_STORAGE_KEY, user.dumps())
        self.error.set(None)
        self.current_user.set(user)
        self.logged_in.set(True)

    def _fail(self, exc: ApiError) -> None:
        logger.info("Account request failed: %s (%s)", exc.message, exc.code)
        self.error.set(exc.message)


class MembersState:
    """
    Member list shown on the home and members views.
    """

    def __init__(self, api: AccountApi) -> None:
        self._api = api
        self.members: Signal[List[Member]] = Signal([])

    async def load(self) -> List[Member]:
        """
        Fetch all members. Errors propagate to the caller.
        """
        members = await self._api.list_members()
        self.members.set(members)
        return members

    async def get(self, member_id: str) -> Member:
        return await self._api.get_member(member_id)


__all__ = ["AccountSession", "MembersState", "USER_STORAGE_KEY"]
