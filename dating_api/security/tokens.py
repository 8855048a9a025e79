# dating_api/security/tokens.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from dating_api.db.models import AppUser
from dating_api.exceptions import InvalidTokenError

MIN_KEY_LENGTH = 64


class TokenService:
    """
    Issues and verifies signed, time-bounded bearer tokens (JWT).

    Claims: ``sub`` (member id), ``email``, ``name`` (display name),
    ``iat`` and ``exp``.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS512",
        expires_minutes: int = 60 * 24 * 7,
    ) -> None:
        if not secret_key or len(secret_key) < MIN_KEY_LENGTH:
            raise ValueError(
                f"Token key must be at least {MIN_KEY_LENGTH} characters long."
            )
        if expires_minutes <= 0:
            raise ValueError("Token lifetime must be positive.")

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._lifetime = timedelta(minutes=expires_minutes)

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def create_token(self, user: AppUser, *, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims: Dict[str, Any] = {
            "sub": user.id,
            "email": user.email,
            "name": user.display_name,
            "iat": issued_at,
            "exp": issued_at + self._lifetime,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Verify signature and expiry and return the claims.
        """
        try:
            return jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError(str(exc)) from exc


__all__ = ["MIN_KEY_LENGTH", "TokenService"]
