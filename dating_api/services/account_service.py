# dating_api/services/account_service.py

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from dating_api.db.models import AppUser
from dating_api.exceptions import DuplicateEmailError, InvalidCredentialsError
from dating_api.logging import get_logger
from dating_api.repositories.users import UsersRepository
from dating_api.schemas.account import LoginRequest, RegisterRequest, UserDto
from dating_api.security.passwords import (
    compute_hash,
    generate_salt,
    hash_password,
    verify_password,
)
from dating_api.security.tokens import TokenService

log = get_logger(__name__)

_UNKNOWN_MEMBER_SALT = generate_salt()


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AccountService:
    """
    Registration and login.

    Responsibilities:
    - Enforce case-insensitive email uniqueness, including the race where two
      registrations pass the existence check at the same time.
    - Hash passwords under a per-member salt and verify them in constant time.
    - Issue a bearer token for every successful register / login.
    """

    def __init__(self, repo: UsersRepository, tokens: TokenService) -> None:
        self._repo = repo
        self._tokens = tokens

    def register(self, payload: RegisterRequest) -> UserDto:
        email = normalize_email(payload.email)

        if self._repo.email_exists(email):
            log.info("registration_rejected", email=email, reason="duplicate_email")
            raise DuplicateEmailError(email)

        password_hash, password_salt = hash_password(payload.password)

        try:
            user = self._repo.add(
                email=email,
                display_name=payload.display_name,
                password_hash=password_hash,
                password_salt=password_salt,
            )
            self._repo.session.commit()
        except IntegrityError as exc:
            # Lost a race against a concurrent registration of the same email.
            self._repo.session.rollback()
            log.info("registration_rejected", email=email, reason="unique_violation")
            raise DuplicateEmailError(email) from exc

        log.info("member_registered", member_id=user.id, email=email)
        return self._to_dto(user)

    def login(self, payload: LoginRequest) -> UserDto:
        email = normalize_email(payload.email)
        user = self._repo.get_by_email(email)

        if user is None:
            # Same hashing cost as a real check for unknown emails.
            compute_hash(payload.password, _UNKNOWN_MEMBER_SALT)
            log.info("login_failed", email=email)
            raise InvalidCredentialsError()

        if not verify_password(
            payload.password, user.password_hash, user.password_salt
        ):
            log.info("login_failed", email=email)
            raise InvalidCredentialsError()

        log.info("login_succeeded", member_id=user.id)
        return self._to_dto(user)

    def _to_dto(self, user: AppUser) -> UserDto:
        return UserDto(
            id=user.id,
            display_name=user.display_name,
            email=user.email,
            token=self._tokens.create_token(user),
        )


__all__ = ["AccountService", "normalize_email"]
