# dating_api/dependencies.py
from __future__ import annotations

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from sqlalchemy.orm import Session

from dating_api.container import Container
from dating_api.db.session import get_session
from dating_api.repositories.users import UsersRepository
from dating_api.security.tokens import TokenService
from dating_api.services.account_service import AccountService
from dating_api.services.members_service import MembersService


def get_users_repository(session: Session = Depends(get_session)) -> UsersRepository:
    """Request-scoped repository bound to the request's DB session."""
    return UsersRepository(session)


@inject
def get_token_service(
    tokens: TokenService = Depends(Provide[Container.token_service]),
) -> TokenService:
    """Dependency to inject the container-managed TokenService."""
    return tokens


def get_account_service(
    repo: UsersRepository = Depends(get_users_repository),
    tokens: TokenService = Depends(get_token_service),
) -> AccountService:
    return AccountService(repo=repo, tokens=tokens)


def get_members_service(
    repo: UsersRepository = Depends(get_users_repository),
) -> MembersService:
    return MembersService(repo=repo)


__all__ = [
    "get_users_repository",
    "get_token_service",
    "get_account_service",
    "get_members_service",
]
