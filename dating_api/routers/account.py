# dating_api/routers/account.py

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from dating_api.dependencies import get_account_service
from dating_api.schemas.account import LoginRequest, RegisterRequest, UserDto
from dating_api.schemas.common import ErrorResponse
from dating_api.services.account_service import AccountService

router = APIRouter(prefix="/account", tags=["account"])


@router.post(
    "/register",
    response_model=UserDto,
    status_code=status.HTTP_200_OK,
    summary="Register a new member",
    description=(
        "Create a member account and return its projection with a bearer token. "
        "Email uniqueness is case-insensitive."
    ),
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": ErrorResponse,
            "description": "Validation failure or duplicate email.",
        },
    },
)
def register(
    *,
    payload: RegisterRequest,
    service: AccountService = Depends(get_account_service),
) -> UserDto:
    return service.register(payload)


@router.post(
    "/login",
    response_model=UserDto,
    summary="Log in",
    description="Verify credentials and return the member projection with a fresh token.",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_401_UNAUTHORIZED: {
            "model": ErrorResponse,
            "description": "Unknown email or wrong password (indistinguishable).",
        },
    },
)
def login(
    *,
    payload: LoginRequest,
    service: AccountService = Depends(get_account_service),
) -> UserDto:
    return service.login(payload)
