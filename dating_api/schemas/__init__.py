"""
Pydantic schemas for the HTTP API.
"""

from .account import LoginRequest, RegisterRequest, UserDto
from .common import APIModel, ErrorDetail, ErrorResponse, FieldError
from .members import MemberDto

__all__ = [
    "APIModel",
    "ErrorDetail",
    "ErrorResponse",
    "FieldError",
    "LoginRequest",
    "RegisterRequest",
    "UserDto",
    "MemberDto",
]
