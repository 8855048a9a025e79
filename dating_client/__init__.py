"""
dating_client
-------------

Client-side session layer for the Dating App: observable state, local
storage, the async API client and the route table.
"""

from .api import AccountApi, ApiError
from .models import LoginCredentials, Member, RegisterForm, User
from .routes import ROUTES, match_route
from .session import AccountSession, MembersState
from .state import Signal
from .storage import LocalStorage

__all__ = [
    "AccountApi",
    "ApiError",
    "AccountSession",
    "MembersState",
    "LocalStorage",
    "LoginCredentials",
    "Member",
    "RegisterForm",
    "User",
    "ROUTES",
    "match_route",
    "Signal",
]
