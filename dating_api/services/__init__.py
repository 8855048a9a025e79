# dating_api/services/__init__.py
"""
Service layer: business rules on top of the repositories.
"""

from .account_service import AccountService
from .members_service import MembersService

__all__ = ["AccountService", "MembersService"]
