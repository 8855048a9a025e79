# dating_api/repositories/__init__.py
"""
Repository layer public exports.

    from dating_api.repositories import UsersRepository
"""

from .users import UsersRepository

__all__ = ["UsersRepository"]
