"""
dating_api.db
=============

Database package for the Dating App API. Public primitives can be imported
from here:

    from dating_api.db import Base, AppUser, create_db_engine, get_session
"""

from .models import AppUser, Base
from .session import create_db_engine, create_session_factory, get_session, init_db

__all__ = [
    "AppUser",
    "Base",
    "create_db_engine",
    "create_session_factory",
    "get_session",
    "init_db",
]
