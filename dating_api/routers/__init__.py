"""
HTTP routers, mounted under ``/api`` by ``dating_api.main``.
"""

from . import account, members

__all__ = ["account", "members"]
