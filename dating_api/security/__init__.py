"""
Password hashing and bearer-token primitives.
"""

from .passwords import compute_hash, generate_salt, hash_password, verify_password
from .tokens import TokenService

__all__ = [
    "compute_hash",
    "generate_salt",
    "hash_password",
    "verify_password",
    "TokenService",
]
