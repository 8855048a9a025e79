# dating_api/security/passwords.py

"""
Salted keyed hashing for member passwords.

Each member gets a fresh 128-byte random salt that doubles as the HMAC-SHA512
key; the stored digest is ``HMAC(key=salt, msg=utf8(password))``.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets
from typing import Tuple

SALT_BYTES = 128
DIGEST_BYTES = hashlib.sha512().digest_size


def generate_salt() -> bytes:
    return secrets.token_bytes(SALT_BYTES)


def compute_hash(password: str, salt: bytes) -> bytes:
    return hmac.new(salt, password.encode("utf-8"), hashlib.sha512).digest()


def hash_password(password: str) -> Tuple[bytes, bytes]:
    """
    Hash ``password`` under a freshly generated salt.

    Returns ``(password_hash, password_salt)``.
    """
    salt = generate_salt()
    return compute_hash(password, salt), salt


def verify_password(password: str, password_hash: bytes, password_salt: bytes) -> bool:
    """
    Recompute the digest under the stored salt and compare in constant time.
    """
    candidate = compute_hash(password, password_salt)
    return hmac.compare_digest(candidate, password_hash)


__all__ = [
    "SALT_BYTES",
    "DIGEST_BYTES",
    "generate_salt",
    "compute_hash",
    "hash_password",
    "verify_password",
]
