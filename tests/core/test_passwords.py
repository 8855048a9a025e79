# tests/core/test_passwords.py
from dating_api.security.passwords import (
    DIGEST_BYTES,
    SALT_BYTES,
    compute_hash,
    generate_salt,
    hash_password,
    verify_password,
)


class TestKeyedHash:

    def test_same_password_and_salt_gives_same_digest(self):
        salt = generate_salt()

        assert compute_hash("Secret1", salt) == compute_hash("Secret1", salt)

    def test_different_salts_give_different_digests(self):
        assert compute_hash("Secret1", generate_salt()) != compute_hash(
            "Secret1", generate_salt()
        )

    def test_digest_and_salt_sizes(self):
        password_hash, password_salt = hash_password("Secret1")

        assert len(password_hash) == DIGEST_BYTES == 64
        assert len(password_salt) == SALT_BYTES == 128

    def test_every_call_draws_a_fresh_salt(self):
        salts = {hash_password("Secret1")[1] for _ in range(20)}

        assert len(salts) == 20

    def test_digest_is_hmac_sha512_keyed_by_salt(self):
        import hashlib
        import hmac

        salt = b"k" * 128
        expected = hmac.new(salt, "pässword".encode("utf-8"), hashlib.sha512).digest()

        assert compute_hash("pässword", salt) == expected


class TestVerifyPassword:

    def test_correct_password_verifies(self):
        password_hash, password_salt = hash_password("Secret1")

        assert verify_password("Secret1", password_hash, password_salt)

    def test_wrong_password_is_rejected(self):
        password_hash, password_salt = hash_password("Secret1")

        assert not verify_password("secret1", password_hash, password_salt)
        assert not verify_password("", password_hash, password_salt)

    def test_stale_salt_is_rejected(self):
        password_hash, _ = hash_password("Secret1")

        assert not verify_password("Secret1", password_hash, generate_salt())
