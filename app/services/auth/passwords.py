"""Salted PBKDF2 password hashing.

Stored format is ``"<salt hex>:<derived key hex>"``. The hex salt string itself
is fed to the KDF, so hashes are interchangeable with other implementations
that use the same convention.
"""
import hashlib
import hmac
import secrets

HASH_ALGORITHM = "sha512"
# Not recorded in the stored hash; changing it invalidates every password
PBKDF2_ITERATIONS = 100_000
SALT_BYTES = 16
KEY_LENGTH = 64


def _derive(password: str, salt: str) -> str:
    return hashlib.pbkdf2_hmac(
        HASH_ALGORITHM,
        password.encode("utf-8"),
        salt.encode("utf-8"),
        PBKDF2_ITERATIONS,
        dklen=KEY_LENGTH,
    ).hex()


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt."""
    salt = secrets.token_hex(SALT_BYTES)
    return f"{salt}:{_derive(password, salt)}"


def verify_password(password: str, stored_hash: str) -> bool:
    """
    Check a candidate password against a stored hash.

    Malformed stored values (no colon, empty salt or key) return False.
    """
    if not stored_hash:
        return False
    salt, _, key = stored_hash.partition(":")
    if not salt or not key:
        return False
    candidate = _derive(password, salt)
    return hmac.compare_digest(candidate.encode("utf-8"), key.encode("utf-8"))
