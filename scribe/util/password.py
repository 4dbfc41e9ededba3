"""Password hashing utilities.

Hashes are stored as ``pbkdf2_sha256$<iterations>$<salt>$<digest>`` with
the salt and digest base64url encoded.
"""

import hmac
import secrets
from base64 import urlsafe_b64decode, urlsafe_b64encode
from hashlib import pbkdf2_hmac

ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16


def _b64encode(data: bytes) -> str:
    return urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(data: str) -> bytes:
    return urlsafe_b64decode(data + "=" * (-len(data) % 4))


def hash_password(password: str, iterations: int) -> str:
    """Hash a password with a fresh random salt.

    Args:
        password: Plain-text password
        iterations: PBKDF2 iteration count

    Returns:
        Encoded hash string
    """
    salt = secrets.token_bytes(SALT_BYTES)
    digest = pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{ALGORITHM}${iterations}${_b64encode(salt)}${_b64encode(digest)}"


def verify_password(password: str, encoded: str) -> bool:
    """Check a plain-text password against an encoded hash.

    Malformed hashes never verify.

    Args:
        password: Plain-text password
        encoded: Hash produced by hash_password

    Returns:
        True if the password matches
    """
    try:
        algorithm, iterations, salt, digest = encoded.split("$")
        if algorithm != ALGORITHM:
            return False
        expected = _b64decode(digest)
        actual = pbkdf2_hmac(
            "sha256", password.encode("utf-8"), _b64decode(salt), int(iterations)
        )
    except ValueError:
        return False
    return hmac.compare_digest(actual, expected)
