"""Credentials — password hash verification and signed session tokens.

Invariants:
    - Password hashes have the form pbkdf2_sha256$<iterations>$<salt_hex>$<hash_hex>
    - All digest comparisons are constant-time (hmac.compare_digest)
    - A session token is "<user_id>.<b64url HMAC-SHA256(user_id)>"; anything else is no session
    - Pure functions: no IO besides os.urandom for new salts

Design Decisions:
    - Iteration count stored in the hash: lets it be raised without breaking old rows
    - Token carries no expiry: logout clears the cookie, the secret rotates sessions
"""

import base64
import hashlib
import hmac
import os

_SCHEME = "pbkdf2_sha256"
_DEFAULT_ITERATIONS = 100_000


def hash_password(password: str, iterations: int = _DEFAULT_ITERATIONS) -> str:
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{_SCHEME}${iterations}${salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored hash. Malformed hashes never match."""
    parts = hashed_password.split("$")
    if len(parts) != 4 or parts[0] != _SCHEME:
        return False
    try:
        iterations = int(parts[1])
        salt = bytes.fromhex(parts[2])
        stored = bytes.fromhex(parts[3])
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac(
        "sha256", plain_password.encode("utf-8"), salt, iterations,
    )
    return hmac.compare_digest(dk, stored)


def _sign(message: str, secret: str) -> str:
    digest = hmac.new(
        secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256,
    ).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


def issue_session_token(user_id: str, secret: str) -> str:
    return f"{user_id}.{_sign(user_id, secret)}"


def read_session_token(token: str | None, secret: str) -> str | None:
    """Return the user id carried by a valid token, else None."""
    if not token or "." not in token:
        return None
    user_id, signature = token.rsplit(".", 1)
    if not user_id or not hmac.compare_digest(signature, _sign(user_id, secret)):
        return None
    return user_id
