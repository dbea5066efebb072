"""Salt generation and PBKDF2-HMAC-SHA256 key derivation."""

from __future__ import annotations

import hashlib
import secrets

HASH_NAME = "sha256"


def generate_salt(length: int) -> bytes:
    """Return ``length`` cryptographically random bytes."""
    if length < 0:
        raise ValueError(f"salt length must not be negative, got {length}")
    return secrets.token_bytes(length)


def pbkdf2(password: bytes | str, salt: bytes, iterations: int, dk_len: int) -> bytes:
    """Derive ``dk_len`` bytes from ``password`` and ``salt`` with PBKDF2-HMAC-SHA256.

    A text password is encoded as UTF-8. Fewer than one iteration counts as one,
    and a non-positive ``dk_len`` yields an empty result.
    """
    if dk_len <= 0:
        return b""
    material = password.encode() if isinstance(password, str) else bytes(password)
    return hashlib.pbkdf2_hmac(
        HASH_NAME, material, bytes(salt), max(iterations, 1), dk_len
    )