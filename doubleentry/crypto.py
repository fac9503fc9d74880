"""Password hashing and the repeating-key XOR cipher used for data files."""

from __future__ import annotations

import hashlib


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def xor_cipher(data: str | bytes, key: str | bytes) -> bytes:
    """XOR `data` with `key` repeated; applying it twice restores the input."""
    data_bytes = _as_bytes(data)
    key_bytes = _as_bytes(key)
    if not key_bytes:
        raise ValueError("key must not be empty")
    size = len(key_bytes)
    return bytes(byte ^ key_bytes[i % size] for i, byte in enumerate(data_bytes))


def password_hash(password: str | bytes) -> str:
    """Return the SHA-256 digest of the password as 64 lowercase hex digits."""
    return hashlib.sha256(_as_bytes(password)).hexdigest()