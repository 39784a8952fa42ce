"""SHA-256 digests rendered as lower-case hexadecimal text."""

from __future__ import annotations

import hashlib


def sha256_hex(data: str | bytes) -> str:
    """Return the SHA-256 digest of ``data`` as 64 lower-case hex characters.

    Text is encoded as UTF-8 before hashing.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    elif not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected str or bytes, got {type(data).__name__}")
    return hashlib.sha256(data).hexdigest()