"""MD5 digests used to identify cartridge images."""

from __future__ import annotations

import hashlib

__all__ = ["md5_hexdigest"]


def md5_hexdigest(data: bytes | bytearray | memoryview) -> str:
    """Return the MD5 digest of ``data`` as 32 lower-case hex characters."""
    if isinstance(data, str):
        raise TypeError("md5_hexdigest() needs bytes, not str")
    return hashlib.md5(bytes(data), usedforsecurity=False).hexdigest()