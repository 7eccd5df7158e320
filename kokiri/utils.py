"""String helpers and identifier generation."""

from __future__ import annotations

import hashlib
import random

_DASH_BEFORE = frozenset({4, 6, 8, 10})
_rng = random.Random()


def extension(s: str) -> str:
    """Return everything from the first dot in s onward, or "" without a dot."""
    index = s.find(".")
    return "" if index < 0 else s[index:]


def split(s: str, delimiter: str) -> list[str]:
    """Split s on a single-character delimiter, dropping one trailing empty field."""
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    parts = s.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def uuid() -> str:
    """Return a random identifier of 32 hex digits grouped as 8-4-4-4-12."""
    pieces = []
    for i in range(16):
        if i in _DASH_BEFORE:
            pieces.append("-")
        pieces.append(f"{_rng.randint(0, 15):x}{_rng.randint(0, 15):x}")
    return "".join(pieces)


def hash_string(s: str) -> str:
    """Return a stable 64-bit hash of s as lower-case hex without padding."""
    digest = hashlib.blake2b(s.encode("utf-8"), digest_size=8).digest()
    return f"{int.from_bytes(digest, 'big'):x}"