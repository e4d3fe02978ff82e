"""The TEA block cipher: 64-bit blocks as two 32-bit words, 128-bit keys."""

from __future__ import annotations

import string
from collections.abc import Iterable

MASK = 0xFFFFFFFF
DELTA = 0x9E3779B9
ROUNDS = 32
_HEX_DIGITS = frozenset(string.hexdigits)


def _words(values: Iterable[int], count: int, what: str) -> tuple[int, ...]:
    words = tuple(values)
    if len(words) != count:
        raise ValueError(f"{what} must hold {count} 32-bit words, got {len(words)}")
    for word in words:
        if not 0 <= word <= MASK:
            raise ValueError(f"{what} word {word!r} is not an unsigned 32-bit value")
    return words


def encrypt(block: Iterable[int], key: Iterable[int]) -> tuple[int, int]:
    """Encrypt a block of two 32-bit words with a key of four 32-bit words."""
    v0, v1 = _words(block, 2, "block")
    k0, k1, k2, k3 = _words(key, 4, "key")
    total = 0
    for _ in range(ROUNDS):
        total = (total + DELTA) & MASK
        v0 = (v0 + ((((v1 << 4) + k0) ^ (v1 + total) ^ ((v1 >> 5) + k1)) & MASK)) & MASK
        v1 = (v1 + ((((v0 << 4) + k2) ^ (v0 + total) ^ ((v0 >> 5) + k3)) & MASK)) & MASK
    return v0, v1


def decrypt(block: Iterable[int], key: Iterable[int]) -> tuple[int, int]:
    """Decrypt a block produced by :func:`encrypt` with the same key."""
    v0, v1 = _words(block, 2, "block")
    k0, k1, k2, k3 = _words(key, 4, "key")
    total = (DELTA * ROUNDS) & MASK
    for _ in range(ROUNDS):
        v1 = (v1 - ((((v0 << 4) + k2) ^ (v0 + total) ^ ((v0 >> 5) + k3)) & MASK)) & MASK
        v0 = (v0 - ((((v1 << 4) + k0) ^ (v1 + total) ^ ((v1 >> 5) + k1)) & MASK)) & MASK
        total = (total - DELTA) & MASK
    return v0, v1


def hex_to_int(text: str) -> int:
    """Parse hexadecimal digits (no prefix) into an unsigned 32-bit value."""
    if any(ch not in _HEX_DIGITS for ch in text):
        raise ValueError(f"not a hexadecimal number: {text!r}")
    if not text:
        return 0
    return int(text, 16) & MASK