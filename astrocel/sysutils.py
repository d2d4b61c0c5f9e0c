"""System-level helpers: hashing, alignment and random strings."""

from __future__ import annotations

import random
import string
from collections.abc import Hashable

_HASH_MASK = (1 << 64) - 1
_GOLDEN_RATIO = 0x9E3779B9
_ALPHANUMERIC = string.ascii_lowercase + string.ascii_uppercase + string.digits


def combine_hash(seed: int, value: Hashable) -> int:
    """Mix the hash of a value into a seed and return the new 64-bit seed."""
    seed &= _HASH_MASK
    mixed = (hash(value) & _HASH_MASK) + _GOLDEN_RATIO + (seed << 6) + (seed >> 2)
    return (seed ^ mixed) & _HASH_MASK


def align(size: int, alignment: int) -> int:
    """Round a size up to the nearest multiple of a power-of-two alignment."""
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(
            f"Cannot align size to the nearest multiple of {alignment}: "
            "Alignment is not a power of two!"
        )
    return (size + alignment - 1) & ~(alignment - 1)


def aligned_buffer_offset(aligned_buf_size: int, stride: int) -> int:
    """Return the byte offset of the child buffer at index ``stride``."""
    return aligned_buf_size * stride


def generate_random_string(length: int) -> str:
    """Return a random alphanumeric string of the given length."""
    if length < 0:
        raise ValueError("Length must not be negative")
    return "".join(random.choices(_ALPHANUMERIC, k=length))