"""Common helpers for IEEE 754 bit-pattern conversion."""
from __future__ import annotations

import numpy as np


class B16Error(ValueError):
    """Raised when a value is not a valid bit pattern or field."""


def check_bits(value: int, width: int) -> int:
    """Validate that a value is an unsigned bit pattern of the given width."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise B16Error(f"Bit pattern must be int, got {type(value)}")
    value = int(value)
    if value < 0 or value >> width:
        raise B16Error(f"Invalid bit pattern {value:#x}: must fit in {width} unsigned bits")
    return value


def float64_to_bits(value: float) -> int:
    """Reinterpret a double as its 64-bit pattern."""
    return int(np.float64(value).view(np.uint64))


def bits_to_float64(bits: int) -> float:
    """Reinterpret a 64-bit pattern as a double."""
    return float(np.uint64(bits).view(np.float64))


def float32_to_bits(value: float) -> int:
    """Round a value to single precision and return its 32-bit pattern."""
    with np.errstate(over="ignore"):
        single = np.float32(value)
    return int(single.view(np.uint32))


def bits_to_float32(bits: int) -> np.float32:
    """Reinterpret a 32-bit pattern as a single."""
    return np.uint32(bits).view(np.float32)


def round_half_even(value: int, shift: int) -> int:
    """Shift an unsigned integer right, rounding to nearest with ties to even."""
    if shift <= 0:
        return value << -shift
    kept = value >> shift
    rest = value & ((1 << shift) - 1)
    half = 1 << (shift - 1)
    if rest > half or (rest == half and kept & 1):
        kept += 1
    return kept
