"""Field accessors for IEEE 754 binary32 (single precision) values."""
from __future__ import annotations

from b16_common import float32_to_bits

EXPONENT_BITS = 8
SIGNIFICAND_BITS = 23
BIAS = 127

MASK_SIGN = 0x80000000
MASK_EXPONENT = 0x7F800000
MASK_SIGNIFICAND = 0x007FFFFF

NEGATIVE_ZERO_BITS = 0x80000000


def unpack_get_exponent_unbiased(value: float) -> int:
    """Extract and unbias the exponent of a single.

    Returns ``-127`` for zeros and subnormals and ``128`` for infinities and NaN.
    """
    bits = float32_to_bits(value)
    return ((bits & MASK_EXPONENT) >> SIGNIFICAND_BITS) - BIAS


def unpack_get_sign(value: float) -> int:
    """Return the sign bit of a single as 0 or 1."""
    return (float32_to_bits(value) & MASK_SIGN) >> 31


def unpack_get_significand(value: float) -> int:
    return float32_to_bits(value) & MASK_SIGNIFICAND
