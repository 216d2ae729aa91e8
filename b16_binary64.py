"""Field accessors for IEEE 754 binary64 (double precision) values."""
from __future__ import annotations

from b16_common import float64_to_bits

EXPONENT_BITS = 11
SIGNIFICAND_BITS = 52

# A given exponent e is encoded as BIAS + e.
BIAS = 1023

MASK_SIGN = 0x8000000000000000
MASK_EXPONENT = 0x7FF0000000000000
MASK_SIGNIFICAND = 0x000FFFFFFFFFFFFF

NEGATIVE_ZERO_BITS = 0x8000000000000000


def unpack_get_exponent_unbiased(value: float) -> int:
    """Extract and unbias the exponent of a double.

    The biased exponent lies in [0, 2047], so the result is:

    - ``-1023`` for zeros and subnormals,
    - a value in ``[-1022, 1023]`` for normal numbers,
    - ``1024`` for infinities and NaN.
    """
    bits = float64_to_bits(value)
    return ((bits & MASK_EXPONENT) >> SIGNIFICAND_BITS) - BIAS


def unpack_get_sign(value: float) -> int:
    """Return the sign bit of a double as 0 or 1."""
    bits = float64_to_bits(value)
    return (bits & MASK_SIGN) >> 63


def unpack_get_significand(value: float) -> int:
    """Return the raw 52-bit significand field of a double."""
    return float64_to_bits(value) & MASK_SIGNIFICAND
