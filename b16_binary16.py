"""Conversion between IEEE 754 binary16 (half precision) and wider formats.

Half values are carried as unsigned 16-bit patterns in plain ints. Packing
rounds to nearest with ties to even, directly from the exact wide value, so
packing a double never suffers double rounding through single precision.
"""
from __future__ import annotations

import numpy as np

import b16_binary32
import b16_binary64
from b16_common import B16Error, bits_to_float32, bits_to_float64, check_bits, round_half_even

EXPONENT_BITS = 5
SIGNIFICAND_BITS = 10
EXPONENT_BIAS = 15

# Unbiased exponent range of normal half values.
EXPONENT_MIN = -14
EXPONENT_MAX = 15

MASK_SIGN = 0x8000
MASK_EXPONENT = 0x7C00
MASK_SIGNIFICAND = 0x03FF
IMPLICIT_ONE = 0x0400
QUIET_BIT = 0x0200

POSITIVE_ZERO = 0x0000
NEGATIVE_ZERO = 0x8000
POSITIVE_INFINITY = 0x7C00
NEGATIVE_INFINITY = 0xFC00
QUIET_NAN = 0x7E00
MAX_FINITE = 0x7BFF
MIN_SUBNORMAL = 0x0001


def unpack_get_exponent_unbiased(bits: int) -> int:
    """Extract and unbias the exponent of a half.

    Returns ``-15`` for zeros and subnormals and ``16`` for infinities and NaN.
    """
    bits = check_bits(bits, 16)
    return ((bits & MASK_EXPONENT) >> SIGNIFICAND_BITS) - EXPONENT_BIAS


def unpack_get_sign(bits: int) -> int:
    """Return the sign bit of a half as 0 or 1."""
    return check_bits(bits, 16) >> 15


def unpack_get_significand(bits: int) -> int:
    """Return the raw 10-bit significand field of a half."""
    return check_bits(bits, 16) & MASK_SIGNIFICAND


def pack_set_exponent_unbiased(exponent: int) -> int:
    """Bias an exponent and shift it into the half exponent field."""
    if not EXPONENT_MIN - 1 <= exponent <= EXPONENT_MAX + 1:
        raise B16Error(
            f"Exponent {exponent} out of range [{EXPONENT_MIN - 1}, {EXPONENT_MAX + 1}]"
        )
    return (exponent + EXPONENT_BIAS) << SIGNIFICAND_BITS


def pack_set_sign(sign: int) -> int:
    """Shift a sign bit into the half sign position."""
    if sign not in (0, 1):
        raise B16Error(f"Sign must be 0 or 1, got {sign}")
    return sign << 15


def pack_set_significand(significand: int) -> int:
    """Validate a raw significand for the half significand field."""
    return check_bits(significand, SIGNIFICAND_BITS)


def is_nan(bits: int) -> bool:
    """Return True if a half pattern encodes NaN."""
    bits = check_bits(bits, 16)
    return (bits & MASK_EXPONENT) == MASK_EXPONENT and (bits & MASK_SIGNIFICAND) != 0


def is_infinite(bits: int) -> bool:
    """Return True if a half pattern encodes positive or negative infinity."""
    return (check_bits(bits, 16) & ~MASK_SIGN) == POSITIVE_INFINITY


def _pack_fields(sign: int, exponent: int, significand: int, bias: int, significand_bits: int) -> int:
    """Round an unpacked wide value to a half pattern."""
    sign_bits = sign << 15
    shift = significand_bits - SIGNIFICAND_BITS
    if exponent == bias + 1:
        if significand == 0:
            return sign_bits | POSITIVE_INFINITY
        payload = significand >> shift
        if payload == 0:
            payload = QUIET_BIT
        return sign_bits | MASK_EXPONENT | payload
    if exponent == -bias:
        # Zeros and wide subnormals are far below the smallest half subnormal.
        return sign_bits
    if exponent > EXPONENT_MAX:
        return sign_bits | POSITIVE_INFINITY
    full = significand | (1 << significand_bits)
    if exponent >= EXPONENT_MIN:
        rounded = round_half_even(full, shift)
        # A carry out of the significand bumps the exponent, up to infinity.
        return sign_bits | (((exponent + EXPONENT_BIAS) << SIGNIFICAND_BITS) + rounded - IMPLICIT_ONE)
    # Subnormal; a carry into IMPLICIT_ONE yields the smallest normal.
    return sign_bits | round_half_even(full, shift + EXPONENT_MIN - exponent)


def _unpack_fields(bits: int, bias: int, exponent_bits: int, significand_bits: int) -> int:
    """Widen a half pattern into the pattern of a wider format."""
    bits = check_bits(bits, 16)
    exponent = (bits & MASK_EXPONENT) >> SIGNIFICAND_BITS
    significand = bits & MASK_SIGNIFICAND
    sign_bits = (bits >> 15) << (exponent_bits + significand_bits)
    if exponent == 0:
        if significand == 0:
            return sign_bits
        # Renormalize around the leading one: value = significand * 2^-24.
        lead = significand.bit_length() - 1
        wide_exponent = lead - EXPONENT_BIAS - SIGNIFICAND_BITS + 1 + bias
        wide_significand = (significand ^ (1 << lead)) << (significand_bits - lead)
        return sign_bits | (wide_exponent << significand_bits) | wide_significand
    if exponent == MASK_EXPONENT >> SIGNIFICAND_BITS:
        wide_exponent = (1 << exponent_bits) - 1
    else:
        wide_exponent = exponent - EXPONENT_BIAS + bias
    wide_significand = significand << (significand_bits - SIGNIFICAND_BITS)
    return sign_bits | (wide_exponent << significand_bits) | wide_significand


def pack_double(value: float) -> int:
    """Convert a double to the nearest half bit pattern."""
    return _pack_fields(
        b16_binary64.unpack_get_sign(value),
        b16_binary64.unpack_get_exponent_unbiased(value),
        b16_binary64.unpack_get_significand(value),
        b16_binary64.BIAS,
        b16_binary64.SIGNIFICAND_BITS,
    )


def pack_float(value: float) -> int:
    """Convert a single to the nearest half bit pattern.

    Values that are not already single precision are rounded to it first.
    """
    return _pack_fields(
        b16_binary32.unpack_get_sign(value),
        b16_binary32.unpack_get_exponent_unbiased(value),
        b16_binary32.unpack_get_significand(value),
        b16_binary32.BIAS,
        b16_binary32.SIGNIFICAND_BITS,
    )


def pack(value: float) -> int:
    """Convert a float to a half bit pattern, choosing the source width by type."""
    if isinstance(value, np.float32):
        return pack_float(value)
    return pack_double(value)


def unpack_double(bits: int) -> float:
    """Convert a half bit pattern to the exactly equal double."""
    return bits_to_float64(
        _unpack_fields(
            bits,
            b16_binary64.BIAS,
            b16_binary64.EXPONENT_BITS,
            b16_binary64.SIGNIFICAND_BITS,
        )
    )


def unpack_float(bits: int) -> np.float32:
    """Convert a half bit pattern to the exactly equal single."""
    return bits_to_float32(
        _unpack_fields(
            bits,
            b16_binary32.BIAS,
            b16_binary32.EXPONENT_BITS,
            b16_binary32.SIGNIFICAND_BITS,
        )
    )


def unpack(bits: int) -> float:
    """Convert a half bit pattern to a double."""
    return unpack_double(bits)
