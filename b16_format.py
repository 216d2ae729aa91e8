"""Text rendering helpers for half-precision bit patterns."""
from __future__ import annotations

from b16_binary16 import EXPONENT_BITS, SIGNIFICAND_BITS, pack, unpack
from b16_common import check_bits


def format_bits(bits: int, width: int) -> str:
    """Format a bit pattern as a zero-padded binary string."""
    bits = check_bits(bits, width)
    return format(bits, f"0{width}b")


def format_half_fields(bits: int) -> str:
    """Format a half pattern with its sign, exponent and significand separated."""
    raw = format_bits(bits, 16)
    exponent_end = 1 + EXPONENT_BITS
    return f"{raw[0]} {raw[1:exponent_end]} {raw[exponent_end:exponent_end + SIGNIFICAND_BITS]}"


def format_half_hex(bits: int) -> str:
    return f"0x{check_bits(bits, 16):04x}"


def format_roundtrip(value: float) -> str:
    """Format a value, its half pattern and the recovered value on one line."""
    packed = pack(value)
    recovered = unpack(packed)
    return f"{float(value):.08f} → {format_half_hex(packed)} → {recovered:.08f}"
