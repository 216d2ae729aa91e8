from __future__ import annotations

import math
import sys
from pathlib import Path
import unittest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import b16_binary64
from b16_common import bits_to_float64


def _make_double(sign: int, exponent: int, significand: int) -> float:
    biased = exponent + b16_binary64.BIAS
    return bits_to_float64((sign << 63) | (biased << 52) | significand)


class TestBinary64(unittest.TestCase):
    def test_constructed_fields(self) -> None:
        for sign, exponent, significand in (
            (0, 0, 0),
            (1, 0, 0x8000000000000),
            (0, -1022, 1),
            (1, 1023, 0xFFFFFFFFFFFFF),
            (0, 15, 0x123456789ABCD),
            (1, -25, 0x0000000000001),
        ):
            value = _make_double(sign, exponent, significand)
            self.assertEqual(b16_binary64.unpack_get_sign(value), sign)
            self.assertEqual(b16_binary64.unpack_get_exponent_unbiased(value), exponent)
            self.assertEqual(b16_binary64.unpack_get_significand(value), significand)

    def test_known_values(self) -> None:
        self.assertEqual(b16_binary64.unpack_get_exponent_unbiased(1.0), 0)
        self.assertEqual(b16_binary64.unpack_get_exponent_unbiased(-2.5), 1)
        self.assertEqual(b16_binary64.unpack_get_sign(-2.5), 1)
        self.assertEqual(b16_binary64.unpack_get_significand(-2.5), 0x4000000000000)
        self.assertEqual(b16_binary64.unpack_get_significand(1.0), 0)

    def test_zero_and_subnormal(self) -> None:
        self.assertEqual(b16_binary64.unpack_get_exponent_unbiased(0.0), -1023)
        self.assertEqual(b16_binary64.unpack_get_sign(0.0), 0)
        self.assertEqual(b16_binary64.unpack_get_sign(-0.0), 1)
        self.assertEqual(b16_binary64.unpack_get_exponent_unbiased(5e-324), -1023)
        self.assertEqual(b16_binary64.unpack_get_significand(5e-324), 1)

    def test_infinity_and_nan(self) -> None:
        self.assertEqual(b16_binary64.unpack_get_exponent_unbiased(math.inf), 1024)
        self.assertEqual(b16_binary64.unpack_get_sign(-math.inf), 1)
        self.assertEqual(b16_binary64.unpack_get_significand(math.inf), 0)
        self.assertEqual(b16_binary64.unpack_get_exponent_unbiased(math.nan), 1024)
        self.assertNotEqual(b16_binary64.unpack_get_significand(math.nan), 0)

    def test_negative_zero_bits(self) -> None:
        self.assertEqual(math.copysign(1.0, bits_to_float64(b16_binary64.NEGATIVE_ZERO_BITS)), -1.0)
