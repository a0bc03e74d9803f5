"""
Integer -> IEEE-754 binary64 conversions.

Every function here must reproduce, bit for bit, the double a C99 compiler
produces for the equivalent expression:

- to_double_multiplicative: (x >> 11) * 0x1.0p-53
- to_double_bitcast:        union { uint64_t i; double d; } pun, minus 1.0
- to_double_doornik32:      RANDBL_32 from Doornik (2007)
- to_double_doornik32_no_zero: RANDBL_32_NO_ZERO
- to_double_doornik52:      RANDBL_52_NO_ZERO

Reference:
    Jurgen A. Doornik. 2007. Conversion of high-period random numbers to
    floating point. ACM Trans. Model. Comput. Simul. 17, 1, Article 3.
    DOI=10.1145/1189756.1189759

The bit-cast uses a numpy uint64 -> float64 view, which is a pure
reinterpretation of the 8 bytes (no numeric conversion).
"""

import numpy as np

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

# 2**-32 and 2**-52, spelled exactly as in the Doornik paper
M_RAN_INVM32 = 2.32830643653869628906e-010
M_RAN_INVM52 = 2.22044604925031308085e-016

INV_2_53 = 1.0 / 9007199254740992.0  # 2**-53

ONE_EXPONENT_BITS = 0x3FF << 52
MANTISSA_MASK = (1 << 52) - 1


def as_int32(x: int) -> int:
    """Two's-complement view of the low 32 bits of x, like a C (int) cast."""
    word = np.array([x & MASK32], dtype=np.uint32)
    return int(word.view(np.int32)[0])


def bits_to_double(bits: int) -> float:
    """Reinterpret a 64-bit pattern as a binary64 value."""
    word = np.array([bits & MASK64], dtype=np.uint64)
    return float(word.view(np.float64)[0])


def double_bits(value: float) -> int:
    """Binary64 encoding of value as an unsigned 64-bit integer."""
    word = np.array([value], dtype=np.float64)
    return int(word.view(np.uint64)[0])


def combine_words(high: int, low: int) -> int:
    """Pack two 32-bit outputs into one 64-bit word (high first)."""
    return ((high & MASK32) << 32) | (low & MASK32)


def to_double_multiplicative(x: int) -> float:
    """Top 53 bits of x scaled by 2**-53. Result is in [0, 1)."""
    return ((x & MASK64) >> 11) * INV_2_53


def to_double_bitcast(x: int) -> float:
    """
    Top 52 bits of x as the mantissa of a double in [1, 2), minus 1.0.

    Sign bit is 0 and the biased exponent is 0x3FF, so the intermediate
    value is always in [1, 2) and the result in [0, 1).
    """
    mantissa = ((x & MASK64) >> 12) & MANTISSA_MASK
    return bits_to_double(ONE_EXPONENT_BITS | mantissa) - 1.0


def to_double_doornik32(i_ran1: int) -> float:
    """RANDBL_32: 32 bits of entropy, result in [0, 1)."""
    return as_int32(i_ran1) * M_RAN_INVM32 + 0.5


def to_double_doornik32_no_zero(i_ran1: int) -> float:
    """RANDBL_32_NO_ZERO: like randbl32, shifted by half a step so 0 is excluded."""
    return as_int32(i_ran1) * M_RAN_INVM32 + (0.5 + M_RAN_INVM32 / 2)


def to_double_doornik52(i_ran1: int, i_ran2: int) -> float:
    """
    RANDBL_52_NO_ZERO: 52 bits of entropy from two 32-bit draws.

    i_ran1 supplies the high 32 bits, the low 20 bits of i_ran2 the rest.
    Evaluation order matches the C macro (left to right).
    """
    return (as_int32(i_ran1) * M_RAN_INVM32
            + (0.5 + M_RAN_INVM52 / 2)
            + as_int32(i_ran2 & 0x000FFFFF) * M_RAN_INVM52)
