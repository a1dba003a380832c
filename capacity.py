"""
Capacity layer for fixed-size huge integers.

A Capacity defines the *domain* of a HugeInt: how many base-2^32 limbs
every value carries, and therefore which integers are representable.
Outside that range behaviour is explicit modular wrap-around - there is
no overflow signal.

This module also provides ``wrap``, the Python-int model of that
wrap-around, which the laws and tests use as their oracle.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


LIMB_BITS = 32
LIMB_BASE = 1 << LIMB_BITS   # 2^32
LIMB_MASK = LIMB_BASE - 1
HALF_BASE = LIMB_BASE >> 1   # top limb >= HALF_BASE means negative

DEFAULT_NUM_LIMBS = 300


@dataclass(frozen=True)
class Capacity:
    """
    A fixed number of base-2^32 limbs with radix-complement signs.

    With N limbs the representable integers are

        -(2^32)^N / 2  <=  x  <=  (2^32)^N / 2 - 1
    """

    num_limbs: int = DEFAULT_NUM_LIMBS

    def __post_init__(self):
        if self.num_limbs < 1:
            raise ValueError(f"num_limbs ({self.num_limbs}) must be >= 1")

    @property
    def bits(self) -> int:
        return self.num_limbs * LIMB_BITS

    @property
    def modulus(self) -> int:
        """(2^32)^N - arithmetic is exact modulo this value."""
        return 1 << self.bits

    @property
    def lo(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def hi(self) -> int:
        return (1 << (self.bits - 1)) - 1

    @property
    def width(self) -> int:
        """Total number of representable values."""
        return self.modulus

    @property
    def max_decimal_digits(self) -> int:
        """Number of decimal digits in ``hi``."""
        # hi = 2^(bits-1) - 1 never sits on a power of ten
        return math.floor((self.bits - 1) * math.log10(2)) + 1

    def contains(self, value: int) -> bool:
        return self.lo <= value <= self.hi

    def wrap(self, raw: int) -> int:
        """Reduce ``raw`` into [lo, hi] the way limb arithmetic does."""
        return self.lo + (raw - self.lo) % self.width


# ---------------------------------------------------------------------------
# Common capacity presets
# ---------------------------------------------------------------------------

INT32 = Capacity(num_limbs=1)
INT64 = Capacity(num_limbs=2)
INT128 = Capacity(num_limbs=4)
INT256 = Capacity(num_limbs=8)

# About 2890 decimal digits
DEFAULT = Capacity()
