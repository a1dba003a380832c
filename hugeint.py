"""
Fixed-capacity huge integers.

A HugeInt is a fixed-length list of N unsigned base-2^32 limbs, least
significant limb first:

    index  | ... |    3     |    2     |    1     |    0     |
    value  | ... | (2^32)^3 | (2^32)^2 | (2^32)^1 | (2^32)^0 |

Negative integers are stored as their radix complement, i.e. -x is kept
as (2^32)^N - x, so the sign is simply the high bit of the top limb and
addition needs no sign handling at all.  N is fixed by the value's
Capacity; nothing ever grows, and results that leave the representable
range wrap modulo (2^32)^N without any signal.

Division and modulo truncate toward zero and the remainder takes the
dividend's sign (the C convention, and what decimal.Decimal does for
``//`` and ``%``).

Decision branches of the long division are annotated with branch-IDs so
the white-box tests can trace coverage back to them.
"""

from __future__ import annotations

import math
import re
from typing import IO, Union

from capacity import (
    DEFAULT,
    HALF_BASE,
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    Capacity,
)


_DECIMAL_DIGITS = re.compile(r"[0-9]+")
_LOG10_BASE = LIMB_BITS * math.log10(2)

Operand = Union["HugeInt", int]


class InvalidFormatError(ValueError):
    """Raised when text is not an optionally signed run of decimal digits."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {text!r}")


def _significant_length(limbs: list[int]) -> int:
    """Number of limbs left after dropping leading (high) zero limbs."""
    n = len(limbs)
    while n > 0 and limbs[n - 1] == 0:
        n -= 1
    return n


def _read_token(stream: IO[str]) -> str:
    """Read one whitespace-delimited token, skipping leading whitespace."""
    chars: list[str] = []
    while True:
        ch = stream.read(1)
        if not ch:
            break
        if ch.isspace():
            if chars:
                break
            continue
        chars.append(ch)
    return "".join(chars)


class HugeInt:
    """
    Signed integer of fixed capacity with exact wrap-around arithmetic.

    Build one from an int, from decimal text (``"-1234"``, ``"+5"``) or
    by copying another HugeInt.  Binary operators accept another HugeInt
    of the same capacity or a plain int and always return a new value;
    compound assignment mutates the left operand in place.
    """

    __slots__ = ("_limbs", "_capacity")

    # Mutable: += and friends rewrite the limbs in place.
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        value: int | str | HugeInt = 0,
        *,
        capacity: Capacity | None = None,
    ) -> None:
        if isinstance(value, HugeInt):
            if capacity is not None and capacity != value._capacity:
                raise ValueError(
                    f"cannot copy a {value._capacity.num_limbs}-limb value "
                    f"into {capacity.num_limbs} limbs"
                )
            self._capacity = value._capacity
            self._limbs = list(value._limbs)
            return

        self._capacity = capacity if capacity is not None else DEFAULT
        self._limbs = [0] * self._capacity.num_limbs

        if isinstance(value, str):
            self._assign_decimal(value)
        elif isinstance(value, int):
            self._assign_int(value)
        else:
            raise TypeError(
                f"cannot build a HugeInt from {type(value).__name__}"
            )

    @classmethod
    def _from_limbs(cls, limbs: list[int], capacity: Capacity) -> HugeInt:
        value = cls.__new__(cls)
        value._limbs = limbs
        value._capacity = capacity
        return value

    # -- construction -------------------------------------------------------

    def _assign_int(self, value: int) -> None:
        # Successively peel off units, 2^32's, (2^32)^2's, ... into
        # limbs 0, 1, 2, ...; whatever does not fit is dropped.
        magnitude = abs(value)
        limbs = self._limbs
        i = 0
        while magnitude > 0 and i < len(limbs):
            limbs[i] = magnitude & LIMB_MASK
            magnitude >>= LIMB_BITS
            i += 1

        if value < 0:
            self._radix_complement()

    def _assign_decimal(self, text: str) -> None:
        if not text:
            raise InvalidFormatError(text, "empty decimal string")

        digits = text
        negative = False
        if digits[0] in "+-":
            negative = digits[0] == "-"
            digits = digits[1:]

        if not digits:
            raise InvalidFormatError(text, "no decimal digits after sign")
        if not _DECIMAL_DIGITS.fullmatch(digits):
            raise InvalidFormatError(text, "string contains non-digit")

        # Walk the digits right to left, adding digit * 10^i for each.
        number = HugeInt(capacity=self._capacity)
        power_of_ten = HugeInt(1, capacity=self._capacity)
        for ch in reversed(digits):
            digit = ord(ch) - ord("0")
            if digit:
                number += power_of_ten._short_multiply(digit)
            power_of_ten = power_of_ten._short_multiply(10)

        if negative:
            number._radix_complement()

        self._limbs = number._limbs

    @classmethod
    def from_string(cls, text: str, *, capacity: Capacity | None = None) -> HugeInt:
        """Parse ``[+|-]digits``; raises InvalidFormatError otherwise."""
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        return cls(text, capacity=capacity)

    @classmethod
    def read(cls, stream: IO[str], *, capacity: Capacity | None = None) -> HugeInt:
        """Read the next whitespace-delimited token of ``stream`` as a HugeInt."""
        return cls.from_string(_read_token(stream), capacity=capacity)

    @classmethod
    def minimum(cls, capacity: Capacity | None = None) -> HugeInt:
        """Smallest representable value, -(2^32)^N / 2."""
        value = cls(capacity=capacity)
        value._limbs[-1] = HALF_BASE
        return value

    @classmethod
    def maximum(cls, capacity: Capacity | None = None) -> HugeInt:
        """Largest representable value, (2^32)^N / 2 - 1."""
        value = cls.minimum(capacity)
        value -= 1
        return value

    def copy(self) -> HugeInt:
        return HugeInt._from_limbs(list(self._limbs), self._capacity)

    __copy__ = copy

    # -- representation -----------------------------------------------------

    @property
    def capacity(self) -> Capacity:
        return self._capacity

    @property
    def limbs(self) -> tuple[int, ...]:
        """The base-2^32 limbs, least significant first."""
        return tuple(self._limbs)

    def is_zero(self) -> bool:
        return not any(self._limbs)

    def is_negative(self) -> bool:
        return self._limbs[-1] >= HALF_BASE

    def _radix_complement(self) -> HugeInt:
        """Replace self by its additive inverse modulo (2^32)^N.

        The minimum value is its own complement.
        """
        limbs = self._limbs
        partial = 1
        for i, limb in enumerate(limbs):
            partial += LIMB_MASK - limb
            limbs[i] = partial & LIMB_MASK
            partial >>= LIMB_BITS
        return self

    def _shift_left_limbs(self, count: int) -> HugeInt:
        """Shift limbs ``count`` places toward the top, zero-filling."""
        limbs = self._limbs
        size = len(limbs)
        if count >= size:
            limbs[:] = [0] * size
        elif count > 0:
            limbs[count:] = limbs[: size - count]
            limbs[:count] = [0] * count
        return self

    # -- single-limb primitives ---------------------------------------------

    def _short_multiply(self, multiplier: int) -> HugeInt:
        """Multiply by a single limb, 0 <= multiplier < 2^32.

        Assumes self is non-negative; nothing is checked.
        """
        limbs = self._limbs
        product = [0] * len(limbs)
        used = _significant_length(limbs)

        partial = 0
        for i in range(used):
            partial += limbs[i] * multiplier
            product[i] = partial & LIMB_MASK
            partial >>= LIMB_BITS

        # The carry out of the last significant limb is below 2^32.
        if used < len(product):
            product[used] = partial

        return HugeInt._from_limbs(product, self._capacity)

    def _short_divide(self, divisor: int) -> tuple[HugeInt, int]:
        """Divide by a single limb, 0 < divisor < 2^32.

        Returns (quotient, remainder).  Assumes self is non-negative;
        nothing is checked.
        """
        limbs = self._limbs
        quotient = [0] * len(limbs)

        remainder = 0
        for i in range(_significant_length(limbs) - 1, -1, -1):
            remainder = (remainder << LIMB_BITS) | limbs[i]
            quotient[i], remainder = divmod(remainder, divisor)

        return HugeInt._from_limbs(quotient, self._capacity), remainder

    # -- operand handling ---------------------------------------------------

    def _coerce(self, other: object) -> HugeInt:
        if isinstance(other, HugeInt):
            if other._capacity != self._capacity:
                raise ValueError(
                    f"capacity mismatch: {self._capacity.num_limbs} limbs "
                    f"vs {other._capacity.num_limbs} limbs"
                )
            return other
        if isinstance(other, int):
            return HugeInt(other, capacity=self._capacity)
        return NotImplemented

    # -- arithmetic ---------------------------------------------------------

    def _add(self, other: HugeInt) -> HugeInt:
        total = [0] * len(self._limbs)
        partial = 0
        for i, (x, y) in enumerate(zip(self._limbs, other._limbs)):
            partial += x + y
            total[i] = partial & LIMB_MASK
            partial >>= LIMB_BITS
        # carry out of the top limb is discarded
        return HugeInt._from_limbs(total, self._capacity)

    def _accumulate(self, other: HugeInt) -> None:
        """In-place ``self += other``; stops once addend and carry run out."""
        limbs = self._limbs
        addend = other._limbs
        size = len(limbs)
        stop = _significant_length(addend)

        partial = 0
        i = 0
        while i < size and (i < stop or partial):
            partial += limbs[i] + addend[i]
            limbs[i] = partial & LIMB_MASK
            partial >>= LIMB_BITS
            i += 1

    def _multiply(self, other: HugeInt) -> HugeInt:
        # The residue modulo (2^32)^N is the same whether we multiply the
        # raw complements or the magnitudes, so work with the magnitudes.
        negative = self.is_negative() != other.is_negative()
        multiplicand = abs(self)
        multiplier = abs(other)
        if _significant_length(multiplier._limbs) > _significant_length(multiplicand._limbs):
            multiplicand, multiplier = multiplier, multiplicand

        product = HugeInt(capacity=self._capacity)
        for i, limb in enumerate(multiplier._limbs):
            if limb:
                product += multiplicand._short_multiply(limb)._shift_left_limbs(i)

        if negative:
            product._radix_complement()
        return product

    def _divmod(self, divisor: HugeInt) -> tuple[HugeInt, HugeInt]:
        """Truncating division; the remainder follows the dividend's sign.

        Division by zero is not checked.
        """
        dividend_negative = self.is_negative()
        divisor_negative = divisor.is_negative()

        quotient, remainder = _unsigned_divide(abs(self), abs(divisor))

        if dividend_negative != divisor_negative:
            quotient._radix_complement()
        if dividend_negative:
            remainder._radix_complement()
        return quotient, remainder

    def __neg__(self) -> HugeInt:
        return self.copy()._radix_complement()

    def __pos__(self) -> HugeInt:
        return self.copy()

    def __abs__(self) -> HugeInt:
        return -self if self.is_negative() else self.copy()

    def __add__(self, other: Operand) -> HugeInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._add(other)

    __radd__ = __add__

    def __sub__(self, other: Operand) -> HugeInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._add(-other)

    def __rsub__(self, other: int) -> HugeInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._add(-self)

    def __mul__(self, other: Operand) -> HugeInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._multiply(other)

    __rmul__ = __mul__

    def __floordiv__(self, other: Operand) -> HugeInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._divmod(other)[0]

    def __rfloordiv__(self, other: int) -> HugeInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._divmod(self)[0]

    def __mod__(self, other: Operand) -> HugeInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._divmod(other)[1]

    def __rmod__(self, other: int) -> HugeInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._divmod(self)[1]

    def __divmod__(self, other: Operand) -> tuple[HugeInt, HugeInt]:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._divmod(other)

    def __rdivmod__(self, other: int) -> tuple[HugeInt, HugeInt]:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._divmod(self)

    # -- compound assignment (in place) -------------------------------------

    def __iadd__(self, other: Operand) -> HugeInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        self._accumulate(other)
        return self

    def __isub__(self, other: Operand) -> HugeInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        self._accumulate(-other)
        return self

    def __imul__(self, other: Operand) -> HugeInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        self._limbs = self._multiply(other)._limbs
        return self

    def __ifloordiv__(self, other: Operand) -> HugeInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        self._limbs = self._divmod(other)[0]._limbs
        return self

    def __imod__(self, other: Operand) -> HugeInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        self._limbs = self._divmod(other)[1]._limbs
        return self

    # -- comparison ---------------------------------------------------------
    #
    # Everything goes through subtraction, so near the extremes of the
    # range, where a - b itself wraps, the ordering is not reliable.

    def __eq__(self, other: object) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return (other - self).is_zero()

    def __lt__(self, other: Operand) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return (self - other).is_negative()

    def __gt__(self, other: Operand) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return (other - self).is_negative()

    def __le__(self, other: Operand) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not (other - self).is_negative()

    def __ge__(self, other: Operand) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not (self - other).is_negative()

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -- conversion ---------------------------------------------------------

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = (value << LIMB_BITS) | limb
        if self.is_negative():
            value -= self._capacity.modulus
        return value

    def __float__(self) -> float:
        """Approximate value; may be +/-inf for large magnitudes."""
        magnitude = abs(self)
        total = 0.0
        power = 1.0
        for limb in magnitude._limbs:
            # skip zeros so an overflowed power never meets 0 * inf
            if limb:
                total += limb * power
            power *= LIMB_BASE
        return -total if self.is_negative() else total

    def _approximate_log10(self) -> float:
        """log10(|self|) from the top three significant limbs."""
        limbs = abs(self)._limbs
        top = _significant_length(limbs) - 1
        lowest = max(top - 2, 0)

        lead = 0.0
        for i in range(top, lowest - 1, -1):
            lead = lead * LIMB_BASE + limbs[i]
        return math.log10(lead) + lowest * _LOG10_BASE

    def num_decimal_digits(self) -> int:
        """
        Number of decimal digits, estimated as ceil(log10(|x|)).

        Values sitting exactly on (or extremely near) a power of ten can
        be miscounted: 100 reports 2.
        """
        if -10 < self < 10:
            return 1
        return math.ceil(self._approximate_log10())

    def to_decimal_string(self) -> str:
        """Decimal text with comma-separated thousands, e.g. ``-1,234,567``."""
        if self.is_zero():
            return "0"

        sign = "-" if self.is_negative() else ""
        magnitude = abs(self)

        groups: list[int] = []
        while not magnitude.is_zero():
            magnitude, group = magnitude._short_divide(1000)
            groups.append(group)

        head = str(groups[-1])
        tail = "".join(f",{group:03d}" for group in reversed(groups[:-1]))
        return sign + head + tail

    def to_raw_string(self) -> str:
        """Limbs as zero-padded decimals, most significant first."""
        used = _significant_length(self._limbs)
        if used == 0:
            return "0"
        return " ".join(f"{self._limbs[i]:010d}" for i in range(used - 1, -1, -1))

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        digits = self.to_decimal_string().replace(",", "")
        if self._capacity == DEFAULT:
            return f"HugeInt('{digits}')"
        return f"HugeInt('{digits}', capacity={self._capacity!r})"


# ---------------------------------------------------------------------------
# Long division
# ---------------------------------------------------------------------------

def _normalize(limbs: list[int], shifts: int) -> list[int]:
    """Shift ``limbs`` left by ``shifts`` bits, appending the overflow limb."""
    shifted: list[int] = []
    carry = 0
    for limb in limbs:
        wide = (limb << shifts) | carry
        shifted.append(wide & LIMB_MASK)
        carry = wide >> LIMB_BITS
    shifted.append(carry)
    return shifted


def _unsigned_divide(dividend: HugeInt, divisor: HugeInt) -> tuple[HugeInt, HugeInt]:
    """
    Unsigned division of a by b: quotient q and remainder r with

        a = q * b + r,    0 <= r < b

    Both operands are read as unsigned limb strings: a >= 0 and b > 0
    are the caller's responsibility and are not checked.  A single-limb
    divisor uses short division; otherwise Knuth's Algorithm D.

    Branches: DIV-SMALL-DIVIDEND, DIV-SHORT, DIV-NORMALIZE,
              DIV-QHAT-CLAMP, DIV-QHAT-REFINE, DIV-ADD-BACK
    """
    capacity = dividend.capacity
    size = capacity.num_limbs
    u = dividend._limbs
    v = divisor._limbs

    n = _significant_length(v)
    m = _significant_length(u)

    if m < n:                                                   # DIV-SMALL-DIVIDEND
        return HugeInt(capacity=capacity), dividend.copy()

    if n < 2:                                                   # DIV-SHORT
        quotient, remainder = dividend._short_divide(v[0])
        return quotient, HugeInt(remainder, capacity=capacity)

    # Scale both operands by 2^shifts so the divisor's top limb has its
    # high bit set; then qhat overestimates the true digit by at most 2.
    shifts = LIMB_BITS - v[n - 1].bit_length()                  # DIV-NORMALIZE
    vn = _normalize(v[:n], shifts)[:n]
    un = _normalize(u[:m], shifts)        # m + 1 limbs, top one the guard

    top = vn[n - 1]
    second = vn[n - 2]
    quotient = [0] * size

    for k in range(m - n, -1, -1):
        # Estimate from the top two window limbs over the top divisor limb.
        qhat, rhat = divmod((un[k + n] << LIMB_BITS) | un[k + n - 1], top)

        if qhat >= LIMB_BASE:                                   # DIV-QHAT-CLAMP
            excess = qhat - LIMB_MASK
            qhat -= excess
            rhat += excess * top

        while rhat < LIMB_BASE and (                            # DIV-QHAT-REFINE
            qhat * second > (rhat << LIMB_BITS) + un[k + n - 2]
        ):
            qhat -= 1
            rhat += top

        # Subtract qhat * divisor from the window un[k .. k+n].  The
        # overwritten limbs accumulate into the remainder.
        borrow = 0
        for i in range(n):
            product = qhat * vn[i]
            wide = un[k + i] - borrow - (product & LIMB_MASK)
            un[k + i] = wide & LIMB_MASK
            borrow = (product >> LIMB_BITS) - (wide >> LIMB_BITS)
        wide = un[k + n] - borrow
        un[k + n] = wide & LIMB_MASK

        if wide < 0:                                            # DIV-ADD-BACK
            # qhat was one too large: undo one divisor's worth.
            qhat -= 1
            carry = 0
            for i in range(n):
                wide = un[k + i] + vn[i] + carry
                un[k + i] = wide & LIMB_MASK
                carry = wide >> LIMB_BITS
            un[k + n] = (un[k + n] + carry) & LIMB_MASK

        quotient[k] = qhat

    # Undo the normalization; the remainder lives in un[0 .. n-1].
    remainder = [0] * size
    back = LIMB_BITS - shifts
    for i in range(n):
        remainder[i] = ((un[i] >> shifts) | (un[i + 1] << back)) & LIMB_MASK

    return (
        HugeInt._from_limbs(quotient, capacity),
        HugeInt._from_limbs(remainder, capacity),
    )
