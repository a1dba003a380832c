"""White-box tests for HugeInt long division.

Each test class targets specific decision branches of
``hugeint._unsigned_divide`` (see the branch-id comments there).  A
coverage matrix at the bottom of this file records which test covers
which branch, enabling external tools to verify that every branch is
exercised.

Operands are chosen by hand so that the interesting branch fires at a
known quotient position; B below is the limb base 2^32.

Naming convention
-----------------
test_<branch_id_lowercase>_<scenario>
"""
from __future__ import annotations

import pytest

from capacity import INT64, INT128, LIMB_BASE
from hugeint import HugeInt, _normalize, _unsigned_divide

B = LIMB_BASE


def unsigned(a: int, b: int, capacity=INT128) -> tuple[int, int]:
    q, r = _unsigned_divide(
        HugeInt(a, capacity=capacity), HugeInt(b, capacity=capacity)
    )
    return int(q), int(r)


# ===================================================================
# SMALL DIVIDEND  (DIV-SMALL-DIVIDEND)
# ===================================================================

class TestSmallDividend:

    def test_div_small_dividend_fewer_limbs(self):
        """Branch: DIV-SMALL-DIVIDEND: dividend has fewer limbs than divisor."""
        assert unsigned(5, 2**40) == (0, 5)

    def test_div_small_dividend_zero(self):
        """Branch: DIV-SMALL-DIVIDEND: zero dividend, multi-limb divisor."""
        assert unsigned(0, 2**70) == (0, 0)

    def test_div_small_dividend_remainder_is_copy(self):
        a = HugeInt(5, capacity=INT128)
        _, r = _unsigned_divide(a, HugeInt(2**40, capacity=INT128))
        assert r is not a


# ===================================================================
# SHORT DIVISION  (DIV-SHORT)
# ===================================================================

class TestShortDivision:

    def test_div_short_single_limb_divisor(self):
        """Branch: DIV-SHORT: divisor fits one limb."""
        assert unsigned(10**20, 7) == divmod(10**20, 7)

    def test_div_short_full_limb_divisor(self):
        """Branch: DIV-SHORT: divisor is B - 1."""
        a = 3 * B**3 + 17
        assert unsigned(a, B - 1) == divmod(a, B - 1)

    def test_div_short_by_one(self):
        assert unsigned(2**100 + 1, 1) == (2**100 + 1, 0)

    def test_div_short_zero_divisor_raises(self):
        """Branch: DIV-SHORT: a zero divisor reaches the limb divide."""
        with pytest.raises(ZeroDivisionError):
            unsigned(5, 0)


# ===================================================================
# NORMALIZATION  (DIV-NORMALIZE)
# ===================================================================

class TestNormalization:

    def test_div_normalize_nonzero_shift(self):
        """Branch: DIV-NORMALIZE: divisor top limb 3 needs a 30-bit shift."""
        a = 10**30
        b = 3 * B + 5
        assert unsigned(a, b) == divmod(a, b)

    def test_div_normalize_zero_shift(self):
        """Branch: DIV-NORMALIZE: divisor top bit already set."""
        a = 2**120 + 12345
        b = 2**63 + 99
        assert unsigned(a, b) == divmod(a, b)

    def test_div_normalize_remainder_spans_limbs(self):
        a = 2**100 - 1
        b = 2**50 + 2**33 + 1
        q, r = unsigned(a, b)
        assert (q, r) == divmod(a, b)
        assert r >= B

    def test_normalize_appends_overflow_limb(self):
        assert _normalize([B - 1, 1], 1) == [B - 2, 3, 0]
        assert _normalize([1, B - 1], 4) == [16, B - 16, 15]
        assert _normalize([5, 7], 0) == [5, 7, 0]


# ===================================================================
# TRIAL QUOTIENT  (DIV-QHAT-CLAMP, DIV-QHAT-REFINE)
# ===================================================================

class TestTrialQuotient:

    # divisor limbs [B - 1, B/2]: top bit set, so no shift
    DIVISOR = 2**63 + 2**32 - 1

    def test_div_qhat_clamp(self):
        """Branch: DIV-QHAT-CLAMP: two-limb estimate reaches B + 1."""
        a = self.DIVISOR * B - 1
        assert unsigned(a, self.DIVISOR) == (B - 1, self.DIVISOR - 1)

    def test_div_qhat_refine(self):
        """Branch: DIV-QHAT-REFINE: estimate 1 at the top position drops to 0."""
        a = self.DIVISOR * B - 1
        q, r = unsigned(a, self.DIVISOR)
        assert q < B
        assert q * self.DIVISOR + r == a

    def test_div_qhat_refine_exact_quotient(self):
        a = self.DIVISOR * (B - 1)
        assert unsigned(a, self.DIVISOR) == (B - 1, 0)


# ===================================================================
# ADD BACK  (DIV-ADD-BACK)
# ===================================================================

class TestAddBack:

    def test_div_add_back(self):
        """Branch: DIV-ADD-BACK: qhat = 1 but divisor exceeds dividend."""
        a = 2**95
        b = 2**95 + 1
        assert unsigned(a, b) == (0, 2**95)

    def test_div_add_back_signed_wrapper(self):
        a = HugeInt(-(2**95), capacity=INT128)
        q, r = divmod(a, 2**95 + 1)
        assert q.is_zero()
        assert int(r) == -(2**95)


# ===================================================================
# SIGN HANDLING around the unsigned core
# ===================================================================

class TestSignHandling:

    @pytest.mark.parametrize("a, b", [
        (10**30, 3 * B + 5),
        (-(10**30), 3 * B + 5),
        (10**30, -(3 * B + 5)),
        (-(10**30), -(3 * B + 5)),
    ])
    def test_multi_limb_signs(self, a, b):
        q, r = divmod(HugeInt(a, capacity=INT128), b)
        expected_q = abs(a) // abs(b) * (1 if (a < 0) == (b < 0) else -1)
        assert int(q) == expected_q
        assert int(r) == a - expected_q * b

    def test_minimum_dividend_reads_as_magnitude(self):
        low = HugeInt.minimum(INT64)
        q, r = divmod(low, 3)
        assert int(q) == -(2**63 // 3)
        assert int(r) == -(2**63 % 3)


# ---------------------------------------------------------------------------
# Branch coverage matrix
# ---------------------------------------------------------------------------

BRANCH_COVERAGE = {
    "DIV-SMALL-DIVIDEND": [
        "TestSmallDividend::test_div_small_dividend_fewer_limbs",
        "TestSmallDividend::test_div_small_dividend_zero",
    ],
    "DIV-SHORT": [
        "TestShortDivision::test_div_short_single_limb_divisor",
        "TestShortDivision::test_div_short_full_limb_divisor",
        "TestShortDivision::test_div_short_zero_divisor_raises",
    ],
    "DIV-NORMALIZE": [
        "TestNormalization::test_div_normalize_nonzero_shift",
        "TestNormalization::test_div_normalize_zero_shift",
    ],
    "DIV-QHAT-CLAMP": [
        "TestTrialQuotient::test_div_qhat_clamp",
    ],
    "DIV-QHAT-REFINE": [
        "TestTrialQuotient::test_div_qhat_refine",
    ],
    "DIV-ADD-BACK": [
        "TestAddBack::test_div_add_back",
    ],
}
