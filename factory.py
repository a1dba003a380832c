"""
The HugeInt factory.

The factory does NOT just construct calculators - it *verifies* them
against their laws before releasing them.

Flow:
  1. Caller requests a calculator for a given Capacity.
  2. Factory builds the calculator.
  3. Factory runs every law set against the matching operation.
  4. If verification passes  -> return the calculator.
     If verification fails   -> raise, never hand out a broken instance.

No capacity is small enough to check exhaustively (even one limb spans
2^32 values), so the factory samples: every combination of the edge
values, then random values of random bit length.
"""

from __future__ import annotations

import inspect
import itertools
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Callable

from calculator import HugeIntCalculator
from capacity import Capacity, DEFAULT
from laws import (
    Law,
    LawSet,
    addition_laws,
    comparison_laws,
    conversion_laws,
    division_laws,
    multiplication_laws,
    subtraction_laws,
)

logger = logging.getLogger(__name__)


@dataclass
class VerificationResult:
    """Outcome of verifying one law."""

    law_name: str
    passed: bool
    counterexample: tuple | None = None
    tests_run: int = 0

    def __repr__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        ce = f"  counterexample={self.counterexample}" if self.counterexample else ""
        return f"[{status}] {self.law_name} ({self.tests_run} tests){ce}"


@dataclass
class VerificationReport:
    """Aggregate result of verifying an entire law set."""

    law_set_name: str
    results: list[VerificationResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    def summary(self) -> str:
        lines = [f"--- {self.law_set_name} ---"]
        for r in self.results:
            lines.append(f"  {r}")
        status = "ALL PASSED" if self.passed else "FAILED"
        lines.append(f"  => {status}")
        return "\n".join(lines)


class VerificationError(Exception):
    """Raised when a calculator fails one of its laws."""

    def __init__(self, report: VerificationReport):
        self.report = report
        super().__init__(f"Verification failed:\n{report.summary()}")


# ---------------------------------------------------------------------------
# The factory
# ---------------------------------------------------------------------------

class HugeIntFactory:
    """
    Produces HugeIntCalculator instances that have passed their laws.
    """

    SAMPLE_COUNT = 64      # samples per law, edge combinations included
    RANDOM_BITS_CAP = 512  # random samples stay cheap at large capacities

    @classmethod
    def create(
        cls,
        capacity: Capacity = DEFAULT,
        samples: int | None = None,
        seed: int | None = None,
    ) -> HugeIntCalculator:
        """Build, verify, and return a HugeIntCalculator."""
        calc = HugeIntCalculator(capacity=capacity)
        cls._verify_all(
            calc,
            count=samples if samples is not None else cls.SAMPLE_COUNT,
            rng=random.Random(seed),
        )
        logger.info("verified %d-limb calculator", capacity.num_limbs)
        return calc

    # -- internal ---------------------------------------------------------

    @classmethod
    def _law_sets(
        cls, calc: HugeIntCalculator
    ) -> list[tuple[LawSet, Callable[..., Any]]]:
        capacity = calc.capacity
        return [
            (addition_laws(capacity), calc.add),
            (subtraction_laws(capacity), calc.sub),
            (multiplication_laws(capacity), calc.mul),
            (division_laws(capacity), calc.divmod),
            (comparison_laws(capacity), calc.compare),
            (conversion_laws(capacity), calc.parse),
        ]

    @classmethod
    def _verify_all(
        cls, calc: HugeIntCalculator, count: int, rng: random.Random
    ) -> None:
        for law_set, op in cls._law_sets(calc):
            report = cls._verify_law_set(law_set, op, calc.capacity, count, rng)
            if not report.passed:
                logger.error("%s", report.summary())
                raise VerificationError(report)

    @classmethod
    def _verify_law_set(
        cls,
        law_set: LawSet,
        op: Callable[..., Any],
        capacity: Capacity,
        count: int,
        rng: random.Random,
    ) -> VerificationReport:
        report = VerificationReport(law_set_name=law_set.name)
        for law in law_set:
            result = cls._verify_law(law, op, capacity, count, rng)
            logger.debug("%s: %r", law_set.name, result)
            report.results.append(result)
        return report

    @classmethod
    def _verify_law(
        cls,
        law: Law,
        op: Callable[..., Any],
        capacity: Capacity,
        count: int,
        rng: random.Random,
    ) -> VerificationResult:
        arity = _predicate_arity(law)
        samples = _generate_samples(capacity, arity, count, rng, cls.RANDOM_BITS_CAP)

        tests_run = 0
        for combo in samples:
            tests_run += 1
            try:
                if not law.check(op, *combo):
                    return VerificationResult(
                        law_name=law.name,
                        passed=False,
                        counterexample=combo,
                        tests_run=tests_run,
                    )
            except ZeroDivisionError:
                # Division by zero is unchecked; whatever it does is not
                # a law violation.
                pass

        return VerificationResult(
            law_name=law.name,
            passed=True,
            tests_run=tests_run,
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _predicate_arity(law: Law) -> int:
    """
    Infer how many *value* arguments a law predicate expects
    (excluding the operation callable which is always the first arg).
    """
    sig = inspect.signature(law.predicate)
    return len(sig.parameters) - 1


def edge_values(capacity: Capacity) -> list[int]:
    """Values where carries, borrows and sign flips happen."""
    lo, hi = capacity.lo, capacity.hi
    return [lo, lo + 1, -1, 0, 1, hi - 1, hi]


def _generate_samples(
    capacity: Capacity,
    arity: int,
    count: int,
    rng: random.Random,
    bits_cap: int,
) -> list[tuple[int, ...]]:
    """Generate edge-case + random samples for law checking."""
    samples: list[tuple[int, ...]] = list(
        itertools.product(edge_values(capacity), repeat=arity)
    )

    max_bits = min(capacity.bits - 1, bits_cap)
    while len(samples) < count:
        combo = []
        for _ in range(arity):
            magnitude = rng.getrandbits(rng.randint(1, max_bits))
            combo.append(-magnitude if rng.random() < 0.5 else magnitude)
        samples.append(tuple(combo))

    return samples
