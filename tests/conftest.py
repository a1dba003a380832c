"""Shared fixtures for HugeInt tests."""

from __future__ import annotations

import pytest

from calculator import HugeIntCalculator
from capacity import INT64, INT128
from factory import HugeIntFactory


@pytest.fixture
def calc64() -> HugeIntCalculator:
    return HugeIntCalculator(capacity=INT64)


@pytest.fixture
def calc128() -> HugeIntCalculator:
    return HugeIntCalculator(capacity=INT128)


@pytest.fixture
def verified_calc() -> HugeIntCalculator:
    """A factory-verified 4-limb calculator, seeded for repeatability."""
    return HugeIntFactory.create(INT128, seed=1234)
