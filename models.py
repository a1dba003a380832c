"""Request and response models for the HugeInt HTTP API.

Operands travel as decimal text so that values far beyond the range of
JSON numbers survive the round trip.  This module defines the data
models only -- no arithmetic.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from hugeint import HugeInt


DECIMAL_PATTERN = r"^[+-]?[0-9]+$"

# A little above the default capacity's 2890 digits.
MAX_OPERAND_LENGTH = 4096


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class Operation(str, Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"


def _operand_field() -> Any:
    return Field(
        ...,
        min_length=1,
        max_length=MAX_OPERAND_LENGTH,
        pattern=DECIMAL_PATTERN,
        description="Decimal integer with optional sign, e.g. '-1234'",
    )


class BinaryRequest(BaseModel):
    """Apply ``op`` to ``a`` and ``b``."""

    op: Operation
    a: str = _operand_field()
    b: str = _operand_field()


class CompareRequest(BaseModel):
    a: str = _operand_field()
    b: str = _operand_field()


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class ValueResponse(BaseModel):
    """A HugeInt rendered every way the type knows how."""

    decimal: str = Field(..., description="Comma-grouped decimal text")
    raw: str = Field(..., description="Base-2^32 limbs, most significant first")
    digits: int = Field(..., ge=1)
    approximate: float | None = Field(
        default=None,
        description="Floating approximation; null when it overflows",
    )
    negative: bool

    @classmethod
    def from_value(cls, value: HugeInt) -> ValueResponse:
        approx = float(value)
        return cls(
            decimal=value.to_decimal_string(),
            raw=value.to_raw_string(),
            digits=value.num_decimal_digits(),
            approximate=approx if math.isfinite(approx) else None,
            negative=value.is_negative(),
        )


class CompareResponse(BaseModel):
    result: int = Field(..., ge=-1, le=1, description="-1, 0 or 1")
    a: str
    b: str


class LimitsResponse(BaseModel):
    """Representable range of the configured capacity."""

    num_limbs: int
    minimum: str
    maximum: str
    max_decimal_digits: int
    factorial_limit: int
    fibonacci_limit: int
