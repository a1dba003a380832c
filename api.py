"""FastAPI REST endpoints for HugeInt arithmetic.

Routes
------
POST   /integers/evaluate          Apply add, sub, mul, div or mod
POST   /integers/compare           Three-way comparison of two integers
GET    /integers/limits            Range of the configured capacity
GET    /integers/factorial/{n}     n! for bounded n
GET    /integers/fibonacci/{n}     n-th Fibonacci number for bounded n
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from calculator import HugeIntCalculator
from models import (
    BinaryRequest,
    CompareRequest,
    CompareResponse,
    LimitsResponse,
    Operation,
    ValueResponse,
)
from sequences import (
    factorial_iterative,
    factorial_limit,
    fibonacci_iterative,
    fibonacci_limit,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/integers", tags=["integers"])

# The calculator instance is injected by the app factory (see app.py).
_calculator: HugeIntCalculator | None = None


def set_calculator(calculator: HugeIntCalculator) -> None:
    """Inject the calculator instance. Called once at app startup."""
    global _calculator
    _calculator = calculator


def get_calculator() -> HugeIntCalculator:
    assert _calculator is not None, "Calculator not initialized"
    return _calculator


# ---------------------------------------------------------------------------
# Response helpers
# ---------------------------------------------------------------------------

def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=400, detail=detail)


def _check_argument(n: int, limit: int) -> None:
    if not 0 <= n <= limit:
        raise _bad_request(f"n must be between 0 and {limit}, got {n}")


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/evaluate", response_model=ValueResponse)
def evaluate(payload: BinaryRequest) -> ValueResponse:
    """Apply a binary operation; results wrap at the capacity."""
    calc = get_calculator()
    a = calc.parse(payload.a)
    b = calc.parse(payload.b)

    if payload.op in (Operation.DIV, Operation.MOD) and b.is_zero():
        raise _bad_request("division by zero")

    result = getattr(calc, payload.op.value)(a, b)
    logger.debug("evaluated %s on %d-limb operands", payload.op.value, calc.capacity.num_limbs)
    return ValueResponse.from_value(result)


@router.post("/compare", response_model=CompareResponse)
def compare(payload: CompareRequest) -> CompareResponse:
    """-1, 0 or 1; unreliable when a - b or b - a leaves the capacity."""
    calc = get_calculator()
    a = calc.parse(payload.a)
    b = calc.parse(payload.b)
    return CompareResponse(
        result=calc.compare(a, b),
        a=calc.format(a),
        b=calc.format(b),
    )


@router.get("/limits", response_model=LimitsResponse)
def limits() -> LimitsResponse:
    calc = get_calculator()
    capacity = calc.capacity
    return LimitsResponse(
        num_limbs=capacity.num_limbs,
        minimum=calc.format(calc.minimum()),
        maximum=calc.format(calc.maximum()),
        max_decimal_digits=capacity.max_decimal_digits,
        factorial_limit=factorial_limit(capacity),
        fibonacci_limit=fibonacci_limit(capacity),
    )


@router.get("/factorial/{n}", response_model=ValueResponse)
def factorial(n: int) -> ValueResponse:
    """n!, refused when it would not fit the capacity."""
    calc = get_calculator()
    _check_argument(n, factorial_limit(calc.capacity))
    return ValueResponse.from_value(factorial_iterative(n, calc.capacity))


@router.get("/fibonacci/{n}", response_model=ValueResponse)
def fibonacci(n: int) -> ValueResponse:
    """F(n), refused when it would not fit the capacity."""
    calc = get_calculator()
    _check_argument(n, fibonacci_limit(calc.capacity))
    return ValueResponse.from_value(fibonacci_iterative(n, calc.capacity))
