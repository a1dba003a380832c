"""Application factory and entry point.

Run with:
    uvicorn app:app --reload
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from api import router, set_calculator
from calculator import HugeIntCalculator
from capacity import Capacity, DEFAULT
from factory import HugeIntFactory

logger = logging.getLogger(__name__)


def create_app(
    calculator: HugeIntCalculator | None = None,
    capacity: Capacity | None = None,
) -> FastAPI:
    """Build and return the FastAPI application.

    Accepts an optional calculator for testing; otherwise the factory
    builds and verifies one for ``capacity`` (default 300 limbs).
    """
    if calculator is None:
        calculator = HugeIntFactory.create(capacity if capacity is not None else DEFAULT)

    set_calculator(calculator)

    app = FastAPI(
        title="HugeInt API",
        description=(
            "Exact arithmetic on fixed-capacity signed integers. Operands and "
            "results travel as decimal text; results that leave the "
            "representable range wrap around without error."
        ),
        version="0.1.0",
    )
    app.include_router(router)
    logger.info("serving %d-limb integers", calculator.capacity.num_limbs)
    return app


# Default app instance for `uvicorn app:app`
app = create_app()
