"""
Summation of a variadic list of numbers
"""

import logging
from typing import Any

from numfuncs.config import ValidationConfig
from numfuncs.validation import check_numbers

logger = logging.getLogger(__name__)


def addition(*values: Any, validation: ValidationConfig | None = None) -> Any:
    """
    Sum zero or more numbers

    The total is accumulated left to right starting from ``0``, so integer
    arguments give an exact integer and float arguments follow IEEE-754
    rounding (compare fractional results with a tolerance).

    Args:
        *values: Numbers to add
        validation: Argument checking settings

    Returns:
        The sum, or ``0`` when called with no arguments
    """
    numbers = check_numbers(values, validation)
    logger.debug(f"Adding {len(numbers)} values")

    total = 0
    for value in numbers:
        total = total + value
    return total
