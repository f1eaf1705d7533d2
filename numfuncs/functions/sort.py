"""
Ascending sort of a variadic list of numbers
"""

import logging
from typing import Any

from numfuncs.config import ValidationConfig
from numfuncs.validation import check_numbers, is_nan

logger = logging.getLogger(__name__)


def _order_key(value: Any) -> tuple[bool, Any]:
    # NaN compares false with everything, so it gets its own bucket at the end
    nan = is_nan(value)
    return (nan, 0 if nan else value)


def sort(*values: Any, validation: ValidationConfig | None = None) -> list[Any]:
    """
    Return the arguments as a new list in non-decreasing order

    The sort is stable, so equal values keep their call order. NaN values
    are placed after all other values.

    Args:
        *values: Numbers to sort
        validation: Argument checking settings

    Returns:
        A new sorted list; ``[]`` when called with no arguments
    """
    numbers = check_numbers(values, validation)
    logger.debug(f"Sorting {len(numbers)} values")
    return sorted(numbers, key=_order_key)


async def sort_async(*values: Any, validation: ValidationConfig | None = None) -> list[Any]:
    """Awaitable form of :func:`sort` for asynchronous callers. Does no I/O."""
    return sort(*values, validation=validation)
