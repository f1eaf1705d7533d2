"""
Input checking for the numeric helpers.

Strict mode type-checks every positional argument before any arithmetic
happens and normalizes NumPy scalars to plain Python numbers. Permissive mode
hands the arguments straight to Python's operators, so whatever they raise
(or return) is what the caller sees.
"""

import logging
import math
import numbers
from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from numfuncs.config import ValidationConfig

logger = logging.getLogger(__name__)


class ValidationMode(str, Enum):
    """How arguments are checked before computing"""

    STRICT = "strict"
    PERMISSIVE = "permissive"


class NumericInputError(TypeError):
    """An argument is not a real number"""

    def __init__(self, position: int, value: Any):
        self.position = position
        self.value = value
        super().__init__(
            f"argument {position} is not a real number: {value!r} ({type(value).__name__})"
        )


class NonFiniteInputError(ValueError):
    """An argument is NaN or infinite and the configuration disallows it"""

    def __init__(self, position: int, value: Any, kind: str):
        self.position = position
        self.value = value
        self.kind = kind
        super().__init__(f"argument {position} is {kind}, which is not allowed: {value!r}")


def is_nan(value: Any) -> bool:
    """NaN test for any accepted number type"""
    if isinstance(value, float):
        return math.isnan(value)
    # ints and Fractions are never NaN; comparing avoids float() overflow
    return value != value


def is_infinite(value: Any) -> bool:
    if isinstance(value, float):
        return math.isinf(value)
    return False


def _normalize(position: int, value: Any) -> Any:
    if isinstance(value, (bool, np.bool_)):
        raise NumericInputError(position, value)
    if isinstance(value, np.generic):
        if not isinstance(value, (np.integer, np.floating)):
            raise NumericInputError(position, value)
        return value.item()
    if isinstance(value, numbers.Real):
        return value
    raise NumericInputError(position, value)


def check_numbers(values: Iterable[Any], config: "ValidationConfig | None" = None) -> list[Any]:
    """
    Check and normalize a sequence of arguments

    Args:
        values: The positional arguments of an addition or sort call
        config: Validation settings; strict with NaN and infinities allowed if omitted

    Returns:
        A new list of the (normalized) values

    Raises:
        NumericInputError: A value is not a real number (strict mode only)
        NonFiniteInputError: A value is NaN or infinite and that is disallowed
    """
    if config is None:
        from numfuncs.config import ValidationConfig

        config = ValidationConfig()

    if ValidationMode(config.mode) is ValidationMode.PERMISSIVE:
        return list(values)

    checked = []
    for position, value in enumerate(values):
        try:
            value = _normalize(position, value)
        except NumericInputError:
            logger.debug(f"Rejected argument {position}: {value!r}")
            raise

        if not config.allow_nan and is_nan(value):
            raise NonFiniteInputError(position, value, "NaN")
        if not config.allow_infinity and is_infinite(value):
            raise NonFiniteInputError(position, value, "infinite")

        checked.append(value)

    return checked
