"""
numfuncs: summation and ascending sort of numbers
"""

from numfuncs._version import __version__
from numfuncs.config import Config, OutputConfig, ValidationConfig, load_config
from numfuncs.functions import addition, sort, sort_async
from numfuncs.validation import NonFiniteInputError, NumericInputError, ValidationMode

__all__ = [
    "__version__",
    # Functions
    "addition",
    "sort",
    "sort_async",
    # Configuration
    "Config",
    "OutputConfig",
    "ValidationConfig",
    "load_config",
    # Validation
    "ValidationMode",
    "NumericInputError",
    "NonFiniteInputError",
]
