"""
Error classification for aviation calculations.

Calculation functions raise these instead of propagating NaN or Infinity,
so callers can tell bad input apart from a legitimate numeric result.
"""

from .calculation import (
    CalculationError,
    InvalidInputError,
    DivisionByZeroError,
)
from .configuration import (
    ConfigurationError,
)

__all__ = [
    # Calculation Errors
    "CalculationError",
    "InvalidInputError",
    "DivisionByZeroError",
    # Configuration Errors
    "ConfigurationError",
]
