"""
Numeric helpers for calculation modules.

Guarded division, input checks and half-up rounding. Python's built-in
round() uses banker's rounding, which would shift published figures such as
CLV totals and demographic percentages by one on exact halves.
"""

import math
from typing import Any, Optional

from ..errors import DivisionByZeroError, InvalidInputError


def safe_divide(numerator: float, denominator: float, denominator_name: str = "denominator") -> float:
    """
    Divide two numbers, raising instead of returning Infinity/NaN.

    Args:
        numerator: Dividend
        denominator: Divisor
        denominator_name: Name of the divisor used in the error message

    Returns:
        numerator / denominator

    Raises:
        DivisionByZeroError: If denominator is zero
    """
    if denominator == 0:
        raise DivisionByZeroError(
            f"Cannot divide by zero: {denominator_name} is 0",
            numerator=numerator,
            denominator=denominator_name,
        )
    return numerator / denominator


def percentage(part: float, whole: float, whole_name: str = "whole") -> float:
    """Return part as a percentage of whole (0-100 scale, not clamped)."""
    return safe_divide(part, whole, whole_name) * 100


def require_finite(value: Any, field: str) -> float:
    """Ensure value is a real, finite number and return it as float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{field} must be a number, got {type(value).__name__}",
                                field=field, value=value)
    if math.isnan(value) or math.isinf(value):
        raise InvalidInputError(f"{field} must be finite, got {value}", field=field, value=value)
    return float(value)


def require_non_negative(value: Any, field: str) -> float:
    """Ensure value is finite and >= 0."""
    value = require_finite(value, field)
    if value < 0:
        raise InvalidInputError(f"{field} must be non-negative, got {value}", field=field, value=value)
    return value


def require_positive(value: Any, field: str) -> float:
    """Ensure value is finite and > 0."""
    value = require_finite(value, field)
    if value <= 0:
        raise InvalidInputError(f"{field} must be positive, got {value}", field=field, value=value)
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    # floor(value + 0.5) would round the largest double below 0.5 up
    lower = math.floor(value)
    return lower + 1 if value - lower >= 0.5 else lower


def round_to(value: float, decimals: int = 2) -> float:
    """Round to a fixed number of decimals using half-up semantics."""
    factor = 10 ** decimals
    return round_half_up(value * factor) / factor


def clamp(value: float, lower: float = 0.0, upper: Optional[float] = 1.0) -> float:
    """Clamp value into [lower, upper]; upper=None leaves it unbounded."""
    value = max(lower, value)
    if upper is not None:
        value = min(upper, value)
    return value
