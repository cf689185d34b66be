"""
Calculation error classifications.

These exceptions describe inputs that a formula cannot evaluate to a finite,
meaningful number. They are recoverable: the caller fixes the input and
calls again.
"""

from typing import Any, Dict, Optional


class CalculationError(Exception):
    """Base class for failures while evaluating a calculation."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None,
                 metric_name: Optional[str] = None):
        super().__init__(message)
        self.context = context or {}
        self.metric_name = metric_name
        self.recoverable = True


class InvalidInputError(CalculationError):
    """An input value is outside the domain the formula accepts."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class DivisionByZeroError(InvalidInputError):
    """A denominator evaluated to zero."""

    def __init__(self, message: str, numerator: Optional[float] = None,
                 denominator: Optional[str] = None, **kwargs):
        super().__init__(message, field=denominator, value=0, **kwargs)
        self.numerator = numerator
        self.denominator = denominator
