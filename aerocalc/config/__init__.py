"""Configuration defaults, loading and validation for the calculators."""

from .defaults import CalculatorConfig, get_default_config
from .loader import ConfigLoader, build_config
from .validation import ConfigValidator, ValidationError

__all__ = [
    "CalculatorConfig",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
    "build_config",
    "get_default_config",
]
