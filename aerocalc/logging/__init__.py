"""
Logging configuration and utilities for the aerocalc library.
"""
from .config import configure_logging, get_logger, log_calculation

__all__ = ["configure_logging", "get_logger", "log_calculation"]
