"""
Configuration error classifications.

Raised when defaults, YAML profiles or call-time overrides cannot be turned
into a usable calculator configuration.
"""

from typing import Any, Optional


class ConfigurationError(Exception):
    """Invalid or unreadable configuration; requires fixing the source."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None,
                 source: Optional[str] = None):
        super().__init__(message)
        self.errors = errors or []
        self.source = source
        self.recoverable = False
