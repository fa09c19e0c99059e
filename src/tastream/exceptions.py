"""
Custom exceptions for the tastream package.
"""


class IndicatorError(Exception):
    """Base exception for tastream errors."""
    pass


class ConfigError(IndicatorError, ValueError):
    """Raised when an indicator or indicator configuration is invalid."""
    pass


class InvalidDataItemError(IndicatorError, ValueError):
    """Raised when a quote's fields are inconsistent (e.g. low above high)."""
    pass
