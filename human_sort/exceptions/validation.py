"""Validation-related exceptions."""

from .base import HumanSortException


class ConfigurationError(HumanSortException):
    """Raised when a configuration value is not supported."""

    pass
