"""Shortcut for building a comparison configuration."""

from .config import HumanSortConfig


def create_default_config(**overrides) -> HumanSortConfig:
    """Build a HumanSortConfig, replacing only the fields passed in.

    Unknown field names raise TypeError. Bad values raise ConfigurationError.

    Example:
        create_default_config(digits="unicode")  # still case-insensitive
    """
    return HumanSortConfig(**overrides)
