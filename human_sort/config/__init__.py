"""Configuration management for Human Sort."""

from .config import DigitClass, HumanSortConfig
from .defaults import create_default_config

__all__ = ["DigitClass", "HumanSortConfig", "create_default_config"]
