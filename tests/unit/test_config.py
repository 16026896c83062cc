"""Tests for configuration classes."""

import dataclasses

import pytest

from human_sort.config import DigitClass, HumanSortConfig, create_default_config
from human_sort.exceptions import ConfigurationError, HumanSortException


class TestHumanSortConfig:
    """Tests for HumanSortConfig dataclass."""

    def test_defaults(self):
        config = HumanSortConfig()
        assert config.case_sensitive is False
        assert config.digits is DigitClass.ASCII

    def test_is_frozen(self):
        config = HumanSortConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.case_sensitive = True

    def test_string_digit_class_converted(self):
        assert HumanSortConfig(digits="unicode").digits is DigitClass.UNICODE
        assert HumanSortConfig(digits="ASCII").digits is DigitClass.ASCII

    def test_unknown_digit_class_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            HumanSortConfig(digits="roman")
        assert "roman" in str(exc_info.value)
        assert isinstance(exc_info.value, HumanSortException)

    def test_case_sensitive_must_be_bool(self):
        with pytest.raises(ConfigurationError):
            HumanSortConfig(case_sensitive="yes")

    def test_hashable_and_comparable(self):
        """Equal configs hash alike so comparators can be cached per config."""
        assert HumanSortConfig(digits="unicode") == HumanSortConfig(digits=DigitClass.UNICODE)
        assert hash(HumanSortConfig()) == hash(HumanSortConfig())


class TestCreateDefaultConfig:
    """Tests for create_default_config function."""

    def test_no_overrides(self):
        assert create_default_config() == HumanSortConfig()

    def test_with_overrides(self):
        config = create_default_config(case_sensitive=True, digits="unicode")
        assert config.case_sensitive is True
        assert config.digits is DigitClass.UNICODE

    def test_unknown_field_rejected(self):
        with pytest.raises(TypeError):
            create_default_config(locale="de_DE")
