"""Tests for config module"""

import os

import pytest
from pydantic import ValidationError

from didyoumean.config import Config, get_config
from didyoumean.consts import INTERNAL_NAMES
from didyoumean.models import TieBreak


class TestConfig:
    """Test Config class functionality"""

    def test_config_defaults_and_creation(self, clean_config):
        """Test config creation and default values"""
        assert clean_config.log_level == "WARNING"
        assert clean_config.tie_break == TieBreak.DISCOVERY
        assert clean_config.include_reserved is True
        assert clean_config.excluded_names == []
        assert clean_config.all_excluded_names == INTERNAL_NAMES

    def test_config_validation(self):
        """Test that config validation works"""
        with pytest.raises(ValidationError):
            Config(log_level="not-a-log-level")

    def test_config_env_override(self, clean_env):
        """Test environment variable override"""
        os.environ["DIDYOUMEAN_TIE_BREAK"] = "lexical"
        os.environ["DIDYOUMEAN_INCLUDE_RESERVED"] = "false"

        config = Config()
        assert config.tie_break == TieBreak.LEXICAL
        assert config.include_reserved is False

    def test_excluded_names_from_env(self, clean_env):
        """Test list settings are read as JSON"""
        os.environ["DIDYOUMEAN_EXCLUDED_NAMES"] = '["debug_helper", "tmp"]'

        config = Config()
        assert config.excluded_names == ["debug_helper", "tmp"]
        assert {"debug_helper", "tmp"} <= config.all_excluded_names
        assert INTERNAL_NAMES <= config.all_excluded_names

    def test_config_custom_values(self, clean_env):
        """Test creating config with custom values"""
        config = Config(
            log_level="DEBUG",
            tie_break="lexical",
            include_reserved=False,
        )
        assert config.log_level == "DEBUG"
        assert config.tie_break == TieBreak.LEXICAL
        assert config.include_reserved is False

    @pytest.mark.parametrize("log_level", ["DEBUG", "INFO", "WARNING", "ERROR"])
    def test_valid_log_levels(self, log_level):
        """Test that all valid log levels are accepted"""
        config = Config(log_level=log_level)
        assert config.log_level == log_level

    @pytest.mark.parametrize(
        "invalid_level", ["TRACE", "debug", "info", "FATAL", "NONE"]
    )
    def test_invalid_log_levels(self, invalid_level):
        """Test that invalid log levels are rejected"""
        with pytest.raises(ValidationError):
            Config(log_level=invalid_level)

    def test_invalid_tie_break(self):
        """Test unknown tie-break policies are rejected"""
        with pytest.raises(ValidationError):
            Config(tie_break="random")

    def test_get_config_cached(self):
        """Test get_config returns the same instance"""
        assert get_config() is get_config()
