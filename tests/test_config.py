"""Tests for engine configuration management."""

import logging
import os
import tempfile
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from projection_engine.config import (
    Settings,
    configure_logging,
    get_global_settings,
    get_settings,
    reset_global_settings,
)


class TestSettings:
    """Test cases for Settings class."""

    def test_defaults(self):
        """Test default values without environment or .env file."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.app_env == "development"
        assert settings.log_level == "INFO"
        assert settings.cashflow_default_horizon_months == 12
        assert settings.max_horizon_months == 600

    def test_settings_loads_from_env_file(self):
        """Test that settings can load from a .env file."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".env", delete=False) as f:
            f.write("APP_ENV=testing\n")
            f.write("LOG_LEVEL=debug\n")
            f.write("CASHFLOW_DEFAULT_HORIZON_MONTHS=24\n")
            f.write("MAX_HORIZON_MONTHS=120\n")
            temp_env_file = f.name

        try:
            with patch.dict(os.environ, {}, clear=True):
                settings = get_settings(env_file=temp_env_file)

            assert settings.app_env == "testing"
            assert settings.log_level == "DEBUG"
            assert settings.cashflow_default_horizon_months == 24
            assert settings.max_horizon_months == 120
        finally:
            os.unlink(temp_env_file)

    def test_app_env_validation(self):
        """Test APP_ENV validation."""
        with patch.dict(os.environ, {"APP_ENV": "staging"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

        assert "APP_ENV must be one of" in str(exc_info.value)

    def test_log_level_validation(self):
        """Test LOG_LEVEL validation."""
        with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

        assert "LOG_LEVEL must be one of" in str(exc_info.value)

    def test_horizon_must_be_positive(self):
        """Test the default horizon must be at least one month."""
        with patch.dict(
            os.environ, {"CASHFLOW_DEFAULT_HORIZON_MONTHS": "0"}, clear=True
        ):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


class TestGlobalSettings:
    """Test cases for the global settings instance."""

    def test_global_settings_cached_and_reset(self):
        reset_global_settings()
        try:
            with patch.dict(os.environ, {"LOG_LEVEL": "WARNING"}, clear=True):
                first = get_global_settings()
                assert get_global_settings() is first
                assert first.log_level == "WARNING"

            reset_global_settings()
            with patch.dict(os.environ, {}, clear=True):
                assert get_global_settings() is not first
        finally:
            reset_global_settings()


class TestConfigureLogging:
    """Test cases for configure_logging."""

    def test_applies_log_level(self):
        package_logger = logging.getLogger("projection_engine")
        previous = package_logger.level
        try:
            with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}, clear=True):
                settings = Settings(_env_file=None)

            configured = configure_logging(settings)

            assert configured is package_logger
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous)
