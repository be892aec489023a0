"""Tests for configuration loading and overrides."""

import logging

import pydantic
import pytest
import structlog
import yaml

from oppr.core.config import DEFAULT_CONFIG, OPPRConfig, load_config
from oppr.core.errors import ConfigurationError, ValidationError
from oppr.core.logging import configure_logging


class TestDefaults:
    """Tests for the canonical coefficients."""

    def test_base_value(self):
        """Test base value constants."""
        assert DEFAULT_CONFIG.base_value.points_per_player == 0.5
        assert DEFAULT_CONFIG.base_value.max_base_value == 32

    def test_rating(self):
        """Test rating constants."""
        assert DEFAULT_CONFIG.rating.default_rating == 1300
        assert DEFAULT_CONFIG.rating.q == pytest.approx(0.0057565, abs=1e-6)

    def test_frozen(self):
        """Test configs cannot be mutated."""
        with pytest.raises(pydantic.ValidationError):
            DEFAULT_CONFIG.base_value.max_base_value = 50


class TestWithOverrides:
    """Tests for partial overrides."""

    def test_nested_override(self):
        """Test a nested value is replaced and siblings kept."""
        config = DEFAULT_CONFIG.with_overrides({"tva": {"rating": {"max_value": 30}}})

        assert config.tva.rating.max_value == 30
        assert config.tva.rating.coefficient == DEFAULT_CONFIG.tva.rating.coefficient
        assert config.tva.ranking == DEFAULT_CONFIG.tva.ranking

    def test_default_untouched(self):
        """Test overrides never change the defaults."""
        DEFAULT_CONFIG.with_overrides({"time_decay": {"year_1_to_2": 0.8}})
        assert DEFAULT_CONFIG.time_decay.year_1_to_2 == 0.75

    def test_unknown_key_rejected(self):
        """Test unknown keys fail validation."""
        with pytest.raises(pydantic.ValidationError):
            DEFAULT_CONFIG.with_overrides({"base_value": {"bogus": 1}})


class TestLoadConfig:
    """Tests for YAML loading."""

    def test_loads_overrides(self, tmp_path):
        """Test a YAML file of overrides is applied."""
        path = tmp_path / "oppr.yaml"
        path.write_text(yaml.safe_dump({"event_boosters": {"major": 2.5}}))

        config = load_config(path)
        assert isinstance(config, OPPRConfig)
        assert config.event_boosters.major == 2.5
        assert config.event_boosters.certified == 1.25

    def test_empty_file(self, tmp_path):
        """Test an empty file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == DEFAULT_CONFIG

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_value(self, tmp_path):
        """Test invalid values raise a pydantic ValidationError."""
        path = tmp_path / "bad.yaml"
        path.write_text("rating:\n  default_rating: high\n")
        with pytest.raises(pydantic.ValidationError):
            load_config(path)


class TestErrors:
    """Tests for error formatting."""

    def test_configuration_error_format(self):
        """Test message and suggestion formatting."""
        error = ConfigurationError("Bad value", "Use a number")
        assert str(error) == "[Configuration Error] Bad value\n[Suggestion] Use a number"

    def test_validation_error_line(self):
        """Test line numbers prefix the message."""
        error = ValidationError("Name is required", line=7, field="name")
        assert str(error) == "Line 7: Name is required"
        assert error.field == "name"


class TestConfigureLogging:
    """Tests for logging setup."""

    def test_json_logging(self, caplog):
        """Test JSON rendering emits structured records."""
        configure_logging("DEBUG", json=True)
        caplog.set_level(logging.INFO)
        try:
            structlog.get_logger("oppr.test").info("config_loaded", source="test")
        finally:
            structlog.reset_defaults()
        assert '"event": "config_loaded"' in caplog.text
        assert '"source": "test"' in caplog.text
