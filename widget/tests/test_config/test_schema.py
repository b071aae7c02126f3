"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from widget.config.schema import (
    OPENWEATHER_BASE_URL,
    ApiConfig,
    DisplayConfig,
    ServerConfig,
    WidgetConfig,
)
from widget.models.common import UnitSystem


class TestWidgetConfig:
    def test_defaults(self):
        config = WidgetConfig()
        assert config.api.base_url == OPENWEATHER_BASE_URL
        assert config.api.app_id == ""
        assert config.display.default_city == "Delhi"
        assert config.display.unit == UnitSystem.METRIC
        assert config.server.port == 8777

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            WidgetConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            DisplayConfig(default_city="Oslo", theme="dark")


class TestApiConfig:
    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ApiConfig(timeout_seconds=0.0)


class TestDisplayConfig:
    def test_unit_from_string(self):
        config = DisplayConfig(unit="imperial")
        assert config.unit == UnitSystem.IMPERIAL

    def test_unknown_unit_rejected(self):
        with pytest.raises(ValidationError):
            DisplayConfig(unit="kelvin")

    def test_default_city_not_empty(self):
        with pytest.raises(ValidationError):
            DisplayConfig(default_city="")


class TestServerConfig:
    def test_port_bounds(self):
        ServerConfig(port=1)
        ServerConfig(port=65535)
        with pytest.raises(ValidationError):
            ServerConfig(port=0)
        with pytest.raises(ValidationError):
            ServerConfig(port=70000)
