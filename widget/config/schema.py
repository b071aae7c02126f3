"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from widget.models.common import UnitSystem

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENWEATHER_BASE_URL
    app_id: str = ""
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_city: str = Field(default="Delhi", min_length=1)
    unit: UnitSystem = UnitSystem.METRIC


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class WidgetConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    display: DisplayConfig = DisplayConfig()
    server: ServerConfig = ServerConfig()
