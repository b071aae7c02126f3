"""OpenWeatherMap API client for current conditions and the 5-day forecast."""

import logging
from dataclasses import dataclass

import httpx

from widget.config.schema import OPENWEATHER_BASE_URL
from widget.models.common import UnitSystem

logger = logging.getLogger(__name__)


class WeatherApiError(Exception):
    """Base class for failures of a weather lookup."""


class ProviderError(WeatherApiError):
    """Raised when the provider answers with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TransportError(WeatherApiError):
    """Raised when a request cannot be completed or its body is not JSON."""


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    body: dict

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class OpenWeatherClient:
    def __init__(
        self,
        app_id: str,
        base_url: str = OPENWEATHER_BASE_URL,
        timeout: float = 30.0,
    ):
        self.app_id = app_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def get_current(self, city: str, unit: UnitSystem) -> ApiResponse:
        """Fetch current conditions for a city."""
        return self._get("/weather", city, unit)

    def get_forecast(self, city: str, unit: UnitSystem) -> ApiResponse:
        """Fetch the 5-day forecast at 3-hour resolution for a city."""
        return self._get("/forecast", city, unit)

    def _get(self, endpoint: str, city: str, unit: UnitSystem) -> ApiResponse:
        """GET an endpoint and decode the body whatever the status."""
        url = f"{self.base_url}{endpoint}"
        params = {"q": city, "units": unit.value, "appid": self.app_id}
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("OpenWeather request failed: %s q=%s -> %s", endpoint, city, e)
            raise TransportError(f"Request failed: {e}") from e

        try:
            body = resp.json()
        except ValueError as e:
            logger.error(
                "OpenWeather %s returned non-JSON body (HTTP %d)",
                endpoint, resp.status_code,
            )
            raise TransportError(f"Invalid JSON from {endpoint}") from e

        if not isinstance(body, dict):
            raise TransportError(f"Unexpected payload type from {endpoint}")

        if resp.status_code >= 400:
            logger.warning(
                "OpenWeather %s returned %d for q=%s: %s",
                endpoint, resp.status_code, city, body.get("message", ""),
            )
        return ApiResponse(status_code=resp.status_code, body=body)
