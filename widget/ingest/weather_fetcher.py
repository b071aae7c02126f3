"""Weather fetcher: issues the current and forecast calls for one search."""

import logging
from dataclasses import dataclass

from widget.config.defaults import PROVIDER_ERROR_FALLBACK
from widget.ingest.openweather_client import (
    ApiResponse,
    OpenWeatherClient,
    ProviderError,
)
from widget.models.common import UnitSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherPayloads:
    current: dict
    forecast: dict


class WeatherFetcher:
    def __init__(self, client: OpenWeatherClient):
        self.client = client

    def fetch(self, city: str, unit: UnitSystem) -> WeatherPayloads:
        """Fetch both payloads for a city under one unit system.

        Raises ProviderError if either call reports a non-success status.
        Transport failures propagate from the client unchanged.
        """
        logger.info("Fetching weather for %s (%s)", city, unit.value)
        current = self.client.get_current(city, unit)
        forecast = self.client.get_forecast(city, unit)

        for resp in (current, forecast):
            if not resp.ok:
                raise ProviderError(_provider_message(resp), resp.status_code)

        return WeatherPayloads(current=current.body, forecast=forecast.body)


def _provider_message(resp: ApiResponse) -> str:
    message = resp.body.get("message")
    if isinstance(message, str) and message:
        return message
    return PROVIDER_ERROR_FALLBACK
