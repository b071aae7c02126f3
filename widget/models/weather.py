"""Display models for current conditions and the daily forecast."""

from dataclasses import dataclass
from enum import StrEnum


class IconAsset(StrEnum):
    CLEAR = "clear"
    CLOUD = "cloud"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    WIND = "wind"
    HUMIDITY = "humidity"
    SEARCH = "search"

    @property
    def path(self) -> str:
        return f"assets/{self.value}.svg"


@dataclass(frozen=True)
class WeatherSnapshot:
    humidity: int
    wind_speed: float
    temperature: int
    location: str
    icon: IconAsset
    description: str
    min_temp: int
    max_temp: int


@dataclass(frozen=True)
class ForecastDay:
    date: str  # YYYY-MM-DD
    avg_temp: int
    description: str
    icon: IconAsset
