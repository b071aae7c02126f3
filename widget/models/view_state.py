"""Widget view state and render mode."""

from dataclasses import dataclass, field
from enum import StrEnum

from widget.models.common import UnitSystem
from widget.models.weather import ForecastDay, WeatherSnapshot


class RenderMode(StrEnum):
    LOADING = "loading"
    ERROR = "error"
    DATA = "data"
    EMPTY = "empty"


@dataclass
class ViewState:
    unit: UnitSystem = UnitSystem.METRIC
    loading: bool = False
    error: str = ""
    weather: WeatherSnapshot | None = None
    forecast: list[ForecastDay] = field(default_factory=list)
    last_city: str | None = None

    @property
    def render_mode(self) -> RenderMode:
        """Exactly one mode, checked in priority order."""
        if self.loading:
            return RenderMode.LOADING
        if self.error:
            return RenderMode.ERROR
        if self.weather is not None:
            return RenderMode.DATA
        return RenderMode.EMPTY
