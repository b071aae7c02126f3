"""Widget controller: owns the view state and runs searches against it."""

import logging
import threading
from collections.abc import Callable
from dataclasses import replace

from widget.config.defaults import EMPTY_CITY_ALERT, TRANSPORT_ERROR_MESSAGE
from widget.config.schema import WidgetConfig
from widget.ingest.openweather_client import OpenWeatherClient, ProviderError
from widget.ingest.weather_fetcher import WeatherFetcher
from widget.mapping.view_model import map_current, map_forecast
from widget.models.common import UnitSystem
from widget.models.view_state import ViewState
from widget.models.weather import ForecastDay, WeatherSnapshot

logger = logging.getLogger(__name__)

UnitListener = Callable[[UnitSystem], None]


def _log_alert(message: str) -> None:
    logger.warning("Alert: %s", message)


class WeatherController:
    """Single owner of a ViewState.

    Every search takes a new sequence number. Completions that belong to
    an older search than the latest one are dropped, so the most recently
    started search always decides what is displayed.
    """

    def __init__(
        self,
        fetcher: WeatherFetcher,
        default_city: str = "Delhi",
        unit: UnitSystem = UnitSystem.METRIC,
        alert: Callable[[str], None] | None = None,
    ):
        self.fetcher = fetcher
        self.default_city = default_city
        self.state = ViewState(unit=unit)
        self._alert = alert or _log_alert
        self._lock = threading.RLock()
        self._seq = 0
        self._unit_listeners: list[UnitListener] = []
        self.subscribe_unit_change(self._refetch_on_unit_change)

    @classmethod
    def from_config(
        cls,
        config: WidgetConfig,
        alert: Callable[[str], None] | None = None,
    ) -> "WeatherController":
        client = OpenWeatherClient(
            app_id=config.api.app_id,
            base_url=config.api.base_url,
            timeout=config.api.timeout_seconds,
        )
        return cls(
            WeatherFetcher(client),
            default_city=config.display.default_city,
            unit=config.display.unit,
            alert=alert,
        )

    def start(self) -> None:
        """Initial load for the default city."""
        self.search(self.default_city)

    def search(self, city: str) -> None:
        city = city.strip()
        if not city:
            self._alert(EMPTY_CITY_ALERT)
            return

        with self._lock:
            self._seq += 1
            seq = self._seq
            unit = self.state.unit
            self.state.last_city = city
            self.set_loading(True)

        try:
            payloads = self.fetcher.fetch(city, unit)
            weather = map_current(payloads.current)
            forecast = map_forecast(payloads.forecast)
        except ProviderError as e:
            logger.warning("Provider rejected lookup for %s: %s", city, e.message)
            self.apply_error(e.message, seq)
        except Exception:
            logger.exception("Weather lookup for %s failed", city)
            self.apply_error(TRANSPORT_ERROR_MESSAGE, seq)
        else:
            self.apply_result(weather, forecast, seq)
        finally:
            with self._lock:
                if self._is_current(seq):
                    self.set_loading(False)

    def toggle_unit(self) -> None:
        """Flip units and re-fetch.

        The flip and the loading flag change together so no render sees
        old values under the new unit labels.
        """
        with self._lock:
            self.state.unit = self.state.unit.toggled()
            unit = self.state.unit
            self.set_loading(True)
        logger.info("Unit system switched to %s", unit.value)
        for listener in list(self._unit_listeners):
            listener(unit)

    def subscribe_unit_change(self, listener: UnitListener) -> None:
        self._unit_listeners.append(listener)

    def snapshot(self) -> ViewState:
        """Copy of the current state, taken under the lock."""
        with self._lock:
            return replace(self.state, forecast=list(self.state.forecast))

    # --- State updates ---

    def set_loading(self, loading: bool) -> None:
        """Starting a load also clears the previous error."""
        with self._lock:
            self.state.loading = loading
            if loading:
                self.state.error = ""

    def apply_result(
        self,
        weather: WeatherSnapshot,
        forecast: list[ForecastDay],
        seq: int | None = None,
    ) -> bool:
        """Replace weather and forecast together. Returns False if stale."""
        with self._lock:
            if not self._is_current(seq):
                logger.debug("Dropping stale result for request %s", seq)
                return False
            self.state.weather = weather
            self.state.forecast = list(forecast)
            return True

    def apply_error(self, message: str, seq: int | None = None) -> bool:
        """Set the error banner, leaving displayed data as is."""
        with self._lock:
            if not self._is_current(seq):
                logger.debug("Dropping stale error for request %s", seq)
                return False
            self.state.error = message
            return True

    def _is_current(self, seq: int | None) -> bool:
        return seq is None or seq == self._seq

    def _refetch_on_unit_change(self, unit: UnitSystem) -> None:
        self.search(self.state.last_city or self.default_city)
