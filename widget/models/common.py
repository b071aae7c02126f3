"""Common types and helpers shared across models."""

from enum import StrEnum


class UnitSystem(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"

    def toggled(self) -> "UnitSystem":
        if self is UnitSystem.METRIC:
            return UnitSystem.IMPERIAL
        return UnitSystem.METRIC

    @property
    def temperature_label(self) -> str:
        return "°C" if self is UnitSystem.METRIC else "°F"

    @property
    def speed_label(self) -> str:
        return "Km/h" if self is UnitSystem.METRIC else "Mph"

    @property
    def toggle_label(self) -> str:
        """Caption for the button that switches to the other system."""
        return f"Switch to {self.toggled().temperature_label}"
