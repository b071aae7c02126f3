"""Maps raw OpenWeatherMap payloads onto display models."""

import math

from widget.mapping.icons import resolve_icon
from widget.models.weather import ForecastDay, WeatherSnapshot

# 3-hour observations per day
FORECAST_STRIDE = 8


def map_current(payload: dict) -> WeatherSnapshot:
    """Build a WeatherSnapshot from a /weather response.

    Temperatures are floored, not rounded. Humidity and wind speed are
    passed through in whatever unit the request asked for.
    """
    main = payload["main"]
    condition = payload["weather"][0]
    return WeatherSnapshot(
        humidity=main["humidity"],
        wind_speed=payload["wind"]["speed"],
        temperature=math.floor(main["temp"]),
        location=payload["name"],
        icon=resolve_icon(condition.get("icon")),
        description=condition.get("description", ""),
        min_temp=math.floor(main["temp_min"]),
        max_temp=math.floor(main["temp_max"]),
    )


def map_forecast(payload: dict, stride: int = FORECAST_STRIDE) -> list[ForecastDay]:
    """Sample one entry per day from a /forecast response.

    Takes every `stride`-th observation starting at index 0. Day boundaries
    are not inspected.
    """
    days = []
    for item in payload["list"][::stride]:
        condition = item["weather"][0]
        days.append(
            ForecastDay(
                date=item["dt_txt"][:10],
                avg_temp=math.floor(item["main"]["temp"]),
                description=condition.get("description", ""),
                icon=resolve_icon(condition.get("icon")),
            )
        )
    return days
