"""Output renderers for the widget view state."""

import json
from dataclasses import asdict

from widget.models.view_state import RenderMode, ViewState

LOADING_TEXT = "Loading..."
NO_DATA_TEXT = "No data available"
FORECAST_HEADING = "5-Day Forecast"


def render_text(state: ViewState) -> str:
    """Plain text panel for terminals."""
    mode = state.render_mode
    if mode == RenderMode.LOADING:
        return LOADING_TEXT
    if mode == RenderMode.ERROR:
        return f"Error: {state.error}"
    if mode == RenderMode.EMPTY:
        return NO_DATA_TEXT

    w = state.weather
    t = state.unit.temperature_label
    lines = [
        f"[{w.icon}] {w.temperature}{t}",
        f"{w.location} | {w.description}",
        f"Min: {w.min_temp}{t}, Max: {w.max_temp}{t}",
        f"Humidity: {w.humidity}% | Wind Speed: {w.wind_speed} "
        f"{state.unit.speed_label}",
    ]
    if state.forecast:
        lines.append("")
        lines.append(FORECAST_HEADING)
        for day in state.forecast:
            lines.append(
                f"  {day.date}  [{day.icon}] {day.avg_temp}{t}  {day.description}"
            )
    return "\n".join(lines)


def render_dict(state: ViewState) -> dict:
    """JSON-ready view for the dashboard and --json output.

    Only the active mode's payload is populated.
    """
    mode = state.render_mode
    data: dict = {
        "mode": mode.value,
        "unit": state.unit.value,
        "temperature_label": state.unit.temperature_label,
        "speed_label": state.unit.speed_label,
        "toggle_label": state.unit.toggle_label,
        "last_city": state.last_city,
        "error": None,
        "weather": None,
        "forecast": [],
    }
    if mode == RenderMode.ERROR:
        data["error"] = state.error
    elif mode == RenderMode.DATA:
        data["weather"] = _with_icon_path(asdict(state.weather))
        data["forecast"] = [_with_icon_path(asdict(d)) for d in state.forecast]
    return data


def render_json(state: ViewState) -> str:
    return json.dumps(render_dict(state), indent=2)


def _with_icon_path(item: dict) -> dict:
    icon = item["icon"]
    item["icon"] = icon.value
    item["icon_path"] = icon.path
    return item
