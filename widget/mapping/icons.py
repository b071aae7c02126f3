"""Provider icon codes mapped onto the bundled icon assets."""

from widget.models.weather import IconAsset

ICON_CODE_MAP: dict[str, IconAsset] = {
    "01d": IconAsset.CLEAR,
    "01n": IconAsset.CLEAR,
    "02d": IconAsset.CLOUD,
    "02n": IconAsset.CLOUD,
    "03d": IconAsset.CLOUD,
    "03n": IconAsset.CLOUD,
    "04d": IconAsset.DRIZZLE,
    "04n": IconAsset.DRIZZLE,
    "09d": IconAsset.RAIN,
    "09n": IconAsset.RAIN,
    "10d": IconAsset.RAIN,
    "10n": IconAsset.RAIN,
    "13d": IconAsset.SNOW,
    "13n": IconAsset.SNOW,
}


def resolve_icon(code: str | None) -> IconAsset:
    """Unknown or missing codes fall back to the clear-sky icon."""
    if code is None:
        return IconAsset.CLEAR
    return ICON_CODE_MAP.get(code, IconAsset.CLEAR)
