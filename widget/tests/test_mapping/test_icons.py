"""Tests for icon code resolution."""

import pytest

from widget.mapping.icons import ICON_CODE_MAP, resolve_icon
from widget.models.weather import IconAsset


class TestResolveIcon:
    @pytest.mark.parametrize(
        "code, expected",
        [
            ("01d", IconAsset.CLEAR),
            ("01n", IconAsset.CLEAR),
            ("03n", IconAsset.CLOUD),
            ("04d", IconAsset.DRIZZLE),
            ("09n", IconAsset.RAIN),
            ("10d", IconAsset.RAIN),
            ("13d", IconAsset.SNOW),
        ],
    )
    def test_known_codes(self, code: str, expected: IconAsset):
        assert resolve_icon(code) == expected

    @pytest.mark.parametrize("code", ["11d", "50n", "", "xyz", "01D"])
    def test_unknown_codes_fall_back_to_clear(self, code: str):
        assert resolve_icon(code) == IconAsset.CLEAR

    def test_missing_code(self):
        assert resolve_icon(None) == IconAsset.CLEAR

    def test_map_uses_weather_assets_only(self):
        assert set(ICON_CODE_MAP.values()) == {
            IconAsset.CLEAR,
            IconAsset.CLOUD,
            IconAsset.DRIZZLE,
            IconAsset.RAIN,
            IconAsset.SNOW,
        }

    def test_asset_path(self):
        assert IconAsset.RAIN.path == "assets/rain.svg"
