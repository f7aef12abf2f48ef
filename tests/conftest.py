"""Shared fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from weather_glance.config import get_settings
from weather_glance.reference.icon_table import load_default
from weather_glance.schemas import IconColorMapping, WeatherData

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from the developer's environment and .env file."""
    for name in ("HOME_LAT", "HOME_LON", "ICON_MAPPING_PATH", "REQUEST_TIMEOUT", "BASE_URL"):
        monkeypatch.delenv(f"WEATHER_GLANCE_{name}", raising=False)
    monkeypatch.setenv("WEATHER_GLANCE_API_KEY", "test-key")
    get_settings.cache_clear()
    load_default.cache_clear()
    yield
    get_settings.cache_clear()
    load_default.cache_clear()


def weather_payload(
    name: str = "London",
    country: str = "UK",
    localtime: str = "2024-01-01 12:00",
    temp_c: float = 10.4,
    temp_f: float = 50.7,
    text: str = "Sunny",
    code: int = 1000,
) -> dict[str, Any]:
    """A trimmed-down weatherapi.com current.json body."""
    return {
        "location": {
            "name": name,
            "region": "City of London, Greater London",
            "country": country,
            "lat": 51.52,
            "lon": -0.11,
            "tz_id": "Europe/London",
            "localtime_epoch": 1704110400,
            "localtime": localtime,
        },
        "current": {
            "last_updated": "2024-01-01 11:45",
            "temp_c": temp_c,
            "temp_f": temp_f,
            "is_day": 1,
            "condition": {
                "text": text,
                "icon": "//cdn.weatherapi.com/weather/64x64/day/113.png",
                "code": code,
            },
            "wind_kph": 11.2,
            "humidity": 82,
        },
    }


@pytest.fixture
def london() -> WeatherData:
    return WeatherData.model_validate(weather_payload())


@pytest.fixture
def sunny_mapping() -> IconColorMapping:
    return IconColorMapping.model_validate(
        {
            "code": 1000,
            "day": "Sunny",
            "night": "Clear",
            "iconDay": "sun.max",
            "iconNight": "moon.stars",
            "colorDay": "orange",
            "colorNight": "blue",
        }
    )


@pytest.fixture
def make_weather() -> Callable[..., WeatherData]:
    """Build WeatherData from ``weather_payload`` keyword overrides."""

    def _make(**overrides: Any) -> WeatherData:
        return WeatherData.model_validate(weather_payload(**overrides))

    return _make
