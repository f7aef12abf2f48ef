"""Tests for the weather card renderers."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from weather_glance.errors import LocationError, NetworkError
from weather_glance.renderers.card import build_weather_card_html, format_summary
from weather_glance.state import (
    Unit,
    ViewState,
    begin_request,
    complete_request,
    fail_request,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from weather_glance.schemas import IconColorMapping, WeatherData

NOON = datetime(2024, 1, 1, 12, 0)


def _shown(weather: WeatherData, table: list[IconColorMapping]) -> ViewState:
    loading = begin_request(ViewState.idle())
    return complete_request(loading, loading.request_id, weather, table, NOON)


class TestFormatSummary:
    """Plain-text line."""

    def test_displayed_celsius(self, london: WeatherData, sunny_mapping: IconColorMapping) -> None:
        line = format_summary(_shown(london, [sunny_mapping]), Unit.CELSIUS)
        assert line == "London, UK: 10°C, Sunny [sun.max]"

    def test_displayed_fahrenheit(
        self, london: WeatherData, sunny_mapping: IconColorMapping
    ) -> None:
        line = format_summary(_shown(london, [sunny_mapping]), Unit.FAHRENHEIT)
        assert line == "London, UK: 51°F, Sunny [sun.max]"

    def test_without_icon(self, london: WeatherData) -> None:
        assert format_summary(_shown(london, []), Unit.CELSIUS) == "London, UK: 10°C, Sunny"

    def test_loading(self) -> None:
        assert format_summary(begin_request(ViewState.idle()), Unit.CELSIUS) == "Loading..."

    def test_idle(self) -> None:
        assert format_summary(ViewState.idle(), Unit.CELSIUS) == ""

    def test_error(self) -> None:
        loading = begin_request(ViewState.idle())
        state = fail_request(loading, loading.request_id, NetworkError("down"))
        line = format_summary(state, Unit.CELSIUS)
        assert line == "Couldn't get the weather!: --, Oops [exclamationmark.icloud]"


class TestBuildWeatherCardHtml:
    """HTML fragment."""

    def test_displayed(self, london: WeatherData, sunny_mapping: IconColorMapping) -> None:
        html = build_weather_card_html(_shown(london, [sunny_mapping]), Unit.CELSIUS)
        assert "weather-card--displayed" in html
        assert "London, UK" in html
        assert "10°C" in html
        assert "Sunny" in html
        assert 'data-symbol="sun.max"' in html
        assert "background-color: #FF9500" in html

    def test_night_fahrenheit(
        self, make_weather: Callable[..., WeatherData], sunny_mapping: IconColorMapping
    ) -> None:
        weather = make_weather(localtime="2024-01-01 23:00")
        html = build_weather_card_html(_shown(weather, [sunny_mapping]), Unit.FAHRENHEIT)
        assert "51°F" in html
        assert 'data-symbol="moon.stars"' in html
        assert "#007AFF" in html

    def test_loading_hides_temperature(self) -> None:
        html = build_weather_card_html(begin_request(ViewState.idle()), Unit.CELSIUS)
        assert "weather-card--loading" in html
        assert "Loading..." in html
        assert "weather-card__temperature" not in html
        assert "background-color" not in html

    def test_error(self) -> None:
        loading = begin_request(ViewState.idle())
        state = fail_request(loading, loading.request_id, LocationError("denied"))
        html = build_weather_card_html(state, Unit.CELSIUS)
        assert "Couldn&#39;t get the location!" in html
        assert "--" in html
        assert "°C" not in html
        assert "Oops" in html

    def test_escapes_location(
        self, make_weather: Callable[..., WeatherData]
    ) -> None:
        weather = make_weather(name="<script>", country="X")
        html = build_weather_card_html(_shown(weather, []), Unit.CELSIUS)
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
