"""weatherapi.com current-conditions data source.

Public API:
  - client: CityQuery, CoordinateQuery, build_url
  - current: fetch_current (blocking), fetch_weather (future), parse_weather
"""

from weather_glance.datasources.weatherapi.client import (
    CURRENT_ENDPOINT,
    CityQuery,
    CoordinateQuery,
    WeatherQuery,
    build_url,
)
from weather_glance.datasources.weatherapi.current import (
    fetch_current,
    fetch_weather,
    parse_weather,
)

__all__ = [
    "CURRENT_ENDPOINT",
    "CityQuery",
    "CoordinateQuery",
    "WeatherQuery",
    "build_url",
    "fetch_current",
    "fetch_weather",
    "parse_weather",
]
