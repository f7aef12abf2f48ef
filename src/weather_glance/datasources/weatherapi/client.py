"""weatherapi.com client constants, query types and URL building.

API docs: https://www.weatherapi.com/docs/
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from urllib.parse import quote, urlencode, urljoin, urlsplit

from weather_glance.config import get_settings
from weather_glance.errors import InvalidQueryError

CURRENT_ENDPOINT = "current.json"


@dataclass(frozen=True)
class CityQuery:
    """Free-text city search, e.g. ``"London"`` or ``"São Paulo"``."""

    city: str

    def q(self) -> str:
        return self.city.strip()


@dataclass(frozen=True)
class CoordinateQuery:
    """Latitude/longitude as the caller formatted them."""

    lat: str
    long: str

    @classmethod
    def from_floats(cls, lat: float, lon: float) -> CoordinateQuery:
        return cls(lat=str(lat), long=str(lon))

    def q(self) -> str:
        return f"{self.lat.strip()},{self.long.strip()}"


WeatherQuery = CityQuery | CoordinateQuery


def _validate(query: WeatherQuery) -> None:
    if isinstance(query, CityQuery):
        if not query.q():
            raise InvalidQueryError("City name is empty")
        return

    try:
        lat = float(query.lat)
        lon = float(query.long)
    except ValueError:
        msg = f"Coordinates are not numeric: {query.lat!r}, {query.long!r}"
        raise InvalidQueryError(msg) from None
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidQueryError("Coordinates must be finite")
    if not -90.0 <= lat <= 90.0:
        raise InvalidQueryError("Invalid latitude. Must be between -90 and 90.")
    if not -180.0 <= lon <= 180.0:
        raise InvalidQueryError("Invalid longitude. Must be between -180 and 180.")


def build_url(
    query: WeatherQuery,
    api_key: str | None = None,
    base_url: str | None = None,
) -> str:
    """
    Build the ``current.json`` request URL for a city or coordinate query.

    Args:
        query: City or coordinates.
        api_key: weatherapi.com key (default: ``api_key`` from settings).
        base_url: API root (default: ``base_url`` from settings).

    Returns:
        Absolute URL with ``key`` and ``q`` percent-encoded.

    Raises:
        InvalidQueryError: The query or key cannot form a valid URL. No
            request is sent.
    """
    if api_key is None or base_url is None:
        settings = get_settings()
        api_key = settings.api_key if api_key is None else api_key
        base_url = settings.base_url if base_url is None else base_url

    if not api_key.strip():
        raise InvalidQueryError("No weatherapi.com API key configured")
    _validate(query)

    params = urlencode({"key": api_key.strip(), "q": query.q()}, quote_via=quote, safe=",")
    endpoint = urljoin(base_url.rstrip("/") + "/", CURRENT_ENDPOINT)
    url = f"{endpoint}?{params}"

    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidQueryError(f"Not a valid API base URL: {base_url!r}")
    return url
