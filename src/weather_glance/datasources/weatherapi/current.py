"""Current conditions from the weatherapi.com ``current.json`` endpoint."""

from __future__ import annotations

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING

import requests
from pydantic import ValidationError

from weather_glance.config import get_settings
from weather_glance.datasources.weatherapi.client import WeatherQuery, build_url
from weather_glance.errors import EmptyResponseError, NetworkError, ParseError
from weather_glance.schemas import WeatherData
from weather_glance.services.http import session as default_session

if TYPE_CHECKING:
    from concurrent.futures import Executor

log = logging.getLogger(__name__)

# Background pool for fetch_weather(); one request per user action.
_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="weather-fetch")


def parse_weather(body: bytes | str) -> WeatherData:
    """
    Decode a ``current.json`` body into WeatherData.

    Raises:
        EmptyResponseError: Body is empty or whitespace.
        ParseError: Body is not JSON or misses required fields.
    """
    if not body or not body.strip():
        raise EmptyResponseError("Empty response body")
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise ParseError(f"Response is not JSON: {exc}") from exc
    try:
        return WeatherData.model_validate(payload)
    except ValidationError as exc:
        raise ParseError(f"Unexpected weather payload: {exc.error_count()} error(s)") from exc


def fetch_current(url: str, session: requests.Session | None = None) -> WeatherData:
    """
    Fetch and decode current weather. One attempt, no retries.

    Args:
        url: Request URL from ``build_url``.
        session: HTTP session (default: the shared module session).

    Returns:
        Parsed WeatherData.

    Raises:
        NetworkError: Transport failure or non-2xx status.
        EmptyResponseError: Empty body.
        ParseError: Malformed or unexpected JSON.
    """
    s = session or default_session
    try:
        resp = s.get(url, timeout=get_settings().request_timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        log.warning("Weather request failed: %s", exc.__class__.__name__)
        raise NetworkError(str(exc)) from exc

    weather = parse_weather(resp.content)
    log.debug(
        "Fetched weather for %s, %s (code %d)",
        weather.location.name,
        weather.location.country,
        weather.current.condition.code,
    )
    return weather


def fetch_weather(query: WeatherQuery, executor: Executor | None = None) -> Future[WeatherData]:
    """
    Start an asynchronous fetch for ``query``.

    The URL is built on the calling thread, so ``InvalidQueryError`` is raised
    immediately and no request is sent. The network call runs on ``executor``
    (default: a shared background pool); its result or error is delivered
    through the returned future.
    """
    url = build_url(query)
    return (executor or _executor).submit(fetch_current, url)
