"""
Device location collaborator.

A location provider answers one ``request_location()`` call with a future
that resolves to coordinates, or fails. ``query_from_location`` turns that
single-shot completion into a ``CoordinateQuery`` for the fetcher, mapping
any failure to ``LocationError``.
"""

from __future__ import annotations

import logging
from concurrent.futures import CancelledError, Future
from concurrent.futures import TimeoutError as FutureTimeout
from dataclasses import dataclass
from typing import Protocol

from weather_glance.datasources.weatherapi.client import CoordinateQuery
from weather_glance.errors import LocationError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinates:
    """A resolved device position."""

    lat: float
    lon: float


class LocationProvider(Protocol):
    """Anything that can look up the current position once per call."""

    def request_location(self) -> Future[Coordinates]: ...


class FixedLocationProvider:
    """Provider that always reports the configured coordinates.

    Stands in for a device location service; with no coordinates it behaves
    like a denied permission.
    """

    def __init__(self, lat: float | None, lon: float | None) -> None:
        self.lat = lat
        self.lon = lon

    def request_location(self) -> Future[Coordinates]:
        future: Future[Coordinates] = Future()
        if self.lat is None or self.lon is None:
            future.set_exception(LocationError("No location configured"))
        else:
            future.set_result(Coordinates(lat=self.lat, lon=self.lon))
        return future


def query_from_location(
    future: Future[Coordinates], timeout: float | None = None
) -> CoordinateQuery:
    """
    Wait for a location result and build the matching coordinate query.

    Raises:
        LocationError: The provider failed, was cancelled or timed out.
    """
    try:
        coords = future.result(timeout=timeout)
    except LocationError:
        raise
    except (CancelledError, FutureTimeout) as exc:
        raise LocationError("Location request did not complete") from exc
    except Exception as exc:  # provider-specific failures
        log.warning("Location provider failed: %s", exc)
        raise LocationError(str(exc)) from exc
    return CoordinateQuery.from_floats(coords.lat, coords.lon)
