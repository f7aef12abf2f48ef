"""Tests for the location collaborator."""

from __future__ import annotations

from concurrent.futures import Future

import pytest

from weather_glance.datasources.weatherapi import CoordinateQuery
from weather_glance.errors import LocationError
from weather_glance.location import Coordinates, FixedLocationProvider, query_from_location


class TestFixedLocationProvider:
    """Configured coordinates stand in for a device fix."""

    def test_resolves_immediately(self) -> None:
        future = FixedLocationProvider(51.5, -0.12).request_location()
        assert future.done()
        assert future.result() == Coordinates(lat=51.5, lon=-0.12)

    @pytest.mark.parametrize(("lat", "lon"), [(None, None), (51.5, None), (None, -0.12)])
    def test_unconfigured_fails(self, lat: float | None, lon: float | None) -> None:
        future = FixedLocationProvider(lat, lon).request_location()
        with pytest.raises(LocationError):
            future.result()

    def test_each_call_is_a_new_future(self) -> None:
        provider = FixedLocationProvider(1.0, 2.0)
        assert provider.request_location() is not provider.request_location()


class TestQueryFromLocation:
    """Future → CoordinateQuery."""

    def test_success(self) -> None:
        future = FixedLocationProvider(48.8566, 2.3522).request_location()
        assert query_from_location(future) == CoordinateQuery("48.8566", "2.3522")

    def test_location_error_passes_through(self) -> None:
        future = FixedLocationProvider(None, None).request_location()
        with pytest.raises(LocationError, match="No location configured"):
            query_from_location(future)

    def test_provider_error_becomes_location_error(self) -> None:
        future: Future[Coordinates] = Future()
        future.set_exception(PermissionError("denied"))
        with pytest.raises(LocationError) as excinfo:
            query_from_location(future)
        assert isinstance(excinfo.value.__cause__, PermissionError)

    def test_cancelled(self) -> None:
        future: Future[Coordinates] = Future()
        future.cancel()
        with pytest.raises(LocationError):
            query_from_location(future)

    def test_timeout(self) -> None:
        future: Future[Coordinates] = Future()
        with pytest.raises(LocationError):
            query_from_location(future, timeout=0.01)

    def test_user_message(self) -> None:
        assert LocationError("x").user_message == "Couldn't get the location"
