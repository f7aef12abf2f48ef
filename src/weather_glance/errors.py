"""
Error taxonomy.

Every error carries a ``user_message`` that the caller shows in its error
placeholder. None of these are retried.
"""

from __future__ import annotations


class WeatherError(RuntimeError):
    """Base for user-facing weather lookup failures."""

    user_message = "Couldn't get the weather"


class InvalidQueryError(WeatherError):
    """City or coordinates could not be turned into a request URL."""


class FetchError(WeatherError):
    """The request was sent but no usable weather came back."""


class NetworkError(FetchError):
    """Transport failure or non-success HTTP status."""


class EmptyResponseError(FetchError):
    """The server answered with an empty body."""


class ParseError(FetchError):
    """The body was not JSON or did not match the weather structure."""


class LocationError(WeatherError):
    """The device location was denied or unavailable."""

    user_message = "Couldn't get the location"
