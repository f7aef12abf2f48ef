"""
Prefect flow: fetch → present → render for one query.

Run locally:
    python -m weather_glance.flows.report London
    python -m weather_glance.flows.report 51.5 -0.12
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from prefect import flow, task
from prefect.cache_policies import NONE

from weather_glance.datasources.weatherapi import (
    CityQuery,
    CoordinateQuery,
    WeatherQuery,
    build_url,
    fetch_current,
)
from weather_glance.errors import InvalidQueryError, WeatherError
from weather_glance.reference import icon_table
from weather_glance.renderers.card import build_weather_card_html, format_summary
from weather_glance.state import (
    Unit,
    ViewState,
    begin_request,
    complete_request,
    fail_request,
    reject_query,
)

if TYPE_CHECKING:
    from weather_glance.reference.icon_table import IconColorTable
    from weather_glance.schemas import PresentationDescriptor, WeatherData


@dataclass(frozen=True)
class WeatherReport:
    """Final state of one report run plus its renderings."""

    state: ViewState
    summary: str
    html: str

    @property
    def ok(self) -> bool:
        return self.state.descriptor is not None


# No retries: a failed fetch is terminal for the request.
@task(name="fetch-current", retries=0, cache_policy=NONE)
def fetch_current_weather(url: str) -> WeatherData:
    """Fetch current weather from weatherapi.com."""
    return fetch_current(url)


@task(name="load-icon-table", cache_policy=NONE)
def load_icon_table() -> IconColorTable | None:
    """Load the icon/color table (None if unavailable)."""
    return icon_table.load_default()


@task(name="present-weather", cache_policy=NONE)
def present_weather(
    state: ViewState,
    request_id: int,
    weather: WeatherData,
    table: IconColorTable | None,
    now: datetime,
) -> ViewState:
    """Turn weather into the displayed state."""
    return complete_request(state, request_id, weather, table, now)


@flow(name="weather-report", log_prints=True)
def weather_report(
    query: WeatherQuery,
    unit: Unit = Unit.CELSIUS,
    now: datetime | None = None,
) -> WeatherReport:
    """
    Fetch, present and render the weather for ``query``.

    Failures end in an ErrorShown state rather than an exception, so the
    result can always be displayed.
    """
    state = ViewState.idle()

    try:
        url = build_url(query)
    except InvalidQueryError as exc:
        print(f"Invalid query {query!r}: {exc}")
        state = reject_query(state, exc)
        return _report(state, unit)

    state = begin_request(state)
    request_id = state.request_id
    print(f"Fetching current weather for {query!r} (request {request_id})...")

    try:
        weather = fetch_current_weather(url)
    except WeatherError as exc:
        print(f"Fetch failed: {exc.__class__.__name__}")
        state = fail_request(state, request_id, exc)
        return _report(state, unit)

    table = load_icon_table()
    if table is None:
        print("Icon table unavailable; icons and colors omitted.")
    state = present_weather(state, request_id, weather, table, now or datetime.now())
    descriptor: PresentationDescriptor | None = state.descriptor
    if descriptor is not None:
        print(f"Presented {descriptor.location_label} (icon={descriptor.icon_name})")
    return _report(state, unit)


def _report(state: ViewState, unit: Unit) -> WeatherReport:
    return WeatherReport(
        state=state,
        summary=format_summary(state, unit),
        html=build_weather_card_html(state, unit),
    )


def query_from_args(args: list[str]) -> WeatherQuery:
    """``["London"]`` → city, ``["51.5", "-0.12"]`` → coordinates."""
    if len(args) == 2 and all(_is_number(a) for a in args):  # noqa: PLR2004
        return CoordinateQuery(lat=args[0], long=args[1])
    return CityQuery(city=" ".join(args))


def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


if __name__ == "__main__":
    report = weather_report(query_from_args(sys.argv[1:]))
    print(report.summary)
    sys.exit(0 if report.ok else 1)
