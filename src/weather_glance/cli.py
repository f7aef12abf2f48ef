"""
Command-line interface for the application.

This module provides the main entry point for the CLI. It plays the part of
the UI: it starts a fetch, waits for the future, applies the result to a
``ViewState`` and prints the card.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from weather_glance import __version__
from weather_glance.config import get_settings
from weather_glance.datasources.weatherapi import (
    CityQuery,
    CoordinateQuery,
    WeatherQuery,
    fetch_weather,
)
from weather_glance.errors import InvalidQueryError, LocationError
from weather_glance.location import FixedLocationProvider, query_from_location
from weather_glance.reference import icon_table
from weather_glance.renderers.card import build_weather_card_html, format_summary
from weather_glance.state import (
    Phase,
    Unit,
    ViewState,
    begin_request,
    fail_request,
    reject_query,
    settle,
)

if TYPE_CHECKING:
    from concurrent.futures import Future

    from weather_glance.location import LocationProvider
    from weather_glance.schemas import WeatherData

log = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-glance",
        description="Current weather for a city or coordinates, with condition icon and color",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    # Shared by every command that shows weather
    display = argparse.ArgumentParser(add_help=False)
    display.add_argument(
        "--unit",
        type=Unit.from_symbol,
        default=Unit.CELSIUS,
        help="Headline temperature unit: c or f (default: c)",
    )
    display.add_argument(
        "--html",
        type=Path,
        default=None,
        help="Also write the weather card as an HTML fragment to this path",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    city_parser = subparsers.add_parser("city", parents=[display], help="Weather for a city")
    city_parser.add_argument("name", nargs="+", help="City name, e.g. London or New York")

    coords_parser = subparsers.add_parser(
        "coords", parents=[display], help="Weather for latitude/longitude"
    )
    coords_parser.add_argument("lat", type=str, help="Latitude, e.g. 51.5")
    coords_parser.add_argument("lon", type=str, help="Longitude, e.g. -0.12")

    subparsers.add_parser(
        "locate",
        parents=[display],
        help="Weather for the configured home location",
    )

    return parser


def show_weather(query: WeatherQuery, unit: Unit, html_path: Path | None = None) -> ViewState:
    """Fetch, present and print the weather for ``query``; return the final state."""
    state = ViewState.idle()
    try:
        future = fetch_weather(query)
    except InvalidQueryError as exc:
        state = reject_query(state, exc)
    else:
        state = begin_request(state)
        print(format_summary(state, unit))
        state = _settle(state, future)
    return _emit(state, unit, html_path)


def _settle(state: ViewState, future: Future[WeatherData]) -> ViewState:
    return settle(state, state.request_id, future, icon_table.load_default(), datetime.now())


def _emit(state: ViewState, unit: Unit, html_path: Path | None) -> ViewState:
    stream = sys.stdout if state.phase is Phase.DISPLAYED else sys.stderr
    print(format_summary(state, unit), file=stream)
    if html_path is not None:
        html_path.parent.mkdir(parents=True, exist_ok=True)
        html_path.write_text(build_weather_card_html(state, unit), encoding="utf-8")
        log.debug("Wrote weather card to %s", html_path)
    return state


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"API key configured: {'yes' if settings.api_key else 'no'}")
    table = icon_table.load_default()
    print(f"Icon mappings: {len(table) if table is not None else 'unavailable'}")
    return 0


def cmd_city(args: argparse.Namespace) -> int:
    """Handle the 'city' command."""
    query = CityQuery(city=" ".join(args.name))
    state = show_weather(query, args.unit, args.html)
    return 0 if state.phase is Phase.DISPLAYED else 1


def cmd_coords(args: argparse.Namespace) -> int:
    """Handle the 'coords' command."""
    query = CoordinateQuery(lat=args.lat, long=args.lon)
    state = show_weather(query, args.unit, args.html)
    return 0 if state.phase is Phase.DISPLAYED else 1


def cmd_locate(args: argparse.Namespace) -> int:
    """Handle the 'locate' command: home coordinates from settings stand in for GPS."""
    settings = get_settings()
    provider = FixedLocationProvider(settings.home_lat, settings.home_lon)

    # One request covers both the location lookup and the weather fetch
    state = begin_request(ViewState.idle())
    print(format_summary(state, args.unit))
    try:
        future = _fetch_for_location(provider)
    except LocationError as exc:
        state = fail_request(state, state.request_id, exc)
    else:
        state = _settle(state, future)

    _emit(state, args.unit, args.html)
    return 0 if state.phase is Phase.DISPLAYED else 1


def _fetch_for_location(provider: LocationProvider) -> Future[WeatherData]:
    """Resolve the location and start the fetch; any failure is a LocationError."""
    query = query_from_location(provider.request_location())
    try:
        return fetch_weather(query)
    except InvalidQueryError as exc:
        raise LocationError(str(exc)) from exc


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "city": cmd_city,
        "coords": cmd_coords,
        "locate": cmd_locate,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
