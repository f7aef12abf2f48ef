"""
Caller-level view state.

The caller owns an immutable ``ViewState`` and replaces it with the value
returned by each transition::

    Idle ──begin_request──▶ Loading ──complete_request──▶ Displayed
                              │
                              └──────fail_request──────▶ ErrorShown

Every request gets a monotonically increasing id. A completion or failure
carrying an id other than the one currently loading is stale and leaves the
state untouched, so a slow response can never overwrite a newer one.

Transitions are pure; run them on whichever thread owns the display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING

from weather_glance.errors import WeatherError
from weather_glance.presenter import present
from weather_glance.schemas import PresentationDescriptor, WeatherData  # noqa: TC001

if TYPE_CHECKING:
    from collections.abc import Iterable
    from concurrent.futures import Future
    from datetime import datetime

    from weather_glance.reference.icon_table import IconColorTable
    from weather_glance.schemas import IconColorMapping

log = logging.getLogger(__name__)

LOADING_TEXT = "Loading..."
LOADING_ICON = "arrow.triangle.2.circlepath.icloud"
ERROR_ICON = "exclamationmark.icloud"
ERROR_CONDITION = "Oops"
NO_TEMPERATURE = "--"


class Phase(StrEnum):
    """Where the display is in the fetch lifecycle."""

    IDLE = "idle"
    LOADING = "loading"
    DISPLAYED = "displayed"
    ERROR_SHOWN = "error_shown"


class Unit(IntEnum):
    """Headline temperature unit, indexed like the unit selector."""

    CELSIUS = 0
    FAHRENHEIT = 1

    @classmethod
    def from_symbol(cls, symbol: str) -> Unit:
        """Parse ``"c"``/``"f"`` (any case)."""
        symbols = {"c": cls.CELSIUS, "f": cls.FAHRENHEIT}
        try:
            return symbols[symbol.strip().lower()]
        except KeyError:
            msg = f"Unknown temperature unit: {symbol!r}"
            raise ValueError(msg) from None

    @property
    def suffix(self) -> str:
        return "°C" if self == Unit.CELSIUS else "°F"


@dataclass(frozen=True)
class ViewState:
    """Everything the display needs, for one point in time."""

    phase: Phase = Phase.IDLE
    request_id: int = 0
    label: str = ""
    condition: str = ""
    icon: str | None = None
    weather: WeatherData | None = None
    descriptor: PresentationDescriptor | None = None
    error: WeatherError | None = None

    @classmethod
    def idle(cls) -> ViewState:
        return cls()

    @property
    def is_loading(self) -> bool:
        return self.phase is Phase.LOADING

    @property
    def shows_temperature(self) -> bool:
        """Temperature and condition are hidden while loading and before any fetch."""
        return self.phase in (Phase.DISPLAYED, Phase.ERROR_SHOWN)

    @property
    def background(self) -> str | None:
        """Concrete background color, or None to leave it unchanged."""
        if self.phase is Phase.DISPLAYED and self.descriptor is not None:
            return self.descriptor.color_value
        return None


def begin_request(state: ViewState) -> ViewState:
    """Enter Loading under a fresh request id (``state.request_id`` afterwards)."""
    return replace(
        state,
        phase=Phase.LOADING,
        request_id=state.request_id + 1,
        label=LOADING_TEXT,
        condition="",
        icon=LOADING_ICON,
        error=None,
    )


def _is_current(state: ViewState, request_id: int) -> bool:
    if state.phase is Phase.LOADING and request_id == state.request_id:
        return True
    log.debug(
        "Discarding stale result for request %d (current %d, %s)",
        request_id,
        state.request_id,
        state.phase,
    )
    return False


def complete_request(
    state: ViewState,
    request_id: int,
    data: WeatherData,
    table: IconColorTable | Iterable[IconColorMapping] | None,
    now: datetime | None = None,
) -> ViewState:
    """Show ``data`` if ``request_id`` is still the one loading."""
    if not _is_current(state, request_id):
        return state

    descriptor = present(data, table, now)
    return replace(
        state,
        phase=Phase.DISPLAYED,
        label=descriptor.location_label,
        condition=descriptor.condition_text,
        icon=descriptor.icon_name,
        weather=data,
        descriptor=descriptor,
        error=None,
    )


def _error_state(state: ViewState, error: WeatherError, request_id: int) -> ViewState:
    return replace(
        state,
        phase=Phase.ERROR_SHOWN,
        request_id=request_id,
        label=f"{error.user_message}!",
        condition=ERROR_CONDITION,
        icon=ERROR_ICON,
        weather=None,
        descriptor=None,
        error=error,
    )


def fail_request(state: ViewState, request_id: int, error: WeatherError) -> ViewState:
    """Show ``error`` and clear the weather if ``request_id`` is still the one loading."""
    if not _is_current(state, request_id):
        return state
    log.info("Request %d failed: %s", request_id, error.__class__.__name__)
    return _error_state(state, error, request_id)


def reject_query(state: ViewState, error: WeatherError) -> ViewState:
    """
    Show an error for a query that never became a request.

    Supersedes whatever is in flight: its eventual result is stale.
    """
    log.info("Query rejected: %s", error)
    return _error_state(state, error, state.request_id + 1)


def settle(
    state: ViewState,
    request_id: int,
    future: Future[WeatherData],
    table: IconColorTable | Iterable[IconColorMapping] | None,
    now: datetime | None = None,
) -> ViewState:
    """
    Apply a finished fetch future to ``state``.

    Weather errors become ErrorShown; anything else propagates.
    """
    try:
        data = future.result()
    except WeatherError as exc:
        return fail_request(state, request_id, exc)
    return complete_request(state, request_id, data, table, now)


def headline_temperature(state: ViewState, unit: Unit) -> str:
    """Rounded temperature in ``unit``, or ``"--"`` when there is nothing to show."""
    if state.phase is not Phase.DISPLAYED or state.descriptor is None:
        return NO_TEMPERATURE
    d = state.descriptor
    value = d.temperature_c if unit == Unit.CELSIUS else d.temperature_f
    return str(value)
