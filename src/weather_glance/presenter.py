"""
Weather presentation: raw weather + icon table → display descriptor.

Everything here is a pure function of its arguments. There is no clock read
and no I/O, so the same inputs always produce an equal descriptor.

Day/night is decided from the location's own wall-clock time
(``location.localtime``), not from the viewer's clock:

    06:00 ≤ hour < 18:00  → day
    otherwise             → night
    unparsable localtime  → day (fail-open)
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from weather_glance.reference.icon_table import IconColorTable
from weather_glance.reference.palette import resolve_color
from weather_glance.schemas import PresentationDescriptor

if TYPE_CHECKING:
    from collections.abc import Iterable

    from weather_glance.schemas import IconColorMapping, WeatherData

LOCALTIME_FORMAT = "%Y-%m-%d %H:%M"

DAY_START_HOUR = 6
NIGHT_START_HOUR = 18


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (20.5 → 21, -20.5 → -21)."""
    # Decimal(repr) avoids binary artefacts like 0.49999999999999994 + 0.5 == 1.0
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def parse_localtime(localtime: str) -> datetime | None:
    """Parse ``yyyy-MM-dd HH:mm``; None if it doesn't match."""
    try:
        return datetime.strptime(localtime.strip(), LOCALTIME_FORMAT)
    except (AttributeError, ValueError):
        return None


def is_day_time(localtime: str | None, now: datetime | None = None) -> bool:
    """
    Whether ``localtime`` falls in daytime.

    Args:
        localtime: Location wall-clock time, ``yyyy-MM-dd HH:mm``.
        now: Reference time used only when ``localtime`` is missing
            altogether. Never read from the system clock.

    Returns:
        True for hours in [6, 18), and for any string that doesn't parse.
    """
    if localtime is None:
        if now is None:
            return True
        return DAY_START_HOUR <= now.hour < NIGHT_START_HOUR

    parsed = parse_localtime(localtime)
    if parsed is None:
        return True
    return DAY_START_HOUR <= parsed.hour < NIGHT_START_HOUR


def lookup_mapping(
    table: IconColorTable | Iterable[IconColorMapping] | None, code: int
) -> IconColorMapping | None:
    """First mapping for ``code`` in ``table``; None on a miss or without a table."""
    if table is None:
        return None
    if isinstance(table, IconColorTable):
        return table.lookup(code)
    return next((m for m in table if m.code == code), None)


def present(
    data: WeatherData,
    table: IconColorTable | Iterable[IconColorMapping] | None,
    now: datetime | None = None,
) -> PresentationDescriptor:
    """
    Build the display descriptor for one weather snapshot.

    Args:
        data: Parsed weather.
        table: Icon/color table, or None when it failed to load.
        now: Reference time (see ``is_day_time``).

    Returns:
        Descriptor with both temperatures; icon and color are None when the
        condition code has no mapping, and the color is None when the mapping
        names an unknown color.
    """
    location = data.location
    current = data.current
    is_day = is_day_time(location.localtime, now)

    icon_name = color_name = color_value = None
    mapping = lookup_mapping(table, current.condition.code)
    if mapping is not None:
        icon_name = mapping.icon(is_day)
        color = resolve_color(mapping.color(is_day))
        if color is not None:
            color_name = color.value
            color_value = color.hex

    return PresentationDescriptor(
        location_label=f"{location.name}, {location.country}",
        temperature_c=round_half_away(current.temp_c),
        temperature_f=round_half_away(current.temp_f),
        condition_text=current.condition.text,
        icon_name=icon_name,
        color_name=color_name,
        color_value=color_value,
        is_day=is_day,
    )
