"""Weather card: the single screen of the app as HTML or one line of text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_glance.renderers import render_template
from weather_glance.state import NO_TEMPERATURE, Phase, headline_temperature

if TYPE_CHECKING:
    from weather_glance.state import Unit, ViewState


def build_weather_card_html(state: ViewState, unit: Unit) -> str:
    """Render the weather card for any phase (idle, loading, displayed, error)."""
    temperature = headline_temperature(state, unit)
    return render_template(
        "weather_card.html.j2",
        state=state,
        phase=state.phase.value,
        temperature=temperature,
        suffix=unit.suffix if temperature != NO_TEMPERATURE else "",
        background=state.background,
    )


def format_summary(state: ViewState, unit: Unit) -> str:
    """
    One-line text rendering, e.g. ``London, UK: 10°C, Sunny [sun.max]``.

    Loading and idle states have no temperature; errors show ``--``.
    """
    if state.phase is Phase.IDLE:
        return ""
    if state.phase is Phase.LOADING:
        return state.label

    temperature = headline_temperature(state, unit)
    if temperature != NO_TEMPERATURE:
        temperature += unit.suffix
    line = f"{state.label}: {temperature}, {state.condition}"
    if state.icon:
        line += f" [{state.icon}]"
    return line
