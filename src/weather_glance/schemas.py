"""
Domain models for weather glance.

Pydantic models for the weatherapi.com payload, the bundled icon/color
mapping and the derived presentation descriptor. Decoding is strict about
required fields and tolerant of extra ones.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Weather payload (weatherapi.com current.json)
# =============================================================================


class _Snapshot(BaseModel):
    # No coercion: "10.4" is not a temperature and true is not a code
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)


class Location(_Snapshot):
    """Where the reading was taken, with local wall-clock time."""

    name: str
    country: str
    localtime: str = Field(..., description="Local time as 'yyyy-MM-dd HH:mm'")


class Condition(_Snapshot):
    """Provider condition text and numeric code."""

    text: str
    code: int


class Current(_Snapshot):
    """Current conditions."""

    temp_c: float = Field(..., allow_inf_nan=False)
    temp_f: float = Field(..., allow_inf_nan=False)
    condition: Condition


class WeatherData(_Snapshot):
    """One fetch result. Replaced wholesale, never merged."""

    location: Location
    current: Current


# =============================================================================
# Icon/color mapping
# =============================================================================


class IconColorMapping(BaseModel):
    """Translates a condition code plus day/night into an icon and color name."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: int
    day: str
    night: str
    icon_day: str = Field(..., alias="iconDay")
    icon_night: str = Field(..., alias="iconNight")
    color_day: str = Field(..., alias="colorDay")
    color_night: str = Field(..., alias="colorNight")

    def icon(self, is_day: bool) -> str:
        """Icon name for the given time of day."""
        return self.icon_day if is_day else self.icon_night

    def color(self, is_day: bool) -> str:
        """Symbolic color name for the given time of day."""
        return self.color_day if is_day else self.color_night


# =============================================================================
# Presentation
# =============================================================================


class PresentationDescriptor(BaseModel):
    """Display fields derived from one weather snapshot."""

    model_config = ConfigDict(frozen=True)

    location_label: str
    temperature_c: int
    temperature_f: int
    condition_text: str
    icon_name: str | None = None
    color_name: str | None = None
    color_value: str | None = Field(default=None, description="Concrete palette value (hex)")
    is_day: bool = True
