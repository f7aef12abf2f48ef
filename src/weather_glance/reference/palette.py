"""Symbolic background colors and their fixed palette values.

The icon mapping names colors symbolically; only the names below are
recognised. Anything else means "leave the background alone".
"""

from __future__ import annotations

import logging
from enum import StrEnum

log = logging.getLogger(__name__)


class SystemColor(StrEnum):
    """Background colors the icon mapping may name."""

    ORANGE = "orange"
    BLUE = "blue"
    TEAL = "teal"
    TERTIARY = "tertiary"
    QUATERNARY = "quaternary"
    GRAY = "gray"

    @property
    def hex(self) -> str:
        """Concrete palette value."""
        return _PALETTE[self]


# iOS system palette (light appearance)
_PALETTE: dict[SystemColor, str] = {
    SystemColor.ORANGE: "#FF9500",
    SystemColor.BLUE: "#007AFF",
    SystemColor.TEAL: "#30B0C7",
    SystemColor.TERTIARY: "#AEAEB2",  # systemGray2
    SystemColor.QUATERNARY: "#D1D1D6",  # systemGray4
    SystemColor.GRAY: "#8E8E93",
}


def resolve_color(name: str | None) -> SystemColor | None:
    """Return the SystemColor for ``name``, or None when it is not a known color."""
    if name is None:
        return None
    try:
        return SystemColor(name)
    except ValueError:
        log.debug("Ignoring unknown color name %r", name)
        return None
