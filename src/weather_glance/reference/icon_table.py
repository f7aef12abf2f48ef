"""Condition code → icon/color table.

Loaded once from the JSON resource bundled with the package
(``reference/data/Weather-Icon_Mapping.json``) or from a path given in
settings, then read-only. A table that cannot be read or parsed is reported
as absent rather than raised: the presenter simply omits icon and color.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from weather_glance.config import get_settings
from weather_glance.schemas import IconColorMapping

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

log = logging.getLogger(__name__)

MAPPING_RESOURCE = "Weather-Icon_Mapping.json"

_mapping_list = TypeAdapter(list[IconColorMapping])


class IconColorTable:
    """Immutable, ordered collection of IconColorMapping records."""

    def __init__(self, mappings: Iterable[IconColorMapping]) -> None:
        self._mappings: tuple[IconColorMapping, ...] = tuple(mappings)
        self._by_code: dict[int, IconColorMapping] = {}
        for mapping in self._mappings:
            if mapping.code in self._by_code:
                log.warning(
                    "Duplicate condition code %d in icon table; keeping the first", mapping.code
                )
                continue
            self._by_code[mapping.code] = mapping

    def lookup(self, code: int) -> IconColorMapping | None:
        """First mapping whose code equals ``code``, or None."""
        return self._by_code.get(code)

    def codes(self) -> list[int]:
        """Distinct condition codes, in table order."""
        return list(self._by_code)

    def __len__(self) -> int:
        return len(self._mappings)

    def __iter__(self) -> Iterator[IconColorMapping]:
        return iter(self._mappings)

    def __repr__(self) -> str:
        return f"IconColorTable({len(self)} mappings)"


def _read_source(source: Path | None) -> str:
    if source is None:
        return (
            resources.files("weather_glance.reference")
            .joinpath("data")
            .joinpath(MAPPING_RESOURCE)
            .read_text(encoding="utf-8")
        )
    return source.read_text(encoding="utf-8")


def load(source: Path | None = None) -> IconColorTable | None:
    """
    Load the icon/color table.

    Args:
        source: JSON file holding an array of mapping records, or None for
            the bundled resource.

    Returns:
        The table, or None when the source can't be read or parsed.
    """
    try:
        raw = json.loads(_read_source(source))
        mappings = _mapping_list.validate_python(raw)
    except (OSError, ValueError, ValidationError) as exc:
        log.warning("Icon mapping unavailable (%s): %s", source or MAPPING_RESOURCE, exc)
        return None

    table = IconColorTable(mappings)
    log.debug("Loaded %r from %s", table, source or MAPPING_RESOURCE)
    return table


@lru_cache(maxsize=1)
def load_default() -> IconColorTable | None:
    """Load the table configured in settings once per process."""
    return load(get_settings().icon_mapping_path)
