"""Static presentation reference data.

Reference data that doesn't change with API calls: the condition code →
icon/color table bundled in ``data/`` and the symbolic color palette.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from weather_glance.reference.icon_table import IconColorTable as IconColorTable
from weather_glance.reference.palette import SystemColor as SystemColor
from weather_glance.reference.palette import resolve_color as resolve_color
