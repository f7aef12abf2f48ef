"""Weather Glance - current weather with condition icon and color.

Architecture::

    datasources/   weatherapi.com client (URL building, fetch, decoding)
    reference/     Static icon/color table and symbolic color palette
    presenter.py   Weather + icon table → PresentationDescriptor (pure)
    state.py       Caller-owned view state: Idle → Loading → Displayed/ErrorShown
    location.py    Device location collaborator (future-based)
    renderers/     Pure view state → HTML/text
    flows/         Prefect orchestration (fetch → present → render)
    services/      Shared utilities (HTTP session)

Data flow: query → datasources (WeatherData) → presenter → state → renderers

Extension points (see each package's docstring):
  - New data source:   datasources/__init__.py
  - New renderer:      renderers/__init__.py
"""

__version__ = "0.1.0"

from weather_glance.config import Settings
from weather_glance.datasources.weatherapi import fetch_weather
from weather_glance.presenter import is_day_time, present
from weather_glance.schemas import IconColorMapping, PresentationDescriptor, WeatherData

__all__ = [
    "IconColorMapping",
    "PresentationDescriptor",
    "Settings",
    "WeatherData",
    "__version__",
    "fetch_weather",
    "is_day_time",
    "present",
]
