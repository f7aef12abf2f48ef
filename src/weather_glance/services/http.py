"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` that makes exactly one attempt
per request: no retries, no backoff. Callers pass ``timeout=`` themselves;
without one the network layer's default applies.

Usage::

    from weather_glance.services.http import session

    resp = session.get("https://api.weatherapi.com/v1/current.json", params={...})
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: Single attempt: connection errors and bad statuses surface immediately.
NO_RETRY = Retry(total=0, raise_on_status=False)

USER_AGENT = "weather-glance/0.1"


def create_session(retry: Retry | None = None) -> requests.Session:
    """
    Build a ``requests.Session`` with a single-attempt adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``NO_RETRY``).
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session; import and use directly.
session: requests.Session = create_session()
