"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, query types, URL building
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Only one provider is supported: ``weatherapi/`` (weatherapi.com).

Fetch functions follow the same shape::

    from weather_glance.services.http import session

    def fetch_something(url: str) -> Model:
        resp = session.get(url)
        resp.raise_for_status()
        return Model.model_validate(resp.json())

Transport and decoding failures are translated into the ``errors`` taxonomy
(``NetworkError``, ``EmptyResponseError``, ``ParseError``) so callers never
see ``requests`` or ``pydantic`` exceptions.
"""
