"""
Prefect flows.

Flows:
- report: fetch current weather for a query, present it, render the card

Usage (local):
    python -m weather_glance.flows.report London

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m weather_glance.flows.report London
"""
