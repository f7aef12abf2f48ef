"""
Shared services.

- http.py - requests session used by every datasource (single attempt, no retry)
"""
