"""Input abstractions for the trip visualization engine.

Turns the backend's JSON trip record into domain models.
"""

from .trip_payload import load_trip, parse_trip

__all__ = ["parse_trip", "load_trip"]
