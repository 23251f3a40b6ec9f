"""Module-level entry points bound to the default container.

These are the three calls an application layer needs:

    from tripviz import render_route_map, render_log_sheet, partition_log_dates

    render_route_map(trip, surface)
    for day in partition_log_dates(trip):
        render_log_sheet(trip, day, surface_for(day))

``trip`` may be a Trip or the backend's decoded JSON object.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from .container import get_container
from .domain.models import Trip
from .domain.results import LogSheetResult, RouteMapResult
from .io.trip_payload import parse_trip
from .ports.surface import DrawingSurface
from .services.trip_visuals import TripVisualsService

TripLike = Union[Trip, Mapping[str, Any]]


def _as_trip(trip: TripLike) -> Trip:
    if isinstance(trip, Trip):
        return trip
    return parse_trip(trip)


def _service() -> TripVisualsService:
    return get_container().resolve(TripVisualsService)


def render_route_map(
    trip: Optional[TripLike],
    surface: Optional[DrawingSurface],
) -> RouteMapResult:
    """Draw the route map of ``trip``, or the placeholder when it is None.

    Raises:
        SurfaceUnavailableError: If ``surface`` is None.
        TripDataError: If ``trip`` is neither a Trip nor a JSON object.
    """
    return _service().render_route_map(
        None if trip is None else _as_trip(trip), surface
    )


def render_log_sheet(
    trip: TripLike,
    log_date: str,
    surface: Optional[DrawingSurface],
) -> LogSheetResult:
    """Draw the ELD log sheet of ``log_date``.

    Raises:
        SurfaceUnavailableError: If ``surface`` is None.
        TripDataError: If ``trip`` is neither a Trip nor a JSON object.
    """
    return _service().render_log_sheet(_as_trip(trip), log_date, surface)


def partition_log_dates(trip: Optional[TripLike]) -> List[str]:
    """Return the distinct duty log dates of ``trip`` in ascending order."""
    return _service().partition_log_dates(None if trip is None else _as_trip(trip))
