"""Domain layer - Core models, lookup tables and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    RenderingError,
    SurfaceUnavailableError,
    TripDataError,
    TripVizError,
)
from .models import (
    DriverInfo,
    DutyLogEntry,
    DutyStatus,
    GeoPoint,
    LatLng,
    RestStop,
    StopType,
    Trip,
)
from .results import (
    DutySegment,
    DutyTotals,
    LogSheetResult,
    MapMarker,
    RouteMapResult,
)
from .styles import (
    DUTY_STATUS_COLORS,
    DUTY_STATUS_LABELS,
    DUTY_STATUS_ROWS,
    MARKER_COLORS,
    MarkerKind,
)

__all__ = [
    # Models
    "GeoPoint",
    "LatLng",
    "DutyStatus",
    "StopType",
    "DriverInfo",
    "RestStop",
    "DutyLogEntry",
    "Trip",
    # Results
    "MapMarker",
    "RouteMapResult",
    "DutyTotals",
    "DutySegment",
    "LogSheetResult",
    # Lookup tables
    "MarkerKind",
    "MARKER_COLORS",
    "DUTY_STATUS_COLORS",
    "DUTY_STATUS_ROWS",
    "DUTY_STATUS_LABELS",
    # Errors
    "TripVizError",
    "SurfaceUnavailableError",
    "TripDataError",
    "RenderingError",
    "ConfigurationError",
]
