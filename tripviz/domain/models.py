"""Immutable domain models for the trip visualization engine.

All models are frozen dataclasses with slots. They mirror the trip
record produced by the planning backend and are never mutated by the
renderers. Parsing from the JSON payload lives in ``tripviz.io``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

LatLng = tuple[float, float]


class DutyStatus(str, Enum):
    """Duty-status classification of an interval in a driver's log."""

    OFF_DUTY = "off_duty"
    SLEEPER_BERTH = "sleeper_berth"
    DRIVING = "driving"
    ON_DUTY = "on_duty"

    @classmethod
    def parse(cls, value: object) -> Optional[DutyStatus]:
        """Return the matching status, or None for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class StopType(str, Enum):
    """Kind of stop scheduled by the planner."""

    BREAK = "break"
    REST = "rest"
    FUEL = "fuel"

    @classmethod
    def parse(cls, value: object) -> Optional[StopType]:
        """Return the matching stop type, or None for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair.

    Out-of-range values are accepted; they only produce visually
    degenerate output.
    """

    lat: float
    lng: float

    @property
    def is_finite(self) -> bool:
        """Check that both coordinates are finite numbers."""
        return math.isfinite(self.lat) and math.isfinite(self.lng)

    def as_tuple(self) -> LatLng:
        return (self.lat, self.lng)


@dataclass(frozen=True, slots=True)
class DriverInfo:
    """Driver details printed on the log sheet header.

    Attributes:
        full_name: Driver name, if known
        license_number: License number, if known
        current_cycle_hours: Hours already used in the current cycle
    """

    full_name: Optional[str] = None
    license_number: Optional[str] = None
    current_cycle_hours: Optional[float] = None


@dataclass(frozen=True, slots=True)
class RestStop:
    """A stop scheduled along the route.

    Attributes:
        id: Backend identifier
        stop_type: Parsed stop type, or None when unknown
        raw_stop_type: Stop type string as received
        location: Stop coordinates, if provided
        address: Optional human-readable address
        scheduled_arrival: ISO timestamp string of the planned arrival
        duration_hours: Planned stop duration
        distance_from_start_miles: Position along the route
        is_mandatory: Whether HOS rules require this stop
        reason: HOS reason for the stop
    """

    id: object = None
    stop_type: Optional[StopType] = None
    raw_stop_type: str = ""
    location: Optional[GeoPoint] = None
    address: Optional[str] = None
    scheduled_arrival: str = ""
    duration_hours: float = 0.0
    distance_from_start_miles: float = 0.0
    is_mandatory: bool = False
    reason: str = ""

    @property
    def has_drawable_location(self) -> bool:
        return self.location is not None and self.location.is_finite


@dataclass(frozen=True, slots=True)
class DutyLogEntry:
    """One duty-status interval of a driver's daily log.

    Times are kept as received ("HH:MM" or "HH:MM:SS"); they are parsed
    at render time so a malformed value only affects its own segment.

    Attributes:
        id: Backend identifier
        log_date: Calendar date, "YYYY-MM-DD"
        duty_status: Status string as received
        start_time: Start time of day
        end_time: End time of day
        duration_hours: Authoritative duration computed by the backend
        remarks: Free-text remark, may be empty
    """

    id: object = None
    log_date: str = ""
    duty_status: str = ""
    start_time: str = ""
    end_time: str = ""
    duration_hours: float = 0.0
    remarks: str = ""

    @property
    def status(self) -> Optional[DutyStatus]:
        """Parsed duty status, or None when the value is unknown."""
        return DutyStatus.parse(self.duty_status)


@dataclass(frozen=True, slots=True)
class Trip:
    """Trip aggregate returned by the planning backend.

    Attributes:
        id: Trip identifier
        status: Backend status label
        total_distance_miles: Planned distance
        estimated_drive_time_hours: Planned driving time
        requires_multiple_days: Whether the trip spans several days
        current_cycle_used_hours: Cycle hours used before the trip
        current_location: Where the driver is now
        pickup_location: Pickup point
        dropoff_location: Dropoff point
        route_path: Ordered (lat, lng) pairs of the path to draw
        rest_stops: Ordered scheduled stops
        duty_logs: Duty-status entries, not necessarily chronological
        driver_info: Driver details
    """

    id: object
    current_location: GeoPoint
    pickup_location: GeoPoint
    dropoff_location: GeoPoint
    status: str = ""
    total_distance_miles: float = 0.0
    estimated_drive_time_hours: float = 0.0
    requires_multiple_days: bool = False
    current_cycle_used_hours: float = 0.0
    route_path: tuple[LatLng, ...] = field(default_factory=tuple)
    rest_stops: tuple[RestStop, ...] = field(default_factory=tuple)
    duty_logs: tuple[DutyLogEntry, ...] = field(default_factory=tuple)
    driver_info: DriverInfo = field(default_factory=DriverInfo)

    @property
    def finite_route_path(self) -> tuple[LatLng, ...]:
        """Route points with finite coordinates, in original order."""
        return tuple(
            (lat, lng)
            for lat, lng in self.route_path
            if math.isfinite(lat) and math.isfinite(lng)
        )
