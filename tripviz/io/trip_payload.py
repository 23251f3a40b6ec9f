"""Reading trip records produced by the planning backend.

The backend returns a JSON object (see ``parse_trip``). Parsing is
lenient: missing optional fields get defaults and unreadable nested
records are skipped with a warning, so a partially broken payload still
renders. Only a payload that is not an object at all is rejected.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ..domain.errors import TripDataError
from ..domain.models import (
    DriverInfo,
    DutyLogEntry,
    GeoPoint,
    LatLng,
    RestStop,
    StopType,
    Trip,
)

logger = logging.getLogger(__name__)

_NAN = float("nan")
_TRUE_TEXT = frozenset({"true", "yes", "1"})


def _as_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _as_bool(value: Any) -> bool:
    """Read a JSON flag; strings such as "false" or "no" are False."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_TEXT
    return bool(value)


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _geo_point(value: Any) -> Optional[GeoPoint]:
    """Read a {lat, lng} mapping; unreadable numbers become NaN."""
    if not isinstance(value, Mapping):
        return None
    return GeoPoint(
        lat=_as_float(value.get("lat"), _NAN),
        lng=_as_float(value.get("lng"), _NAN),
    )


def _route_point(value: Any) -> LatLng:
    if isinstance(value, (list, tuple)) and len(value) >= 2:
        return (_as_float(value[0], _NAN), _as_float(value[1], _NAN))
    logger.warning("Unreadable route point", extra={"value": repr(value)})
    return (_NAN, _NAN)


def _rest_stop(value: Mapping[str, Any]) -> RestStop:
    location = value.get("location")
    raw_type = _as_text(value.get("stop_type"))
    return RestStop(
        id=value.get("id"),
        stop_type=StopType.parse(raw_type),
        raw_stop_type=raw_type,
        location=_geo_point(location),
        address=(
            _optional_text(location.get("address"))
            if isinstance(location, Mapping)
            else None
        ),
        scheduled_arrival=_as_text(value.get("scheduled_arrival")),
        duration_hours=_as_float(value.get("duration_hours")),
        distance_from_start_miles=_as_float(value.get("distance_from_start_miles")),
        is_mandatory=_as_bool(value.get("is_mandatory", False)),
        reason=_as_text(value.get("hos_reason")),
    )


def _duty_log(value: Mapping[str, Any]) -> DutyLogEntry:
    return DutyLogEntry(
        id=value.get("id"),
        log_date=_as_text(value.get("log_date")),
        duty_status=_as_text(value.get("duty_status")),
        start_time=_as_text(value.get("start_time")),
        end_time=_as_text(value.get("end_time")),
        duration_hours=_as_float(value.get("duration_hours")),
        remarks=_as_text(value.get("remarks")),
    )


def _driver_info(value: Any) -> DriverInfo:
    if not isinstance(value, Mapping):
        return DriverInfo()
    cycle = value.get("current_cycle_hours")
    return DriverInfo(
        full_name=_optional_text(value.get("full_name")),
        license_number=_optional_text(value.get("license_number")),
        current_cycle_hours=None if cycle is None else _as_float(cycle),
    )


def _records(payload: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    raw = payload.get(key) or []
    if not isinstance(raw, (list, tuple)):
        logger.warning("Ignoring non-list field", extra={"field": key})
        return []
    records = []
    for index, item in enumerate(raw):
        if isinstance(item, Mapping):
            records.append(item)
        else:
            logger.warning(
                "Skipping unreadable record",
                extra={"field": key, "index": index},
            )
    return records


def parse_trip(payload: Any) -> Trip:
    """Build a Trip from the backend's JSON-shaped trip record.

    Args:
        payload: Decoded JSON object.

    Returns:
        The immutable Trip aggregate.

    Raises:
        TripDataError: If the payload is not a JSON object.
    """
    if not isinstance(payload, Mapping):
        raise TripDataError(
            f"Trip payload must be an object, got {type(payload).__name__}"
        )

    missing = GeoPoint(_NAN, _NAN)
    route = payload.get("route_coordinates") or []
    if not isinstance(route, (list, tuple)):
        logger.warning("Ignoring non-list field", extra={"field": "route_coordinates"})
        route = []

    trip = Trip(
        id=payload.get("id"),
        status=_as_text(payload.get("status")),
        total_distance_miles=_as_float(payload.get("total_distance_miles")),
        estimated_drive_time_hours=_as_float(payload.get("estimated_drive_time_hours")),
        requires_multiple_days=_as_bool(
            payload.get("requires_multiple_days", False)
        ),
        current_cycle_used_hours=_as_float(payload.get("current_cycle_used_hours")),
        current_location=_geo_point(payload.get("current_location")) or missing,
        pickup_location=_geo_point(payload.get("pickup_location")) or missing,
        dropoff_location=_geo_point(payload.get("dropoff_location")) or missing,
        route_path=tuple(_route_point(point) for point in route),
        rest_stops=tuple(_rest_stop(r) for r in _records(payload, "rest_stops")),
        duty_logs=tuple(_duty_log(r) for r in _records(payload, "eld_logs")),
        driver_info=_driver_info(payload.get("driver_info")),
    )

    logger.debug(
        "Trip parsed",
        extra={
            "trip_id": trip.id,
            "route_points": len(trip.route_path),
            "rest_stops": len(trip.rest_stops),
            "duty_logs": len(trip.duty_logs),
        },
    )
    return trip


def load_trip(path: Union[str, Path]) -> Trip:
    """Read a trip record from a JSON file.

    Raises:
        TripDataError: If the file cannot be read or decoded.
    """
    file_path = Path(path)
    try:
        with file_path.open(encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise TripDataError(f"Cannot read trip file {file_path}", cause=e)
    return parse_trip(payload)
