"""Shared fixtures: a realistic two-day trip and clean global state."""

from __future__ import annotations

import copy

import pytest

from tripviz.config import reset_config
from tripviz.container import reset_container
from tripviz.domain.models import Trip
from tripviz.io import parse_trip

TRIP_PAYLOAD = {
    "id": 42,
    "driver": 7,
    "driver_info": {
        "id": 7,
        "full_name": "Ada Okafor",
        "license_number": "LAG-778812",
        "current_cycle_hours": 7,
    },
    "status": "planned",
    "current_location": {"lat": 6.5244, "lng": 3.3792},
    "pickup_location": {"lat": 7.3775, "lng": 3.947},
    "dropoff_location": {"lat": 9.0765, "lng": 7.3986},
    "total_distance_miles": 473.6,
    "estimated_drive_time_hours": 9.47,
    "current_cycle_used_hours": 7,
    "route_coordinates": [
        [6.5244, 3.3792],
        [6.9, 3.6],
        [7.3775, 3.947],
        [8.1, 5.2],
        [9.0765, 7.3986],
    ],
    "rest_stops": [
        {
            "id": 1,
            "stop_type": "break",
            "location": {"lat": 7.9, "lng": 4.6, "address": "Ogbomosho"},
            "scheduled_arrival": "2024-03-04T13:00:00Z",
            "duration_hours": 0.5,
            "distance_from_start_miles": 210.4,
            "is_mandatory": True,
            "hos_reason": "30-minute break after 8 hours driving",
        },
        {
            "id": 2,
            "stop_type": "rest",
            "location": {"lat": 8.6, "lng": 6.3},
            "scheduled_arrival": "2024-03-04T19:00:00Z",
            "duration_hours": 10,
            "distance_from_start_miles": 401.0,
            "is_mandatory": True,
            "hos_reason": "10-hour off-duty reset",
        },
    ],
    "eld_logs": [
        {
            "id": 11,
            "log_date": "2024-03-04",
            "duty_status": "on_duty",
            "start_time": "06:00:00",
            "end_time": "07:00:00",
            "duration_hours": 1.0,
            "remarks": "Pre-trip inspection, Lagos",
        },
        {
            "id": 12,
            "log_date": "2024-03-04",
            "duty_status": "driving",
            "start_time": "07:00:00",
            "end_time": "13:00:00",
            "duration_hours": 6.0,
            "remarks": "",
        },
        {
            "id": 13,
            "log_date": "2024-03-04",
            "duty_status": "off_duty",
            "start_time": "13:00:00",
            "end_time": "13:30:00",
            "duration_hours": 0.5,
            "remarks": "30-minute break",
        },
        {
            "id": 21,
            "log_date": "2024-03-05",
            "duty_status": "sleeper_berth",
            "start_time": "00:00:00",
            "end_time": "05:00:00",
            "duration_hours": 5.0,
            "remarks": "Sleeper berth, Mokwa",
        },
        {
            "id": 14,
            "log_date": "2024-03-04",
            "duty_status": "driving",
            "start_time": "13:30:00",
            "end_time": "17:00:00",
            "duration_hours": 3.5,
            "remarks": "",
        },
        {
            "id": 22,
            "log_date": "2024-03-05",
            "duty_status": "on_duty",
            "start_time": "05:00:00",
            "end_time": "06:00:00",
            "duration_hours": 1.0,
            "remarks": "Unloading, Abuja",
        },
    ],
    "requires_multiple_days": True,
}


@pytest.fixture(autouse=True)
def clean_global_state(monkeypatch):
    """Fresh configuration and container for every test."""
    for name in ("TRIPVIZ_EXPORT_BACKEND", "TRIPVIZ_EXPORT_DEFAULT_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def trip_payload():
    return copy.deepcopy(TRIP_PAYLOAD)


@pytest.fixture
def trip(trip_payload) -> Trip:
    return parse_trip(trip_payload)

