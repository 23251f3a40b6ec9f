"""Constant lookup tables shared by the renderers.

Marker colors and duty-status colors, rows and labels live here so the
map legend and the log sheet grid are defined in one place.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .models import DutyStatus

GREEN = "#10b981"
AMBER = "#f59e0b"
RED = "#ef4444"
PURPLE = "#8b5cf6"
BLUE = "#3b82f6"
GRAY = "#6b7280"


class MarkerKind(str, Enum):
    """Categories of points drawn on the route map."""

    CURRENT = "current"
    PICKUP = "pickup"
    DROPOFF = "dropoff"
    REST_STOP = "rest_stop"


MARKER_COLORS: Mapping[MarkerKind, str] = MappingProxyType(
    {
        MarkerKind.CURRENT: GREEN,
        MarkerKind.PICKUP: AMBER,
        MarkerKind.DROPOFF: RED,
        MarkerKind.REST_STOP: PURPLE,
    }
)

MARKER_LABELS: Mapping[MarkerKind, str] = MappingProxyType(
    {
        MarkerKind.CURRENT: "Current",
        MarkerKind.PICKUP: "Pickup",
        MarkerKind.DROPOFF: "Dropoff",
        MarkerKind.REST_STOP: "S",
    }
)

DUTY_STATUS_COLORS: Mapping[DutyStatus, str] = MappingProxyType(
    {
        DutyStatus.DRIVING: RED,
        DutyStatus.ON_DUTY: AMBER,
        DutyStatus.OFF_DUTY: GREEN,
        DutyStatus.SLEEPER_BERTH: BLUE,
    }
)

# Grid rows, top to bottom
DUTY_STATUS_ROWS: Mapping[DutyStatus, int] = MappingProxyType(
    {
        DutyStatus.OFF_DUTY: 0,
        DutyStatus.SLEEPER_BERTH: 1,
        DutyStatus.DRIVING: 2,
        DutyStatus.ON_DUTY: 3,
    }
)

DUTY_STATUS_LABELS: Mapping[DutyStatus, str] = MappingProxyType(
    {
        DutyStatus.OFF_DUTY: "Off Duty",
        DutyStatus.SLEEPER_BERTH: "Sleeper Berth",
        DutyStatus.DRIVING: "Driving",
        DutyStatus.ON_DUTY: "On Duty (Not Driving)",
    }
)

# Shorter labels used on the totals line
DUTY_STATUS_TOTAL_LABELS: Mapping[DutyStatus, str] = MappingProxyType(
    {
        DutyStatus.OFF_DUTY: "Off Duty",
        DutyStatus.SLEEPER_BERTH: "Sleeper Berth",
        DutyStatus.DRIVING: "Driving",
        DutyStatus.ON_DUTY: "On Duty",
    }
)

GRID_ROW_ORDER: tuple[DutyStatus, ...] = tuple(
    sorted(DUTY_STATUS_ROWS, key=DUTY_STATUS_ROWS.__getitem__)
)


def duty_status_color(status: object) -> str:
    """Color for a duty status; gray for anything unknown."""
    parsed = DutyStatus.parse(status)
    if parsed is None:
        return GRAY
    return DUTY_STATUS_COLORS[parsed]


def duty_status_label(status: object) -> str:
    parsed = DutyStatus.parse(status)
    if parsed is None:
        return str(status)
    return DUTY_STATUS_LABELS[parsed]
