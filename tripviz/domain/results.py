"""Immutable render results.

Renderers draw onto a surface and also return what they drew, so
callers and tests can inspect the layout without reading pixels.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .models import DutyStatus
from .styles import MarkerKind


@dataclass(frozen=True, slots=True)
class MapMarker:
    """A marker placed on the route map.

    Attributes:
        kind: Marker category
        label: Text drawn above the marker
        x: Surface X of the marker center
        y: Surface Y of the marker center
        color: Fill color from the marker table
    """

    kind: MarkerKind
    label: str
    x: float
    y: float
    color: str


@dataclass(frozen=True, slots=True)
class RouteMapResult:
    """Outcome of one route map render.

    Attributes:
        placeholder: True when only the placeholder message was drawn
        route_points: Number of polyline vertices drawn
        skipped_points: Route points dropped for non-finite coordinates
        markers: Markers drawn, in drawing order
        skipped_markers: Labels of markers dropped for missing locations
    """

    placeholder: bool
    route_points: int = 0
    skipped_points: int = 0
    markers: tuple[MapMarker, ...] = field(default_factory=tuple)
    skipped_markers: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class DutyTotals:
    """Hours per duty status, summed from the backend's durations."""

    off_duty: float = 0.0
    sleeper_berth: float = 0.0
    driving: float = 0.0
    on_duty: float = 0.0

    def for_status(self, status: DutyStatus) -> float:
        return getattr(self, status.value)

    @property
    def total(self) -> float:
        return self.off_duty + self.sleeper_berth + self.driving + self.on_duty


@dataclass(frozen=True, slots=True)
class DutySegment:
    """A duty-status interval placed on the log sheet grid.

    Attributes:
        entry_id: Identifier of the source log entry
        status: Duty status of the interval
        row: Grid row index (0 = top)
        start_hour: Start as fractional hours since midnight
        end_hour: End as fractional hours since midnight
        x_start: Surface X of the start
        x_end: Surface X of the end
        y: Surface Y of the row middle
        color: Stroke color from the status table
        start_label: Time label drawn above the start
        end_label: Time label drawn above the end, when wide enough
    """

    entry_id: object
    status: DutyStatus
    row: int
    start_hour: float
    end_hour: float
    x_start: float
    x_end: float
    y: float
    color: str
    start_label: str
    end_label: Optional[str] = None

    @property
    def pixel_width(self) -> float:
        return self.x_end - self.x_start


@dataclass(frozen=True, slots=True)
class LogSheetResult:
    """Outcome of one log sheet render.

    Attributes:
        log_date: Date the sheet was rendered for
        entries: Number of log entries matching the date
        segments: Segments drawn on the grid
        totals: Per-status hour totals
        remarks: Remark lines drawn, top to bottom
        truncated_remarks: Remark lines that did not fit
        skipped_entries: Ids of entries whose segment was not drawn
    """

    log_date: str
    entries: int
    segments: tuple[DutySegment, ...] = field(default_factory=tuple)
    totals: DutyTotals = field(default_factory=DutyTotals)
    remarks: tuple[str, ...] = field(default_factory=tuple)
    truncated_remarks: int = 0
    skipped_entries: tuple[object, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if no log entry matched the date."""
        return self.entries == 0
