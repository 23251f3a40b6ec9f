"""Trip summary and HOS timeline text models.

Plain-text companions to the two pictures: the headline figures of the
trip, the stops the planner scheduled, and the list of duty-status
changes in the order the backend returned them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.models import Trip
from ..domain.styles import duty_status_color, duty_status_label
from ..domain.timefmt import format_date, format_time, format_timestamp


@dataclass(frozen=True, slots=True)
class StopLine:
    """One scheduled stop as listed in the summary."""

    title: str
    reason: str
    mile_marker: str
    duration: str
    arrival: str


@dataclass(frozen=True, slots=True)
class TimelineLine:
    """One duty-status change as listed in the HOS timeline."""

    label: str
    color: str
    date: str
    time_range: str
    duration: str
    remarks: str


@dataclass(frozen=True, slots=True)
class TripSummary:
    """Headline figures of a trip.

    Attributes:
        total_distance: Distance in whole miles
        drive_time: Driving time with one decimal
        multiple_days: "Yes" or "No"
        status: Backend status label
        license_number: Driver license, if known
        cycle_hours: Driver's current cycle hours, if known
        stops: Scheduled stops in route order
    """

    total_distance: str
    drive_time: str
    multiple_days: str
    status: str
    license_number: Optional[str] = None
    cycle_hours: Optional[float] = None
    stops: tuple[StopLine, ...] = field(default_factory=tuple)

    def format_lines(self) -> List[str]:
        """Render the summary as printable lines."""
        lines = [
            f"Total Distance: {self.total_distance}",
            f"Drive Time: {self.drive_time}",
            f"Multiple Days: {self.multiple_days}",
            f"Trip Status: {self.status}",
            f"License: {self.license_number or 'N/A'}",
            f"Current Cycle Hours: "
            f"{'N/A' if self.cycle_hours is None else f'{self.cycle_hours:g}'}",
            f"Required Stops ({len(self.stops)})",
        ]
        for stop in self.stops:
            lines.append(
                f"  {stop.title} - {stop.mile_marker}, {stop.duration}, {stop.arrival}"
            )
            if stop.reason:
                lines.append(f"    {stop.reason}")
        return lines


def summarize_trip(trip: Trip) -> TripSummary:
    """Build the summary panel of a trip."""
    stops = []
    for stop in trip.rest_stops:
        kind = stop.stop_type.value if stop.stop_type else stop.raw_stop_type
        title = kind.capitalize() + (" (Mandatory)" if stop.is_mandatory else "")
        stops.append(
            StopLine(
                title=title,
                reason=stop.reason,
                mile_marker=f"Mile {stop.distance_from_start_miles:.0f}",
                duration=f"{stop.duration_hours:g}h",
                arrival=format_timestamp(stop.scheduled_arrival),
            )
        )

    return TripSummary(
        total_distance=f"{trip.total_distance_miles:.0f} miles",
        drive_time=f"{trip.estimated_drive_time_hours:.1f} hours",
        multiple_days="Yes" if trip.requires_multiple_days else "No",
        status=trip.status,
        license_number=trip.driver_info.license_number,
        cycle_hours=trip.driver_info.current_cycle_hours,
        stops=tuple(stops),
    )


def build_timeline(trip: Trip) -> List[TimelineLine]:
    """List every duty log entry in backend order."""
    return [
        TimelineLine(
            label=duty_status_label(entry.duty_status),
            color=duty_status_color(entry.duty_status),
            date=format_date(entry.log_date),
            time_range=f"{format_time(entry.start_time)} - {format_time(entry.end_time)}",
            duration=f"{entry.duration_hours:.1f}h",
            remarks=entry.remarks,
        )
        for entry in trip.duty_logs
    ]
