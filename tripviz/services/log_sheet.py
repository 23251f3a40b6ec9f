"""ELD daily log sheet renderer.

Draws one calendar day of a driver's duty-status log in the familiar
paper layout:

- header with driver, license, date and trip id,
- a 4-row x 24-hour grid (Off Duty, Sleeper Berth, Driving, On Duty),
- one horizontal segment per duty-status interval,
- per-status hour totals,
- time-stamped remarks,
- signature and date footer.

Only entries logged on the target date are drawn. Totals are summed from
the backend's ``duration_hours`` and never recomputed from start and end
times. A single unreadable entry loses its segment, never the sheet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from ..config import LogSheetConfig, get_config
from ..domain.models import DutyLogEntry, DutyStatus, Trip
from ..domain.results import DutySegment, DutyTotals, LogSheetResult
from ..domain.styles import (
    DUTY_STATUS_COLORS,
    DUTY_STATUS_LABELS,
    DUTY_STATUS_ROWS,
    DUTY_STATUS_TOTAL_LABELS,
    GRAY,
    GRID_ROW_ORDER,
)
from ..domain.timefmt import format_date, format_time, fractional_hours
from ..ports.surface import DrawingSurface, TextAlign
from .day_partitioner import entries_for_date

HOURS_PER_DAY = 24

# Fixed positions of the paper form, in surface pixels
HEADER_TITLE_Y = 30
HEADER_LINE_Y = (60, 80)
HEADER_COLUMNS_X = (50, 300, 550)
ROW_LABEL_GAP = 10
TOTALS_GAP = 30
TOTALS_COLUMNS_X = (50, 200, 350, 500)
FOOTER_OFFSET = 40
FOOTER_DATE_X = 400
SIGNATURE_LINE = "_________________________"


@dataclass(frozen=True, slots=True)
class GridGeometry:
    """Placement of the 24-hour duty grid on the surface."""

    x: float
    y: float
    width: float
    height: float
    rows: int = len(DUTY_STATUS_ROWS)

    @classmethod
    def from_config(cls, config: LogSheetConfig) -> GridGeometry:
        return cls(
            x=config.grid_x,
            y=config.grid_y,
            width=config.grid_width,
            height=config.grid_height,
        )

    @property
    def row_height(self) -> float:
        return self.height / self.rows

    def hour_to_x(self, hour: float) -> float:
        """Linear interpolation of a fractional hour over the grid width."""
        return self.x + (hour / HOURS_PER_DAY) * self.width

    def row_mid_y(self, row: int) -> float:
        return self.y + row * self.row_height + self.row_height / 2


def compute_totals(entries: Iterable[DutyLogEntry]) -> DutyTotals:
    """Sum ``duration_hours`` per duty status.

    Entries with an unknown status are not counted.
    """
    sums: Dict[DutyStatus, float] = {status: 0.0 for status in DutyStatus}
    for entry in entries:
        status = entry.status
        if status is not None:
            sums[status] += entry.duration_hours
    return DutyTotals(**{status.value: hours for status, hours in sums.items()})


def layout_segments(
    entries: Iterable[DutyLogEntry],
    geometry: GridGeometry,
    min_end_label_width: float = 30.0,
) -> Tuple[List[DutySegment], List[DutyLogEntry]]:
    """Place each entry on the grid.

    Overlapping entries are placed independently; nothing is merged.

    Returns:
        The placed segments, and the entries that could not be placed
        because of an unknown status or an unreadable time.
    """
    segments: List[DutySegment] = []
    skipped: List[DutyLogEntry] = []

    for entry in entries:
        status = entry.status
        start = fractional_hours(entry.start_time)
        end = fractional_hours(entry.end_time)
        if status is None or start is None or end is None:
            skipped.append(entry)
            continue

        row = DUTY_STATUS_ROWS[status]
        x_start = geometry.hour_to_x(start)
        x_end = geometry.hour_to_x(end)
        segments.append(
            DutySegment(
                entry_id=entry.id,
                status=status,
                row=row,
                start_hour=start,
                end_hour=end,
                x_start=x_start,
                x_end=x_end,
                y=geometry.row_mid_y(row),
                color=DUTY_STATUS_COLORS[status],
                start_label=format_time(entry.start_time),
                end_label=(
                    format_time(entry.end_time)
                    if x_end - x_start > min_end_label_width
                    else None
                ),
            )
        )

    return segments, skipped


@dataclass
class LogSheetRenderer:
    """Renders one day of duty-status logs onto a drawing surface.

    This service implements LogSheetRendererPort.

    Attributes:
        config: Log sheet drawing configuration
    """

    config: LogSheetConfig = field(default_factory=lambda: get_config().log_sheet)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def geometry(self) -> GridGeometry:
        return GridGeometry.from_config(self.config)

    def render(
        self,
        trip: Trip,
        log_date: str,
        surface: DrawingSurface,
    ) -> LogSheetResult:
        """Clear the surface and draw the log sheet for ``log_date``.

        Args:
            trip: Trip whose duty logs are drawn.
            log_date: Target date, "YYYY-MM-DD".
            surface: Surface to draw on; it is resized to the sheet size.

        Returns:
            LogSheetResult with segments, totals and remarks drawn.
        """
        cfg = self.config
        geometry = self.geometry

        surface.resize(cfg.width, cfg.height)
        surface.clear(cfg.background)

        entries = entries_for_date(trip.duty_logs, log_date)

        self._draw_header(surface, trip, log_date)
        self._draw_grid(surface, geometry)

        segments, skipped = layout_segments(entries, geometry, cfg.min_end_label_width)
        if entries:
            for segment in segments:
                self._draw_segment(surface, segment)
        else:
            surface.text(
                (geometry.x + geometry.width / 2, geometry.y + geometry.height / 2),
                cfg.empty_text,
                GRAY,
                size=cfg.body_size,
                align=TextAlign.CENTER,
            )

        if skipped:
            self._logger.warning(
                "Skipping log entries that cannot be placed on the grid",
                extra={
                    "trip_id": trip.id,
                    "log_date": log_date,
                    "entry_ids": [entry.id for entry in skipped],
                },
            )

        totals = compute_totals(entries)
        totals_y = geometry.y + geometry.height + TOTALS_GAP
        self._draw_totals(surface, totals, totals_y)
        drawn, truncated = self._draw_remarks(surface, entries, totals_y)
        self._draw_footer(surface, log_date)

        self._logger.info(
            "Log sheet rendered",
            extra={
                "trip_id": trip.id,
                "log_date": log_date,
                "entries": len(entries),
                "segments": len(segments),
            },
        )

        return LogSheetResult(
            log_date=log_date,
            entries=len(entries),
            segments=tuple(segments),
            totals=totals,
            remarks=tuple(drawn),
            truncated_remarks=truncated,
            skipped_entries=tuple(entry.id for entry in skipped),
        )

    def _draw_header(self, surface: DrawingSurface, trip: Trip, log_date: str) -> None:
        cfg = self.config
        missing = cfg.missing_value
        driver = trip.driver_info

        surface.text(
            (cfg.width / 2, HEADER_TITLE_Y),
            cfg.title,
            cfg.ink,
            size=cfg.title_size,
            bold=True,
            align=TextAlign.CENTER,
        )

        first_y, second_y = HEADER_LINE_Y
        name_x, license_x, date_x = HEADER_COLUMNS_X
        trip_id = missing if trip.id is None or trip.id == "" else trip.id
        for position, text in (
            ((name_x, first_y), f"Driver: {driver.full_name or missing}"),
            ((license_x, first_y), f"License: {driver.license_number or missing}"),
            ((date_x, first_y), f"Date: {format_date(log_date)}"),
            ((name_x, second_y), f"Trip ID: {trip_id}"),
        ):
            surface.text(position, text, cfg.ink, size=cfg.body_size)

    def _draw_grid(self, surface: DrawingSurface, geometry: GridGeometry) -> None:
        cfg = self.config
        left, top = geometry.x, geometry.y
        right, bottom = left + geometry.width, top + geometry.height

        for row in range(geometry.rows + 1):
            y = top + row * geometry.row_height
            surface.polyline([(left, y), (right, y)], cfg.ink, cfg.grid_line_width)
        for hour in range(HOURS_PER_DAY + 1):
            x = geometry.hour_to_x(hour)
            surface.polyline([(x, top), (x, bottom)], cfg.ink, cfg.grid_line_width)

        for status in GRID_ROW_ORDER:
            y = geometry.row_mid_y(DUTY_STATUS_ROWS[status])
            surface.text(
                (left - ROW_LABEL_GAP, y + 3),
                DUTY_STATUS_LABELS[status],
                cfg.ink,
                size=cfg.row_label_size,
                align=TextAlign.RIGHT,
            )

        for hour in range(HOURS_PER_DAY + 1):
            surface.text(
                (geometry.hour_to_x(hour), top - 5),
                f"{hour:02d}",
                cfg.ink,
                size=cfg.hour_label_size,
                align=TextAlign.CENTER,
            )

    def _draw_segment(self, surface: DrawingSurface, segment: DutySegment) -> None:
        cfg = self.config
        surface.polyline(
            [(segment.x_start, segment.y), (segment.x_end, segment.y)],
            segment.color,
            cfg.segment_width,
        )

        label_y = segment.y - cfg.segment_label_offset
        surface.text(
            (segment.x_start, label_y),
            segment.start_label,
            cfg.ink,
            size=cfg.segment_label_size,
            align=TextAlign.CENTER,
        )
        if segment.end_label is not None:
            surface.text(
                (segment.x_end, label_y),
                segment.end_label,
                cfg.ink,
                size=cfg.segment_label_size,
                align=TextAlign.CENTER,
            )

    def _draw_totals(
        self, surface: DrawingSurface, totals: DutyTotals, totals_y: float
    ) -> None:
        cfg = self.config
        surface.text((TOTALS_COLUMNS_X[0], totals_y), "TOTALS:", cfg.ink, size=cfg.body_size)
        for x, status in zip(TOTALS_COLUMNS_X, GRID_ROW_ORDER):
            surface.text(
                (x, totals_y + 20),
                f"{DUTY_STATUS_TOTAL_LABELS[status]}: "
                f"{totals.for_status(status):.1f} hrs",
                cfg.ink,
                size=cfg.body_size,
            )

    def _draw_remarks(
        self,
        surface: DrawingSurface,
        entries: Sequence[DutyLogEntry],
        totals_y: float,
    ) -> Tuple[List[str], int]:
        """Draw remark lines until the bottom margin is reached.

        Returns:
            The lines drawn and the number of lines that did not fit.
        """
        cfg = self.config
        x = TOTALS_COLUMNS_X[0]
        surface.text((x, totals_y + 50), "REMARKS:", cfg.ink, size=cfg.body_size)

        lines = [
            f"{format_time(entry.start_time)}: {entry.remarks}"
            for entry in entries
            if entry.remarks
        ]
        limit = cfg.height - cfg.bottom_margin
        y = totals_y + 70
        drawn: List[str] = []
        for line in lines:
            if y >= limit:
                break
            surface.text((x, y), line, cfg.ink, size=cfg.remark_size)
            drawn.append(line)
            y += cfg.remark_line_height

        truncated = len(lines) - len(drawn)
        if truncated:
            self._logger.debug(
                "Remarks truncated at the bottom of the sheet",
                extra={"drawn": len(drawn), "truncated": truncated},
            )
        return drawn, truncated

    def _draw_footer(self, surface: DrawingSurface, log_date: str) -> None:
        cfg = self.config
        y = cfg.height - FOOTER_OFFSET
        surface.text(
            (TOTALS_COLUMNS_X[0], y),
            f"Driver Signature: {SIGNATURE_LINE}",
            cfg.ink,
            size=cfg.body_size,
        )
        surface.text(
            (FOOTER_DATE_X, y),
            f"Date: {format_date(log_date)}",
            cfg.ink,
            size=cfg.body_size,
        )
