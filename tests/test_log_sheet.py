import pytest

from tripviz.adapters.surface import RecordingSurface
from tripviz.config import LogSheetConfig
from tripviz.domain.models import DriverInfo, DutyStatus
from tripviz.domain.styles import AMBER, BLUE, GREEN, RED
from tripviz.services.log_sheet import (
    GridGeometry,
    LogSheetRenderer,
    compute_totals,
    layout_segments,
)

from factories import make_entry, make_trip

GEOMETRY = GridGeometry(x=50, y=110, width=700, height=300)


def _render(trip, log_date="2024-03-04", config=None):
    surface = RecordingSurface()
    result = LogSheetRenderer(config or LogSheetConfig()).render(trip, log_date, surface)
    return surface, result


def _segment_polylines(surface):
    # Segments are the only polylines stroked at segment width
    return [c for c in surface.of("polyline") if c.args[2] == LogSheetConfig().segment_width]


class TestGridGeometry:
    def test_hour_to_x_is_linear(self):
        assert GEOMETRY.hour_to_x(0) == 50
        assert GEOMETRY.hour_to_x(12) == pytest.approx(400)
        assert GEOMETRY.hour_to_x(24) == pytest.approx(750)

    def test_row_middles(self):
        assert GEOMETRY.row_height == 75
        assert GEOMETRY.row_mid_y(0) == pytest.approx(147.5)
        assert GEOMETRY.row_mid_y(2) == pytest.approx(297.5)


class TestLayoutSegments:
    def test_single_driving_entry(self):
        entry = make_entry("driving", "08:00", "10:30", 2.5)

        segments, skipped = layout_segments([entry], GEOMETRY)

        assert skipped == []
        (segment,) = segments
        assert segment.color == RED
        assert segment.row == 2
        assert segment.start_hour == 8.0
        assert segment.end_hour == 10.5
        assert segment.x_start == pytest.approx(50 + 8 / 24 * 700)
        assert segment.x_end == pytest.approx(50 + 10.5 / 24 * 700)
        assert segment.y == pytest.approx(297.5)
        assert segment.start_label == "08:00"
        assert segment.end_label == "10:30"

    def test_rows_and_colors_per_status(self):
        entries = [
            make_entry("off_duty", "00:00", "06:00", 6, entry_id=1),
            make_entry("sleeper_berth", "06:00", "08:00", 2, entry_id=2),
            make_entry("driving", "08:00", "12:00", 4, entry_id=3),
            make_entry("on_duty", "12:00", "13:00", 1, entry_id=4),
        ]

        segments, _ = layout_segments(entries, GEOMETRY)

        assert [s.row for s in segments] == [0, 1, 2, 3]
        assert [s.color for s in segments] == [GREEN, BLUE, RED, AMBER]

    def test_narrow_segment_has_no_end_label(self):
        # 30 minutes is about 14.6 px on a 700 px grid
        entry = make_entry("on_duty", "08:00", "08:30", 0.5)

        (segment,), _ = layout_segments([entry], GEOMETRY)

        assert segment.pixel_width < 30
        assert segment.end_label is None
        assert segment.start_label == "08:00"

    def test_overlapping_entries_are_independent(self):
        entries = [
            make_entry("driving", "08:00", "12:00", 4, entry_id=1),
            make_entry("on_duty", "10:00", "14:00", 4, entry_id=2),
        ]

        segments, skipped = layout_segments(entries, GEOMETRY)

        assert skipped == []
        assert [(s.entry_id, s.start_hour, s.end_hour) for s in segments] == [
            (1, 8.0, 12.0),
            (2, 10.0, 14.0),
        ]

    def test_malformed_entries_are_skipped(self):
        entries = [
            make_entry("yard_move", "08:00", "09:00", 1, entry_id="bad-status"),
            make_entry("driving", "8 o'clock", "09:00", 1, entry_id="bad-time"),
            make_entry("driving", "09:00", "10:00", 1, entry_id="ok"),
        ]

        segments, skipped = layout_segments(entries, GEOMETRY)

        assert [s.entry_id for s in segments] == ["ok"]
        assert [e.id for e in skipped] == ["bad-status", "bad-time"]

    def test_seconds_are_accepted(self):
        entry = make_entry("driving", "07:15:00", "09:45:30", 2.5)

        (segment,), _ = layout_segments([entry], GEOMETRY)

        assert segment.start_hour == 7.25
        assert segment.end_hour == 9.75
        assert segment.start_label == "07:15"


class TestComputeTotals:
    def test_sums_backend_durations(self):
        entries = [
            make_entry("driving", "08:00", "10:30", 2.5),
            make_entry("driving", "11:00", "12:00", 1.0),
            make_entry("off_duty", "10:30", "11:00", 0.5),
        ]

        totals = compute_totals(entries)

        assert totals.driving == 3.5
        assert totals.off_duty == 0.5
        assert totals.sleeper_berth == 0
        assert totals.on_duty == 0
        assert totals.total == 4.0

    def test_durations_are_not_recomputed_from_times(self):
        entry = make_entry("on_duty", "08:00", "09:00", 1.75)

        assert compute_totals([entry]).on_duty == 1.75

    def test_unknown_status_is_not_counted(self):
        entries = [
            make_entry("driving", duration_hours=2.0),
            make_entry("personal_conveyance", duration_hours=5.0),
        ]

        totals = compute_totals(entries)

        assert totals.total == 2.0
        assert totals.for_status(DutyStatus.DRIVING) == 2.0


class TestLogSheetRenderer:
    def test_single_driving_entry_sheet(self):
        trip = make_trip(duty_logs=[make_entry("driving", "08:00", "10:30", 2.5)])

        surface, result = _render(trip)

        (segment,) = result.segments
        assert segment.color == RED
        assert segment.row == 2
        assert (segment.start_hour, segment.end_hour) == (8.0, 10.5)
        assert result.totals.driving == 2.5
        assert result.totals.off_duty == 0
        assert result.totals.sleeper_berth == 0
        assert result.totals.on_duty == 0
        assert len(_segment_polylines(surface)) == 1
        assert "Driving: 2.5 hrs" in surface.texts()
        assert "Off Duty: 0.0 hrs" in surface.texts()

    def test_overlapping_entries_draw_two_segments(self):
        trip = make_trip(
            duty_logs=[
                make_entry("driving", "08:00", "12:00", 4, entry_id=1),
                make_entry("on_duty", "10:00", "14:00", 4, entry_id=2),
            ]
        )

        surface, result = _render(trip)

        assert len(result.segments) == 2
        colors = [c.args[1] for c in _segment_polylines(surface)]
        assert colors == [RED, AMBER]

    def test_only_entries_of_the_date_are_drawn(self, trip):
        surface, result = _render(trip, "2024-03-05")

        assert result.entries == 2
        assert [s.entry_id for s in result.segments] == [21, 22]
        assert result.totals.sleeper_berth == 5.0
        assert result.totals.on_duty == 1.0
        assert result.totals.driving == 0
        texts = surface.texts()
        assert "00:00: Sleeper berth, Mokwa" in texts
        assert not any("Pre-trip inspection" in t for t in texts)

    def test_first_day_totals(self, trip):
        _, result = _render(trip, "2024-03-04")

        assert result.totals.driving == 9.5
        assert result.totals.on_duty == 1.0
        assert result.totals.off_duty == 0.5
        assert result.totals.sleeper_berth == 0

    def test_header_shows_driver_and_formatted_date(self, trip):
        surface, _ = _render(trip)

        texts = surface.texts()
        assert texts[0] == "ELECTRONIC LOGGING DEVICE (ELD) DAILY LOG"
        assert "Driver: Ada Okafor" in texts
        assert "License: LAG-778812" in texts
        assert "Date: 03/04/2024" in texts
        assert "Trip ID: 42" in texts

    def test_missing_driver_details_fall_back_to_na(self):
        trip = make_trip(id=None, driver_info=DriverInfo())

        surface, _ = _render(trip)

        texts = surface.texts()
        assert "Driver: N/A" in texts
        assert "License: N/A" in texts
        assert "Trip ID: N/A" in texts

    def test_grid_lines_and_labels(self):
        surface, _ = _render(make_trip())

        grid = [c for c in surface.of("polyline") if c.args[2] == 1]
        # 5 horizontal row lines and 25 hour lines
        assert len(grid) == 30
        texts = surface.texts()
        for label in ("Off Duty", "Sleeper Berth", "Driving", "On Duty (Not Driving)"):
            assert label in texts
        assert "00" in texts and "24" in texts

    def test_empty_date_draws_placeholder(self):
        surface, result = _render(make_trip(), "2024-03-04")

        assert result.is_empty
        assert result.segments == ()
        assert "No duty status records for this date" in surface.texts()
        assert result.totals.total == 0

    def test_malformed_entry_keeps_its_remark(self):
        trip = make_trip(
            duty_logs=[
                make_entry("yard_move", "09:00", "09:30", 0.5, remarks="Yard move", entry_id=7),
                make_entry("driving", "10:00", "11:00", 1.0, entry_id=8),
            ]
        )

        surface, result = _render(trip)

        assert result.skipped_entries == (7,)
        assert [s.entry_id for s in result.segments] == [8]
        assert result.totals.total == 1.0
        assert "09:00: Yard move" in surface.texts()

    def test_only_empty_remarks_are_left_out(self):
        trip = make_trip(
            duty_logs=[
                make_entry(remarks="", entry_id=1),
                make_entry(start_time="09:00", remarks=" ", entry_id=2),
                make_entry(start_time="11:00", remarks="Fuel stop", entry_id=3),
            ]
        )

        _, result = _render(trip)

        assert result.remarks == ("09:00:  ", "11:00: Fuel stop")

    def test_remarks_stop_at_bottom_margin(self):
        entries = [
            make_entry("on_duty", f"{h:02d}:00", f"{h:02d}:30", 0.5, remarks=f"Note {h}", entry_id=h)
            for h in range(20)
        ]

        surface, result = _render(make_trip(duty_logs=entries))

        # Remarks start at y=510 and the limit is 600 - 30, so 4 lines fit
        assert len(result.remarks) == 4
        assert result.truncated_remarks == 16
        assert result.remarks[0] == "00:00: Note 0"
        for command in surface.of("text"):
            if ": Note" in command.args[1]:
                assert command.args[0][1] < 570

    def test_footer_has_signature_and_date(self):
        surface, _ = _render(make_trip(), "2024-03-05")

        texts = surface.texts()
        assert texts[-2].startswith("Driver Signature: ")
        assert texts[-1] == "Date: 03/05/2024"

    def test_surface_is_resized_to_sheet_size(self):
        surface = RecordingSurface(10, 10)

        LogSheetRenderer(LogSheetConfig()).render(make_trip(), "2024-03-04", surface)

        assert (surface.width, surface.height) == (800, 600)
        assert surface.commands[0].args == ("#ffffff", 800, 600)

    def test_render_is_idempotent(self, trip):
        renderer = LogSheetRenderer(LogSheetConfig())
        surface = RecordingSurface()

        renderer.render(trip, "2024-03-04", surface)
        first = list(surface.commands)
        renderer.render(trip, "2024-03-04", surface)

        assert surface.commands == first

    def test_sheets_of_different_days_do_not_leak(self, trip):
        renderer = LogSheetRenderer(LogSheetConfig())
        surface = RecordingSurface()

        renderer.render(trip, "2024-03-04", surface)
        second_day = renderer.render(trip, "2024-03-05", surface)

        assert [s.entry_id for s in second_day.segments] == [21, 22]
        assert "Date: 03/04/2024" not in surface.texts()
