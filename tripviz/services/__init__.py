"""Services layer - Renderers and application orchestration.

Available services:
- RouteMapRenderer: Route path and waypoint markers
- LogSheetRenderer: Daily ELD log sheet
- TripVisualsService: Main service rendering and exporting a whole trip
- partition_log_dates / group_logs_by_date: Day partitioning
- summarize_trip / build_timeline: Text summaries
"""

from .day_partitioner import entries_for_date, group_logs_by_date, partition_log_dates
from .log_sheet import GridGeometry, LogSheetRenderer, compute_totals, layout_segments
from .route_map import RouteMapRenderer
from .trip_summary import TripSummary, build_timeline, summarize_trip
from .trip_visuals import TripRenderResult, TripVisualsService

__all__ = [
    "RouteMapRenderer",
    "LogSheetRenderer",
    "GridGeometry",
    "compute_totals",
    "layout_segments",
    "partition_log_dates",
    "group_logs_by_date",
    "entries_for_date",
    "TripSummary",
    "summarize_trip",
    "build_timeline",
    "TripRenderResult",
    "TripVisualsService",
]
