"""Top-level package for the trip visualization engine.

Turns a trip record from the planning backend into a projected route
map and one ELD duty-status log sheet per calendar day.
"""

from .api import partition_log_dates, render_log_sheet, render_route_map

__all__ = ["render_route_map", "render_log_sheet", "partition_log_dates"]
