"""Rendering ports - Abstractions for the two trip renderers.

These protocols define the contracts the facade service depends on,
so renderers can be swapped or mocked in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import Trip
    from ..domain.results import LogSheetResult, RouteMapResult
    from .surface import DrawingSurface, ExportableSurface


class RouteMapRendererPort(Protocol):
    """Port for route map rendering.

    Implementation: services/route_map.py (RouteMapRenderer)
    """

    def render(
        self,
        trip: Optional[Trip],
        surface: DrawingSurface,
    ) -> RouteMapResult:
        """Clear the surface and draw the route map of ``trip``.

        Args:
            trip: Trip to draw, or None to draw the placeholder.
            surface: Surface to draw on.

        Returns:
            Description of what was drawn.
        """
        ...


class LogSheetRendererPort(Protocol):
    """Port for daily log sheet rendering.

    Implementation: services/log_sheet.py (LogSheetRenderer)
    """

    def render(
        self,
        trip: Trip,
        log_date: str,
        surface: DrawingSurface,
    ) -> LogSheetResult:
        """Clear the surface and draw the log sheet of one calendar day.

        Args:
            trip: Trip whose duty logs are drawn.
            log_date: Target date, "YYYY-MM-DD".
            surface: Surface to draw on.

        Returns:
            Description of what was drawn.
        """
        ...


class SurfaceFactoryPort(Protocol):
    """Port for creating fresh exportable surfaces.

    Implementations: adapters/surface (PillowSurface, ReportLabSurface)
    """

    def __call__(self, width: int, height: int) -> ExportableSurface:
        """Create a new surface of the given size."""
        ...
