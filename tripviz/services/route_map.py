"""Route map renderer.

Draws the trip's route path as a polyline fitted to the surface, then
the current/pickup/dropoff markers and one marker per rest stop. Every
call starts from a full clear, so re-rendering the same trip onto the
same surface gives the same result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import MapConfig, get_config
from ..domain.models import GeoPoint, LatLng, Trip
from ..domain.results import MapMarker, RouteMapResult
from ..domain.styles import MARKER_COLORS, MARKER_LABELS, MarkerKind
from ..geometry.projection import Projection, make_projection
from ..ports.surface import DrawingSurface, TextAlign


@dataclass
class RouteMapRenderer:
    """Renders a trip's route and waypoints onto a drawing surface.

    This service implements RouteMapRendererPort.

    Attributes:
        config: Map drawing configuration
    """

    config: MapConfig = field(default_factory=lambda: get_config().map)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        trip: Optional[Trip],
        surface: DrawingSurface,
    ) -> RouteMapResult:
        """Clear the surface and draw the route map.

        Args:
            trip: Trip to draw, or None when no trip is available yet.
            surface: Surface to draw on.

        Returns:
            RouteMapResult describing the drawn polyline and markers.
        """
        cfg = self.config
        surface.clear(cfg.background)

        route = trip.finite_route_path if trip is not None else ()
        if trip is None or not route:
            self._draw_placeholder(surface)
            self._logger.debug(
                "Route map placeholder drawn",
                extra={"has_trip": trip is not None},
            )
            return RouteMapResult(
                placeholder=True,
                skipped_points=len(trip.route_path) if trip is not None else 0,
            )

        skipped_points = len(trip.route_path) - len(route)
        if skipped_points:
            self._logger.warning(
                "Skipping non-finite route points",
                extra={"trip_id": trip.id, "skipped": skipped_points},
            )

        planned = self._planned_markers(trip)
        fit_points: List[LatLng] = list(route)
        if cfg.fit_markers:
            fit_points.extend(
                point.as_tuple() for _, _, point in planned if point is not None
            )

        project = make_projection(fit_points, surface.width, surface.height, cfg.padding)

        surface.polyline(project.project_all(route), cfg.route_color, cfg.route_width)

        markers: List[MapMarker] = []
        skipped_markers: List[str] = []
        for kind, label, point in planned:
            if point is None:
                skipped_markers.append(label)
                continue
            markers.append(self._draw_marker(surface, project, kind, label, point))

        if skipped_markers:
            self._logger.warning(
                "Skipping markers without a usable location",
                extra={"trip_id": trip.id, "markers": skipped_markers},
            )

        self._logger.info(
            "Route map rendered",
            extra={
                "trip_id": trip.id,
                "route_points": len(route),
                "markers": len(markers),
            },
        )

        return RouteMapResult(
            placeholder=False,
            route_points=len(route),
            skipped_points=skipped_points,
            markers=tuple(markers),
            skipped_markers=tuple(skipped_markers),
        )

    def _planned_markers(
        self, trip: Trip
    ) -> List[tuple[MarkerKind, str, Optional[GeoPoint]]]:
        """List markers in drawing order; unusable locations become None."""
        planned: List[tuple[MarkerKind, str, Optional[GeoPoint]]] = [
            (kind, MARKER_LABELS[kind], point if point.is_finite else None)
            for kind, point in (
                (MarkerKind.CURRENT, trip.current_location),
                (MarkerKind.PICKUP, trip.pickup_location),
                (MarkerKind.DROPOFF, trip.dropoff_location),
            )
        ]

        prefix = MARKER_LABELS[MarkerKind.REST_STOP]
        for index, stop in enumerate(trip.rest_stops, start=1):
            location = stop.location if stop.has_drawable_location else None
            planned.append((MarkerKind.REST_STOP, f"{prefix}{index}", location))
        return planned

    def _draw_marker(
        self,
        surface: DrawingSurface,
        project: Projection,
        kind: MarkerKind,
        label: str,
        point: GeoPoint,
    ) -> MapMarker:
        cfg = self.config
        x, y = project(point.lat, point.lng)
        color = MARKER_COLORS[kind]

        surface.circle((x, y), cfg.marker_radius, color)
        surface.circle((x, y), cfg.marker_inner_radius, cfg.marker_inner_color)
        surface.text(
            (x, y - cfg.marker_label_offset),
            label,
            cfg.marker_label_color,
            size=cfg.marker_label_size,
            bold=True,
            align=TextAlign.CENTER,
        )
        return MapMarker(kind=kind, label=label, x=x, y=y, color=color)

    def _draw_placeholder(self, surface: DrawingSurface) -> None:
        cfg = self.config
        surface.text(
            (surface.width / 2, surface.height / 2),
            cfg.placeholder_text,
            cfg.placeholder_color,
            size=cfg.placeholder_size,
            align=TextAlign.CENTER,
        )
