"""Trip visuals service - Main orchestrator.

Wires the route map renderer, the day partitioner and the log sheet
renderer together, checks the surface precondition, and writes rendered
surfaces to files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..domain.errors import ConfigurationError, SurfaceUnavailableError
from ..domain.models import Trip
from ..domain.results import LogSheetResult, RouteMapResult
from ..ports.rendering import (
    LogSheetRendererPort,
    RouteMapRendererPort,
    SurfaceFactoryPort,
)
from ..ports.surface import DrawingSurface, ExportableSurface
from .day_partitioner import partition_log_dates


@dataclass
class RenderedMap:
    """A route map surface and what was drawn on it."""

    surface: ExportableSurface
    result: RouteMapResult


@dataclass
class RenderedSheet:
    """A log sheet surface and what was drawn on it."""

    log_date: str
    surface: ExportableSurface
    result: LogSheetResult


@dataclass
class TripRenderResult:
    """Every picture of a trip: one map and one sheet per log date."""

    route_map: RenderedMap
    log_sheets: List[RenderedSheet] = field(default_factory=list)

    @property
    def log_dates(self) -> List[str]:
        return [sheet.log_date for sheet in self.log_sheets]


@dataclass
class TripVisualsService:
    """Main service producing the visual artifacts of a trip.

    This service orchestrates:
    1. Route map rendering
    2. Partitioning duty logs into calendar days
    3. One log sheet render per day
    4. Optional export to files

    Attributes:
        route_map_renderer: Draws the route map
        log_sheet_renderer: Draws a daily log sheet
        surface_factory: Creates fresh surfaces for render_trip/export_trip
        file_extension: Extension of exported files, e.g. ".png"
        map_size: (width, height) of map surfaces created by the factory
        sheet_size: (width, height) of sheet surfaces created by the factory
        output_dir: Directory used by export_trip when none is given
    """

    route_map_renderer: RouteMapRendererPort
    log_sheet_renderer: LogSheetRendererPort
    surface_factory: Optional[SurfaceFactoryPort] = None
    file_extension: str = ".png"
    map_size: tuple[int, int] = (600, 400)
    sheet_size: tuple[int, int] = (800, 600)
    output_dir: Optional[Path] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render_route_map(
        self,
        trip: Optional[Trip],
        surface: Optional[DrawingSurface],
    ) -> RouteMapResult:
        """Draw the route map of ``trip`` (or the placeholder) on ``surface``.

        Raises:
            SurfaceUnavailableError: If no surface is given.
        """
        if surface is None:
            raise SurfaceUnavailableError(
                "No drawing surface available for the route map",
                renderer="route_map",
            )
        return self.route_map_renderer.render(trip, surface)

    def render_log_sheet(
        self,
        trip: Trip,
        log_date: str,
        surface: Optional[DrawingSurface],
    ) -> LogSheetResult:
        """Draw the log sheet of ``log_date`` on ``surface``.

        Raises:
            SurfaceUnavailableError: If no surface is given.
        """
        if surface is None:
            raise SurfaceUnavailableError(
                f"No drawing surface available for the log sheet of {log_date}",
                renderer="log_sheet",
            )
        return self.log_sheet_renderer.render(trip, log_date, surface)

    def partition_log_dates(self, trip: Optional[Trip]) -> List[str]:
        """Return the dates that get a log sheet, in ascending order."""
        if trip is None:
            return []
        return partition_log_dates(trip.duty_logs)

    def render_trip(self, trip: Trip) -> TripRenderResult:
        """Render the route map and every daily log sheet on fresh surfaces.

        Raises:
            ConfigurationError: If no surface factory is configured.
        """
        factory = self._require_factory()

        map_surface = factory(*self.map_size)
        rendered = TripRenderResult(
            route_map=RenderedMap(
                surface=map_surface,
                result=self.render_route_map(trip, map_surface),
            )
        )

        for log_date in self.partition_log_dates(trip):
            sheet_surface = factory(*self.sheet_size)
            rendered.log_sheets.append(
                RenderedSheet(
                    log_date=log_date,
                    surface=sheet_surface,
                    result=self.render_log_sheet(trip, log_date, sheet_surface),
                )
            )

        self._logger.info(
            "Trip rendered",
            extra={"trip_id": trip.id, "log_sheets": len(rendered.log_sheets)},
        )
        return rendered

    def export_trip(
        self, trip: Trip, output_dir: Optional[Path] = None
    ) -> List[Path]:
        """Render a trip and write every picture into ``output_dir``.

        Files are named ``route_map<ext>`` and ``eld_log_<date><ext>``.

        Returns:
            The written paths, map first, sheets in date order.

        Raises:
            ConfigurationError: If no surface factory or output directory
                is configured.
            RenderingError: If a file cannot be written.
        """
        output_dir = output_dir or self.output_dir
        if output_dir is None:
            raise ConfigurationError(
                "No output directory configured",
                setting_name="export.output_dir",
            )
        output_dir = Path(output_dir)
        rendered = self.render_trip(trip)

        written = [
            rendered.route_map.surface.save(output_dir / f"route_map{self.file_extension}")
        ]
        for sheet in rendered.log_sheets:
            written.append(
                sheet.surface.save(
                    output_dir / f"eld_log_{sheet.log_date}{self.file_extension}"
                )
            )

        self._logger.info(
            "Trip exported",
            extra={"trip_id": trip.id, "files": len(written), "output_dir": str(output_dir)},
        )
        return written

    def _require_factory(self) -> SurfaceFactoryPort:
        if self.surface_factory is None:
            raise ConfigurationError(
                "No surface factory configured",
                setting_name="surface_factory",
            )
        return self.surface_factory
