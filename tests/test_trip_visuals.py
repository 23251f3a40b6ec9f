import pytest

from tripviz.adapters.surface import RecordingSurface
from tripviz.config import LogSheetConfig, MapConfig
from tripviz.domain.errors import ConfigurationError, SurfaceUnavailableError
from tripviz.services.log_sheet import LogSheetRenderer
from tripviz.services.route_map import RouteMapRenderer
from tripviz.services.trip_visuals import TripVisualsService


class _RecordingFactory:
    """Surface factory handing out recording surfaces."""

    def __init__(self):
        self.created = []

    def __call__(self, width, height):
        surface = _SavingRecordingSurface(width, height)
        self.created.append(surface)
        return surface


class _SavingRecordingSurface(RecordingSurface):
    def save(self, output_path):
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text("\n".join(self.texts()), encoding="utf-8")
        return output_path


def _service(factory=None):
    return TripVisualsService(
        route_map_renderer=RouteMapRenderer(MapConfig()),
        log_sheet_renderer=LogSheetRenderer(LogSheetConfig()),
        surface_factory=factory,
        file_extension=".txt",
    )


def test_missing_map_surface_raises(trip):
    with pytest.raises(SurfaceUnavailableError) as err:
        _service().render_route_map(trip, None)

    assert err.value.renderer == "route_map"


def test_missing_sheet_surface_raises(trip):
    with pytest.raises(SurfaceUnavailableError) as err:
        _service().render_log_sheet(trip, "2024-03-04", None)

    assert err.value.renderer == "log_sheet"


def test_partition_of_no_trip_is_empty():
    assert _service().partition_log_dates(None) == []


def test_render_trip_gives_one_sheet_per_date(trip):
    factory = _RecordingFactory()

    rendered = _service(factory).render_trip(trip)

    assert rendered.log_dates == ["2024-03-04", "2024-03-05"]
    assert rendered.route_map.result.placeholder is False
    assert len(factory.created) == 3
    map_surface, *sheet_surfaces = factory.created
    assert (map_surface.width, map_surface.height) == (600, 400)
    assert all((s.width, s.height) == (800, 600) for s in sheet_surfaces)
    assert [s.result.entries for s in rendered.log_sheets] == [4, 2]


def test_render_trip_without_factory_raises(trip):
    with pytest.raises(ConfigurationError):
        _service().render_trip(trip)


def test_export_trip_writes_named_files(tmp_path, trip):
    written = _service(_RecordingFactory()).export_trip(trip, tmp_path / "out")

    assert [p.name for p in written] == [
        "route_map.txt",
        "eld_log_2024-03-04.txt",
        "eld_log_2024-03-05.txt",
    ]
    assert "Date: 03/05/2024" in written[2].read_text(encoding="utf-8")


def test_export_trip_uses_configured_directory(tmp_path, trip):
    service = _service(_RecordingFactory())
    service.output_dir = tmp_path / "configured"

    written = service.export_trip(trip)

    assert all(p.parent == tmp_path / "configured" for p in written)


def test_export_trip_without_any_directory_raises(trip):
    with pytest.raises(ConfigurationError):
        _service(_RecordingFactory()).export_trip(trip)
