"""Surface adapters - Implementations of the DrawingSurface port.

Available implementations:
- RecordingSurface: Records drawing commands (testing)
- PillowSurface: PNG raster images
- ReportLabSurface: PDF and SVG vector drawings
"""

from __future__ import annotations

from typing import Callable, Optional

from ...domain.errors import ConfigurationError
from .pillow_surface import PillowSurface
from .recording import DrawCommand, RecordingSurface
from .reportlab_surface import ReportLabSurface

FORMAT_EXTENSIONS = {"png": ".png", "pdf": ".pdf", "svg": ".svg"}


def surface_factory(
    backend: str, fmt: Optional[str] = None
) -> Callable[[int, int], object]:
    """Return a callable creating fresh surfaces for a backend and format.

    Without a format, Pillow writes PNG and ReportLab writes PDF.

    Raises:
        ConfigurationError: If the backend cannot produce the format.
    """
    if backend == "pillow":
        if fmt not in (None, "png"):
            raise ConfigurationError(
                f"Pillow backend cannot write {fmt!r}",
                setting_name="export.default_format",
                expected_type="png",
            )
        return lambda width, height: PillowSurface(width, height)
    if backend == "reportlab":
        fmt = fmt or "pdf"
        if fmt not in ("pdf", "svg"):
            raise ConfigurationError(
                f"ReportLab backend cannot write {fmt!r}",
                setting_name="export.default_format",
                expected_type="pdf | svg",
            )
        return lambda width, height: ReportLabSurface(width, height, fmt=fmt)
    raise ConfigurationError(
        f"Unknown surface backend {backend!r}",
        setting_name="export.backend",
        expected_type="pillow | reportlab",
    )


__all__ = [
    "DrawCommand",
    "RecordingSurface",
    "PillowSurface",
    "ReportLabSurface",
    "FORMAT_EXTENSIONS",
    "surface_factory",
]
