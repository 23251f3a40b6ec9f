"""Drawing surface port - Abstraction for 2D drawing backends.

Both renderers only ever talk to this protocol, so a raster image, a
vector document or a command recorder can stand behind it.

Coordinates are surface pixels with the origin at the top-left corner
and Y growing downward. Text positions are baselines, like an HTML
canvas ``fillText`` call.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

Point = tuple[float, float]


class TextAlign(str, Enum):
    """Horizontal anchoring of a text position."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@runtime_checkable
class DrawingSurface(Protocol):
    """Port for a 2D drawing surface.

    Implementations:
    - adapters/surface/recording.py (RecordingSurface) - Testing
    - adapters/surface/pillow_surface.py (PillowSurface) - PNG raster
    - adapters/surface/reportlab_surface.py (ReportLabSurface) - PDF/SVG
    """

    @property
    def width(self) -> int:
        """Surface width in pixels."""
        ...

    @property
    def height(self) -> int:
        """Surface height in pixels."""
        ...

    def resize(self, width: int, height: int) -> None:
        """Change the surface size, discarding its content."""
        ...

    def clear(self, color: str) -> None:
        """Discard everything drawn so far and fill with ``color``."""
        ...

    def polyline(self, points: Sequence[Point], color: str, width: float = 1) -> None:
        """Stroke a connected line through ``points`` in order."""
        ...

    def circle(self, center: Point, radius: float, fill: str) -> None:
        """Fill a circle."""
        ...

    def text(
        self,
        position: Point,
        text: str,
        color: str,
        size: int = 12,
        bold: bool = False,
        align: TextAlign = TextAlign.LEFT,
    ) -> None:
        """Draw a single line of text with its baseline at ``position``."""
        ...


class ExportableSurface(DrawingSurface, Protocol):
    """A drawing surface that can be written to a file."""

    def save(self, output_path: Path) -> Path:
        """Write the surface content to ``output_path``.

        Returns:
            The path that was written.
        """
        ...
