"""Pillow raster surface.

Draws into an in-memory RGB image and writes PNG files. Rendering is
deterministic: the same commands always give the same pixels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from io import BytesIO
from pathlib import Path
from typing import Optional, Sequence, Union

from PIL import Image, ImageDraw, ImageFont

from ...domain.errors import RenderingError
from ...ports.surface import Point, TextAlign

_ANCHORS = {
    TextAlign.LEFT: "ls",
    TextAlign.CENTER: "ms",
    TextAlign.RIGHT: "rs",
}


@lru_cache(maxsize=32)
def _load_font(
    size: int, font_path: Optional[str] = None
) -> Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]:
    """Load a font once per (size, path)."""
    if font_path:
        return ImageFont.truetype(font_path, size)
    return ImageFont.load_default(size=size)


@dataclass
class PillowSurface:
    """Raster surface backed by a Pillow image.

    This surface implements the ExportableSurface protocol.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        font_path: Optional TrueType font; Pillow's default font otherwise
    """

    width: int = 600
    height: int = 400
    font_path: Optional[str] = None

    _image: Image.Image = field(init=False, repr=False)
    _draw: ImageDraw.ImageDraw = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._new_image("#ffffff")

    def _new_image(self, color: str) -> None:
        self._image = Image.new("RGB", (self.width, self.height), color)
        self._draw = ImageDraw.Draw(self._image)

    @property
    def image(self) -> Image.Image:
        """The underlying image."""
        return self._image

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._new_image("#ffffff")

    def clear(self, color: str) -> None:
        self._draw.rectangle((0, 0, self.width, self.height), fill=color)

    def polyline(self, points: Sequence[Point], color: str, width: float = 1) -> None:
        # A single vertex strokes nothing
        if len(points) < 2:
            return
        self._draw.line(
            [(float(x), float(y)) for x, y in points],
            fill=color,
            width=max(1, round(width)),
            joint="curve",
        )

    def circle(self, center: Point, radius: float, fill: str) -> None:
        x, y = center
        self._draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=fill)

    def text(
        self,
        position: Point,
        text: str,
        color: str,
        size: int = 12,
        bold: bool = False,
        align: TextAlign = TextAlign.LEFT,
    ) -> None:
        font = _load_font(size, self.font_path)
        self._draw.text(
            position,
            text,
            fill=color,
            font=font,
            anchor=_ANCHORS[TextAlign(align)],
            stroke_width=1 if bold else 0,
            stroke_fill=color,
        )

    def to_png_bytes(self) -> bytes:
        buffer = BytesIO()
        self._image.save(buffer, format="PNG")
        return buffer.getvalue()

    def save(self, output_path: Path) -> Path:
        """Write the image to ``output_path`` as PNG.

        Raises:
            RenderingError: If the file cannot be written.
        """
        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._image.save(output_path, format="PNG")
        except OSError as e:
            raise RenderingError(
                "Cannot write PNG",
                cause=e,
                output_path=str(output_path),
                backend="pillow",
            )

        self._logger.info("Surface saved", extra={"output_path": str(output_path)})
        return output_path
