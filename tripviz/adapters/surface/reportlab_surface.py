"""ReportLab vector surface.

Builds a ``reportlab.graphics`` Drawing and writes it as PDF or SVG.
ReportLab's origin is the bottom-left corner, so every Y coordinate is
flipped on the way in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Sequence

from reportlab.graphics import renderPDF, renderSVG
from reportlab.graphics.shapes import Circle, Drawing, PolyLine, Rect, String
from reportlab.lib import colors

from ...domain.errors import RenderingError
from ...ports.surface import Point, TextAlign

_ANCHORS = {
    TextAlign.LEFT: "start",
    TextAlign.CENTER: "middle",
    TextAlign.RIGHT: "end",
}

VectorFormat = Literal["pdf", "svg"]


@dataclass
class ReportLabSurface:
    """Vector surface backed by a ReportLab Drawing.

    This surface implements the ExportableSurface protocol.

    Attributes:
        width: Drawing width in points
        height: Drawing height in points
        fmt: Output format used when the file suffix does not decide
        font_name: Regular font
        bold_font_name: Bold font
    """

    width: int = 600
    height: int = 400
    fmt: VectorFormat = "pdf"
    font_name: str = "Helvetica"
    bold_font_name: str = "Helvetica-Bold"

    _drawing: Drawing = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._drawing = Drawing(self.width, self.height)

    @property
    def drawing(self) -> Drawing:
        """The underlying ReportLab drawing."""
        return self._drawing

    def _y(self, y: float) -> float:
        return self.height - y

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._drawing = Drawing(width, height)

    def clear(self, color: str) -> None:
        self._drawing = Drawing(self.width, self.height)
        self._drawing.add(
            Rect(
                0,
                0,
                self.width,
                self.height,
                fillColor=colors.HexColor(color),
                strokeColor=None,
            )
        )

    def polyline(self, points: Sequence[Point], color: str, width: float = 1) -> None:
        if len(points) < 2:
            return
        flat: list[float] = []
        for x, y in points:
            flat.extend((x, self._y(y)))
        self._drawing.add(
            PolyLine(
                flat,
                strokeColor=colors.HexColor(color),
                strokeWidth=width,
                strokeLineJoin=1,
                strokeLineCap=1,
            )
        )

    def circle(self, center: Point, radius: float, fill: str) -> None:
        x, y = center
        self._drawing.add(
            Circle(
                x,
                self._y(y),
                radius,
                fillColor=colors.HexColor(fill),
                strokeColor=None,
            )
        )

    def text(
        self,
        position: Point,
        text: str,
        color: str,
        size: int = 12,
        bold: bool = False,
        align: TextAlign = TextAlign.LEFT,
    ) -> None:
        x, y = position
        self._drawing.add(
            String(
                x,
                self._y(y),
                text,
                fontName=self.bold_font_name if bold else self.font_name,
                fontSize=size,
                fillColor=colors.HexColor(color),
                textAnchor=_ANCHORS[TextAlign(align)],
            )
        )

    def to_pdf_bytes(self) -> bytes:
        return renderPDF.drawToString(self._drawing)

    def to_svg(self) -> str:
        return renderSVG.drawToString(self._drawing)

    def save(self, output_path: Path) -> Path:
        """Write the drawing to ``output_path``.

        The format follows the file suffix (.pdf or .svg) and falls back
        to ``fmt``.

        Raises:
            RenderingError: If the file cannot be written.
        """
        output_path = Path(output_path)
        suffix = output_path.suffix.lower().lstrip(".")
        fmt = suffix if suffix in ("pdf", "svg") else self.fmt

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            if fmt == "svg":
                renderSVG.drawToFile(self._drawing, str(output_path))
            else:
                renderPDF.drawToFile(self._drawing, str(output_path))
        except OSError as e:
            raise RenderingError(
                f"Cannot write {fmt.upper()}",
                cause=e,
                output_path=str(output_path),
                backend="reportlab",
            )

        self._logger.info(
            "Surface saved",
            extra={"output_path": str(output_path), "format": fmt},
        )
        return output_path
