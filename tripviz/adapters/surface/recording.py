"""Recording surface for testing.

Instead of producing pixels, this surface keeps the list of drawing
commands issued since the last clear. Two renders are identical exactly
when their command lists are equal, which makes draw-call assertions
cheap and exact.

Example:
    surface = RecordingSurface(600, 400)
    RouteMapRenderer().render(None, surface)
    assert surface.count("polyline") == 0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Sequence

from ...ports.surface import Point, TextAlign


@dataclass(frozen=True, slots=True)
class DrawCommand:
    """One recorded drawing call."""

    op: str
    args: tuple[Any, ...]


@dataclass
class RecordingSurface:
    """Surface that records drawing commands.

    This surface implements the DrawingSurface protocol. ``clear`` drops
    every command recorded before it, like a real surface drops pixels.

    Attributes:
        width: Surface width in pixels
        height: Surface height in pixels
    """

    width: int = 600
    height: int = 400

    commands: List[DrawCommand] = field(default_factory=list, repr=False)

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.commands.clear()

    def clear(self, color: str) -> None:
        self.commands.clear()
        self.commands.append(DrawCommand("clear", (color, self.width, self.height)))

    def polyline(self, points: Sequence[Point], color: str, width: float = 1) -> None:
        self.commands.append(
            DrawCommand("polyline", (tuple(tuple(p) for p in points), color, width))
        )

    def circle(self, center: Point, radius: float, fill: str) -> None:
        self.commands.append(DrawCommand("circle", (tuple(center), radius, fill)))

    def text(
        self,
        position: Point,
        text: str,
        color: str,
        size: int = 12,
        bold: bool = False,
        align: TextAlign = TextAlign.LEFT,
    ) -> None:
        self.commands.append(
            DrawCommand("text", (tuple(position), text, color, size, bold, align))
        )

    def of(self, op: str) -> List[DrawCommand]:
        """Return recorded commands of one kind, in drawing order."""
        return [c for c in self.commands if c.op == op]

    def count(self, op: str) -> int:
        return len(self.of(op))

    def texts(self) -> List[str]:
        """Return every text drawn, in drawing order."""
        return [c.args[1] for c in self.of("text")]
