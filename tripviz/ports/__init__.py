"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the rendering core and the drawing
backends. They enable dependency injection and make the system testable.

This module follows the Hexagonal Architecture pattern:
- Input ports: How the application is driven (renderers)
- Output ports: How the application drives external systems (surfaces)
"""

from .rendering import LogSheetRendererPort, RouteMapRendererPort, SurfaceFactoryPort
from .surface import DrawingSurface, ExportableSurface, Point, TextAlign

__all__ = [
    # Surfaces
    "DrawingSurface",
    "ExportableSurface",
    "Point",
    "TextAlign",
    # Rendering
    "RouteMapRendererPort",
    "LogSheetRendererPort",
    "SurfaceFactoryPort",
]
