"""Geometry helpers shared by the renderers."""

from .projection import Bounds, Projection, compute_bounds, make_projection

__all__ = ["Bounds", "Projection", "compute_bounds", "make_projection"]
