"""Bounds-fit linear projection: (lat, lng) -> surface pixels.

The projection stretches the bounding box of a point set over the
drawing surface minus a fixed padding on every side. It is a plain
affine map, not a geodesic projection. Latitude is inverted because the
surface Y axis grows downward.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..domain.models import LatLng


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding box of a set of coordinates."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    @property
    def lat_range(self) -> float:
        """Latitude span, with 1 substituted for a zero span."""
        return (self.max_lat - self.min_lat) or 1

    @property
    def lng_range(self) -> float:
        """Longitude span, with 1 substituted for a zero span."""
        return (self.max_lng - self.min_lng) or 1

    def contains(self, lat: float, lng: float) -> bool:
        return (
            self.min_lat <= lat <= self.max_lat
            and self.min_lng <= lng <= self.max_lng
        )


def compute_bounds(points: Iterable[LatLng]) -> Bounds:
    """Compute the bounding box of (lat, lng) pairs.

    Raises:
        ValueError: If ``points`` is empty.
    """
    pairs = list(points)
    if not pairs:
        raise ValueError("Cannot compute bounds of an empty point set")

    lats = [lat for lat, _ in pairs]
    lngs = [lng for _, lng in pairs]
    return Bounds(
        min_lat=min(lats),
        max_lat=max(lats),
        min_lng=min(lngs),
        max_lng=max(lngs),
    )


@dataclass(frozen=True, slots=True)
class Projection:
    """Pure function mapping (lat, lng) to (x, y) on a padded surface.

    Attributes:
        bounds: Geographic bounding box being fitted
        width: Surface width in pixels
        height: Surface height in pixels
        padding: Margin kept free on every side
    """

    bounds: Bounds
    width: float
    height: float
    padding: float

    def __call__(self, lat: float, lng: float) -> tuple[float, float]:
        b = self.bounds
        p = self.padding
        x = p + (lng - b.min_lng) / b.lng_range * (self.width - 2 * p)
        y = p + (b.max_lat - lat) / b.lat_range * (self.height - 2 * p)
        return (x, y)

    def project_all(self, points: Iterable[LatLng]) -> list[tuple[float, float]]:
        return [self(lat, lng) for lat, lng in points]


def make_projection(
    points: Iterable[LatLng],
    width: float,
    height: float,
    padding: float,
) -> Projection:
    """Build the projection fitting ``points`` into a width x height surface.

    Args:
        points: Non-empty sequence of (lat, lng) pairs.
        width: Surface width in pixels.
        height: Surface height in pixels.
        padding: Margin in pixels on every side.

    Returns:
        A Projection callable.

    Raises:
        ValueError: If ``points`` is empty.
    """
    return Projection(
        bounds=compute_bounds(points),
        width=width,
        height=height,
        padding=padding,
    )
