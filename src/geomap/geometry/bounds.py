"""Rectangular latitude/longitude regions used to frame the camera."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from ..config import EARTH_RADIUS_M
from .coordinate import Coordinate

_METRES_PER_DEGREE = math.pi * EARTH_RADIUS_M / 180.0


def _wrap_longitude(longitude: float) -> float:
    """Fold *longitude* onto ``[-180, 180]``, leaving in-range values untouched."""

    if -180.0 <= longitude <= 180.0:
        return longitude
    return (longitude + 180.0) % 360.0 - 180.0


@dataclass(frozen=True, slots=True)
class CoordinateBounds:
    """Axis-aligned region spanning from ``south_west`` to ``north_east``.

    Longitudes are kept continuous: a region crossing the antimeridian has an
    east edge beyond ``180``. :attr:`center` and :attr:`diagonal_distance`
    fold the corners back onto the globe.
    """

    south_west: Coordinate
    north_east: Coordinate

    # ------------------------------------------------------------------
    @classmethod
    def including(cls, coordinates: Iterable[Coordinate]) -> CoordinateBounds:
        """Return the smallest bounds containing every coordinate."""

        points = list(coordinates)
        if not points:
            raise ValueError("bounds need at least one coordinate")

        latitudes = [point.latitude for point in points]
        longitudes = [point.longitude for point in points]
        return cls(
            Coordinate(min(latitudes), min(longitudes)),
            Coordinate(max(latitudes), max(longitudes)),
        )

    # ------------------------------------------------------------------
    @property
    def center(self) -> Coordinate:
        return Coordinate(self._mid_latitude, _wrap_longitude(self._mid_longitude))

    @property
    def latitude_span(self) -> float:
        return self.north_east.latitude - self.south_west.latitude

    @property
    def longitude_span(self) -> float:
        return self.north_east.longitude - self.south_west.longitude

    @property
    def diagonal_distance(self) -> float:
        """Distance in metres between the south-west and north-east corners."""

        south_west = Coordinate(self.south_west.latitude, _wrap_longitude(self.south_west.longitude))
        north_east = Coordinate(self.north_east.latitude, _wrap_longitude(self.north_east.longitude))
        return south_west.distance_to(north_east)

    @property
    def _mid_latitude(self) -> float:
        return (self.south_west.latitude + self.north_east.latitude) / 2.0

    @property
    def _mid_longitude(self) -> float:
        return (self.south_west.longitude + self.north_east.longitude) / 2.0

    # ------------------------------------------------------------------
    def derive(self, center: Coordinate) -> CoordinateBounds:
        """Return the smallest bounds centred on *center* that contain ``self``.

        Framing these bounds keeps *center* in the middle of the viewport, so
        the camera zooms without panning. *center* is taken on the same side
        of the antimeridian as ``self``.
        """

        longitude = center.longitude + 360.0 * round((self._mid_longitude - center.longitude) / 360.0)
        half_lat = max(
            abs(self.north_east.latitude - center.latitude),
            abs(center.latitude - self.south_west.latitude),
        )
        half_lng = max(
            abs(self.north_east.longitude - longitude),
            abs(longitude - self.south_west.longitude),
        )
        return self._around(Coordinate(center.latitude, longitude), half_lat, half_lng)

    # ------------------------------------------------------------------
    def extend_south_east(self, offset_factor: float) -> CoordinateBounds:
        """Grow the south and east edges by *offset_factor* of the current spans.

        The result leaves room for a map centre that is visually offset
        towards the north-west, e.g. by an overlay covering part of the map.
        """

        return CoordinateBounds(
            Coordinate(
                max(self.south_west.latitude - self.latitude_span * offset_factor, -90.0),
                self.south_west.longitude,
            ),
            Coordinate(
                self.north_east.latitude,
                self.north_east.longitude + self.longitude_span * offset_factor,
            ),
        )

    # ------------------------------------------------------------------
    def bound_to_distance(self, minimum: float = 0.0, maximum: float = math.inf) -> CoordinateBounds:
        """Scale the bounds around their centre so the diagonal fits ``[minimum, maximum]``.

        Bounds whose corners are not on the globe have no measurable diagonal
        and are returned unchanged.
        """

        if minimum > maximum:
            raise ValueError(f"minimum distance {minimum} exceeds maximum {maximum}")

        distance = self.diagonal_distance
        if not math.isfinite(distance) or minimum <= distance <= maximum:
            return self

        center = Coordinate(self._mid_latitude, self._mid_longitude)
        if distance == 0.0:
            # A single point has no span to scale; open a square whose
            # diagonal is the requested minimum.
            half = minimum / (2.0 * math.sqrt(2.0) * _METRES_PER_DEGREE)
            half_lng = half / max(math.cos(math.radians(center.latitude)), 1e-12)
            return self._around(center, half, half_lng)

        target = minimum if distance < minimum else maximum
        factor = target / distance
        return self._around(
            center,
            self.latitude_span * factor / 2.0,
            self.longitude_span * factor / 2.0,
        )

    # ------------------------------------------------------------------
    def translate_to(self, center: Coordinate) -> CoordinateBounds:
        """Return bounds with the same spans, centred on *center*."""

        return self._around(center, self.latitude_span / 2.0, self.longitude_span / 2.0)

    # ------------------------------------------------------------------
    @staticmethod
    def _around(center: Coordinate, half_lat: float, half_lng: float) -> CoordinateBounds:
        return CoordinateBounds(
            Coordinate(max(center.latitude - half_lat, -90.0), center.longitude - half_lng),
            Coordinate(min(center.latitude + half_lat, 90.0), center.longitude + half_lng),
        )


__all__ = ["CoordinateBounds"]
