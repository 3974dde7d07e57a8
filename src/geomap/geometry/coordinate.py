"""Geographic coordinate value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from ..config import EARTH_RADIUS_M


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees.

    Equality is exact floating point equality. Consumers that need a
    tolerance compare :meth:`distance_to` against their own threshold.
    """

    latitude: float
    longitude: float

    INVALID: ClassVar["Coordinate"]

    # ------------------------------------------------------------------
    @property
    def is_valid(self) -> bool:
        """Return ``True`` when both components lie on the globe."""

        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0

    # ------------------------------------------------------------------
    def distance_to(self, other: Coordinate) -> float:
        """Return the great-circle distance to *other* in metres.

        The distance from or to an invalid coordinate is infinite so that the
        first real position always counts as a movement.
        """

        if not (self.is_valid and other.is_valid):
            return math.inf

        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        dlat = lat2 - lat1
        dlon = math.radians(other.longitude - self.longitude)

        h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        return 2 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(h)))


# Matches the ``(-180, -180)`` sentinel native map SDKs use for "no location".
Coordinate.INVALID = Coordinate(-180.0, -180.0)


__all__ = ["Coordinate"]
