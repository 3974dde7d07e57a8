"""Default configuration values for geomap."""

from __future__ import annotations

from typing import Final

# Google's Encoded Polyline Algorithm Format stores five decimal places.
DEFAULT_POLYLINE_PRECISION: Final[float] = 1e5

# Each polyline character carries ``value + 63`` where ``value`` uses the low
# five bits for data and ``0x20`` as the continuation flag.
POLYLINE_CHAR_OFFSET: Final[int] = 63
POLYLINE_CHUNK_BITS: Final[int] = 5
POLYLINE_CHUNK_MASK: Final[int] = 0x1F
POLYLINE_CONTINUATION_BIT: Final[int] = 0x20
POLYLINE_MAX_COMPONENTS: Final[int] = 6

# Idle positions closer than this many metres to the observed centre are not
# reported while the camera follows the user, which fires very often.
MINIMUM_MOVEMENT_THRESHOLD_M: Final[float] = 10.0

# Number of animated camera requests kept while the provider is busy.
MAXIMUM_QUEUE_SIZE: Final[int] = 3

# Zoom is tracked as a 32-bit float by the providers, so changes below the
# float32 machine epsilon are noise.
ZOOM_EPSILON: Final[float] = 1.1920929e-07

# Observed zoom before the first idle event.
INITIAL_ZOOM: Final[float] = -1.0

EARTH_RADIUS_M: Final[float] = 6_371_000.0
