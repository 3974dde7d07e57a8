"""Google Encoded Polyline Algorithm Format codec.

Paths are encoded as the signed deltas between successive points, scaled by a
fixed precision, zig-zag mapped to unsigned integers and packed into 5-bit
chunks offset by 63 so every chunk is a printable ASCII character.

Decoding is all-or-nothing: a malformed input raises and never yields a
partial path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..config import (
    DEFAULT_POLYLINE_PRECISION,
    POLYLINE_CHAR_OFFSET,
    POLYLINE_CHUNK_BITS,
    POLYLINE_CHUNK_MASK,
    POLYLINE_CONTINUATION_BIT,
    POLYLINE_MAX_COMPONENTS,
)
from ..errors import (
    InvalidCharacterError,
    InvalidNumberOfComponentsError,
    InvalidPositionError,
    PolylineDecodeError,
)
from .coordinate import Coordinate

LOGGER = logging.getLogger(__name__)

_MAX_CHAR = 127


def decode_points(
    encoded: str | bytes,
    precision: float = DEFAULT_POLYLINE_PRECISION,
) -> list[Coordinate]:
    """Decode *encoded* into the ordered list of coordinates it describes.

    Args:
        encoded: The path in Google's Encoded Polyline Algorithm Format.
        precision: Scale used by the encoder (``1e5`` for Google, ``1e6``
            for OSRM/Valhalla style ``polyline6``).

    Returns:
        The decoded coordinates; an empty input decodes to an empty list.

    Raises:
        InvalidPositionError: The input ends in the middle of a value.
        InvalidNumberOfComponentsError: A value spans more than six chunks.
        InvalidCharacterError: The input contains a non-polyline character.
    """

    data = _as_bytes(encoded)
    length = len(data)
    position = 0
    latitude = 0
    longitude = 0
    coordinates: list[Coordinate] = []

    while position < length:
        delta, position = _decode_value(data, position)
        latitude += delta
        delta, position = _decode_value(data, position)
        longitude += delta
        coordinates.append(Coordinate(latitude / precision, longitude / precision))

    return coordinates


def encode_points(
    coordinates: Iterable[Coordinate],
    precision: float = DEFAULT_POLYLINE_PRECISION,
) -> str:
    """Encode *coordinates* into a polyline string decodable by :func:`decode_points`."""

    chunks: list[str] = []
    prev_lat = 0
    prev_lng = 0

    for coordinate in coordinates:
        lat_int = int(round(coordinate.latitude * precision))
        lng_int = int(round(coordinate.longitude * precision))

        chunks.extend(_encode_value(lat_int - prev_lat))
        chunks.extend(_encode_value(lng_int - prev_lng))

        prev_lat = lat_int
        prev_lng = lng_int

    return "".join(chunks)


# ----------------------------------------------------------------------
def _as_bytes(encoded: str | bytes) -> bytes:
    if isinstance(encoded, str):
        try:
            return encoded.encode("ascii")
        except UnicodeEncodeError as exc:
            raise InvalidCharacterError(
                f"non-ASCII character at offset {exc.start}",
            ) from exc
    return bytes(encoded)


def _decode_value(data: bytes, position: int) -> tuple[int, int]:
    """Decode one zig-zag value starting at *position*.

    Returns the signed integer delta and the cursor just past it.
    """

    length = len(data)
    result = 0
    components = 0
    chunk = POLYLINE_CONTINUATION_BIT

    while chunk & POLYLINE_CONTINUATION_BIT and components < POLYLINE_MAX_COMPONENTS:
        if position >= length:
            raise InvalidPositionError(f"unexpected end of input at offset {position}")

        byte = data[position]
        if not POLYLINE_CHAR_OFFSET <= byte <= _MAX_CHAR:
            raise InvalidCharacterError(f"byte {byte:#04x} at offset {position}")

        chunk = byte - POLYLINE_CHAR_OFFSET
        result |= (chunk & POLYLINE_CHUNK_MASK) << (POLYLINE_CHUNK_BITS * components)
        position += 1
        components += 1

    if chunk & POLYLINE_CONTINUATION_BIT:
        raise InvalidNumberOfComponentsError(
            f"value ending at offset {position} exceeds {POLYLINE_MAX_COMPONENTS} chunks",
        )

    value = ~(result >> 1) if result & 1 else result >> 1
    return value, position


def _encode_value(value: int) -> list[str]:
    value = ~(value << 1) if value < 0 else value << 1

    chunks = []
    while value >= POLYLINE_CONTINUATION_BIT:
        chunks.append(
            chr((POLYLINE_CONTINUATION_BIT | (value & POLYLINE_CHUNK_MASK)) + POLYLINE_CHAR_OFFSET),
        )
        value >>= POLYLINE_CHUNK_BITS

    chunks.append(chr(value + POLYLINE_CHAR_OFFSET))
    return chunks


@dataclass(frozen=True)
class MapPath:
    """An immutable sequence of waypoints drawn as a line or polygon outline."""

    coordinates: tuple[Coordinate, ...]

    # ------------------------------------------------------------------
    @classmethod
    def from_points(cls, points: Sequence[Coordinate]) -> MapPath:
        return cls(tuple(points))

    # ------------------------------------------------------------------
    @classmethod
    def from_encoded(
        cls,
        encoded: str | bytes,
        precision: float = DEFAULT_POLYLINE_PRECISION,
    ) -> MapPath | None:
        """Return the path for *encoded*, or ``None`` when it is malformed."""

        try:
            coordinates = decode_points(encoded, precision)
        except PolylineDecodeError as exc:
            LOGGER.debug("Discarding malformed encoded path: %s", exc)
            return None
        return cls(tuple(coordinates))

    # ------------------------------------------------------------------
    def encoded(self, precision: float = DEFAULT_POLYLINE_PRECISION) -> str:
        return encode_points(self.coordinates, precision)

    def __len__(self) -> int:
        return len(self.coordinates)


__all__ = ["MapPath", "decode_points", "encode_points"]
