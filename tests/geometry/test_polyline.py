"""Tests for the encoded polyline codec."""

import pytest

from geomap.errors import (
    InvalidCharacterError,
    InvalidNumberOfComponentsError,
    InvalidPositionError,
    PolylineDecodeError,
)
from geomap.geometry import Coordinate, MapPath, decode_points, encode_points

CANONICAL = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def test_decode_canonical_example():
    coords = decode_points(CANONICAL)

    assert len(coords) == 3
    assert coords[0] == Coordinate(38.5, -120.2)
    assert coords[1] == Coordinate(40.7, -120.95)
    assert coords[2] == Coordinate(43.252, -126.453)


def test_decode_accepts_bytes():
    assert decode_points(CANONICAL.encode("ascii")) == decode_points(CANONICAL)


def test_decode_empty_input_is_empty_path():
    assert decode_points("") == []
    assert decode_points(b"") == []


def test_decode_with_custom_precision():
    coords = [Coordinate(52.123456, 13.654321), Coordinate(52.1235, 13.6543)]
    encoded = encode_points(coords, precision=1e6)

    assert decode_points(encoded, precision=1e6) == coords


def test_round_trip_preserves_rounded_coordinates():
    coords = [
        Coordinate(0.0, 0.0),
        Coordinate(-33.86882, 151.20929),
        Coordinate(64.12652, -21.81744),
        Coordinate(-89.99999, 179.99999),
        Coordinate(89.99999, -179.99999),
    ]

    assert decode_points(encode_points(coords)) == coords


def test_encode_matches_canonical_example():
    coords = [Coordinate(38.5, -120.2), Coordinate(40.7, -120.95), Coordinate(43.252, -126.453)]

    assert encode_points(coords) == CANONICAL


@pytest.mark.parametrize(
    "encoded",
    [
        "_p~iF",  # longitude missing entirely
        "_p~iF~ps|",  # longitude ends on a continuation chunk
        "_",  # latitude ends on a continuation chunk
    ],
)
def test_truncated_input_fails(encoded):
    with pytest.raises(InvalidPositionError):
        decode_points(encoded)


def test_overlong_value_fails():
    # Six chunks that all carry the continuation bit (0x20 + 63 == '_').
    with pytest.raises(InvalidNumberOfComponentsError):
        decode_points("??______")


def test_six_chunk_value_without_trailing_continuation_is_valid():
    # Latitude "?" is zero; the longitude uses the full six chunks.
    coords = decode_points("?_____?")

    assert coords == [Coordinate(0.0, 0.0)]


@pytest.mark.parametrize("encoded", ["_p~iF ps|U", "_p~iF~ps|Ué", b"_p~iF\x00ps|U"])
def test_invalid_characters_fail(encoded):
    with pytest.raises(InvalidCharacterError):
        decode_points(encoded)


def test_failure_never_returns_partial_path():
    # The first coordinate is intact; the second one is cut short.
    broken = CANONICAL[:-2]

    with pytest.raises(PolylineDecodeError):
        decode_points(broken)
    assert MapPath.from_encoded(broken) is None


def test_map_path_from_encoded():
    path = MapPath.from_encoded(CANONICAL)

    assert path is not None
    assert len(path) == 3
    assert path.encoded() == CANONICAL


def test_map_path_from_points():
    path = MapPath.from_points([Coordinate(1.0, 2.0)])

    assert path.coordinates == (Coordinate(1.0, 2.0),)
