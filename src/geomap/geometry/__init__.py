"""Coordinate, bounds and encoded path helpers."""

from .bounds import CoordinateBounds
from .coordinate import Coordinate
from .polyline import MapPath, decode_points, encode_points

__all__ = ["Coordinate", "CoordinateBounds", "MapPath", "decode_points", "encode_points"]
