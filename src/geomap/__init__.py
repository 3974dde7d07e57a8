"""Public package interface for the geomap map abstraction layer."""

from .camera import CameraMoveOutcome, CameraUpdateScheduler, FitBoundsUpdate, TargetUpdate
from .geometry import Coordinate, CoordinateBounds, MapPath, decode_points, encode_points
from .map_view import MapView
from .markers import HighlightableMarker
from .settings import CameraSettings

__all__ = [
    "CameraMoveOutcome",
    "CameraSettings",
    "CameraUpdateScheduler",
    "Coordinate",
    "CoordinateBounds",
    "FitBoundsUpdate",
    "HighlightableMarker",
    "MapPath",
    "MapView",
    "TargetUpdate",
    "decode_points",
    "encode_points",
]
