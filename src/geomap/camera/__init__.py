"""Camera request scheduling and observed camera state."""

from .center_state import ObservableCenterState
from .provider import MapProvider, MapProviderDelegate
from .queue import AnimationQueue
from .requests import (
    CameraMoveOutcome,
    CameraUpdate,
    CameraUpdateRequest,
    CompletionCallback,
    CompletionHandle,
    FitBoundsUpdate,
    TargetUpdate,
)
from .scheduler import CameraUpdateScheduler

__all__ = [
    "AnimationQueue",
    "CameraMoveOutcome",
    "CameraUpdate",
    "CameraUpdateRequest",
    "CameraUpdateScheduler",
    "CompletionCallback",
    "CompletionHandle",
    "FitBoundsUpdate",
    "MapProvider",
    "MapProviderDelegate",
    "ObservableCenterState",
    "TargetUpdate",
]
