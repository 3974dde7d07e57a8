"""Interfaces shared between the camera scheduler and native map providers."""

from __future__ import annotations

from typing import Protocol

from ..geometry import Coordinate
from .requests import CameraUpdate


class MapProvider(Protocol):
    """Minimal interface the scheduler expects from a rendering provider.

    ``move_camera`` is fire-and-forget: the provider reports the end of the
    transition through :meth:`MapProviderDelegate.on_idle`. Every delegate
    callback must be delivered on the thread that owns the scheduler.
    """

    @property
    def is_animating(self) -> bool:  # pragma: no cover - interface definition only
        ...

    @property
    def zoom(self) -> float:  # pragma: no cover - interface definition only
        ...

    @property
    def center_position(self) -> Coordinate:  # pragma: no cover - interface definition only
        ...

    camera_follows_user: bool

    def move_camera(self, update: CameraUpdate, animated: bool) -> None:  # pragma: no cover - interface definition only
        ...


class MapProviderDelegate(Protocol):
    """Callbacks a provider invokes on its owner."""

    def on_idle(self, position: Coordinate) -> None:  # pragma: no cover - interface definition only
        ...

    def on_gesture_will_move(self, is_gesture: bool) -> None:  # pragma: no cover - interface definition only
        ...

    def on_camera_position_changed(self, position: Coordinate) -> None:  # pragma: no cover - interface definition only
        ...


__all__ = ["MapProvider", "MapProviderDelegate"]
