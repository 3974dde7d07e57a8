"""Provider independent map view exposing camera and marker operations."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Optional

from PySide6.QtCore import QObject, Signal

from .camera import (
    CameraUpdateScheduler,
    CompletionCallback,
    FitBoundsUpdate,
    MapProvider,
    ObservableCenterState,
    TargetUpdate,
)
from .geometry import Coordinate, CoordinateBounds
from .markers import HighlightableMarker
from .settings import CameraSettings


class MapView(QObject):
    """Drive a concrete :class:`MapProvider` through a uniform camera API.

    The view doubles as the provider's delegate: wire the provider's idle,
    gesture and camera-position callbacks to :meth:`on_idle`,
    :meth:`on_gesture_will_move` and :meth:`on_camera_position_changed`.
    """

    willMoveMap = Signal(bool, object)
    """Signal emitted with ``(is_gesture, target)`` when the camera is about to move."""

    def __init__(
        self,
        provider: MapProvider,
        *,
        settings: CameraSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._provider = provider
        self._highlighted_marker: Optional[HighlightableMarker] = None
        self._scheduler = CameraUpdateScheduler(
            provider,
            settings=settings,
            on_settled=self._select_highlighted_marker,
            parent=self,
        )
        self._scheduler.willMove.connect(self.willMoveMap)

    # ------------------------------------------------------------------
    @property
    def scheduler(self) -> CameraUpdateScheduler:
        return self._scheduler

    @property
    def center_state(self) -> ObservableCenterState:
        """Observable centre/zoom; connect to its signals to follow the camera."""

        return self._scheduler.state

    @property
    def zoom(self) -> float:
        return self._provider.zoom

    @property
    def center_position(self) -> Coordinate:
        return self._provider.center_position

    @property
    def camera_follows_user(self) -> bool:
        return self._provider.camera_follows_user

    @camera_follows_user.setter
    def camera_follows_user(self, value: bool) -> None:
        self._provider.camera_follows_user = value

    @property
    def highlighted_marker(self) -> Optional[HighlightableMarker]:
        return self._highlighted_marker

    # ------------------------------------------------------------------
    def set_marker_highlighted(self, marker: HighlightableMarker, highlighted: bool) -> bool:
        """Promote or demote *marker* as the highlighted marker.

        Only one marker is highlighted at a time; when two compete, the one
        closest to the map centre wins. Returns ``True`` when *marker* is the
        highlighted marker after the call.
        """

        current = self._highlighted_marker
        if not highlighted:
            if current is marker:
                marker.highlighted = False
                self._highlighted_marker = None
            return self._highlighted_marker is marker

        if current is not None:
            center = self.center_position
            if center.distance_to(current.position) <= center.distance_to(marker.position):
                return marker is current
            current.highlighted = False

        marker.highlighted = True
        self._highlighted_marker = marker
        return True

    # ------------------------------------------------------------------
    def set_target(self, target: Coordinate, *, silently: bool = False) -> None:
        """Centre the camera on *target* instantly, cancelling any running move."""

        self._scheduler.request_move(TargetUpdate(target), target, animated=False, silent=silently)

    # ------------------------------------------------------------------
    def animate_to_target(
        self,
        target: Coordinate,
        zoom: float | None = None,
        *,
        silently: bool = False,
        completion: CompletionCallback | None = None,
    ) -> None:
        """Animate the camera to *target*, optionally changing the zoom level."""

        self._scheduler.request_animated_move_to(
            target,
            zoom,
            silent=silently,
            completion=completion,
        )

    # ------------------------------------------------------------------
    def zoom_to_region_fitting_coordinates(
        self,
        coordinates: Iterable[Coordinate],
        *,
        silently: bool = False,
        allow_pan: bool = True,
        offset_factor: float | None = None,
        min_visible_distance: float = 0.0,
        max_visible_distance: float = math.inf,
        completion: CompletionCallback | None = None,
    ) -> None:
        """Zoom so every coordinate is visible; distances are diagonal metres."""

        self._scheduler.request_move_to_fit_region(
            coordinates,
            silent=silently,
            allow_pan=allow_pan,
            offset_factor=offset_factor,
            min_distance=min_visible_distance,
            max_distance=max_visible_distance,
            completion=completion,
        )

    # ------------------------------------------------------------------
    def zoom_to_region_fitting_bounds(
        self,
        bounds: CoordinateBounds,
        *,
        silently: bool = False,
        center_position: Coordinate | None = None,
        completion: CompletionCallback | None = None,
    ) -> None:
        """Frame *bounds*, re-centred on *center_position* when one is given."""

        framed = bounds.translate_to(center_position) if center_position is not None else bounds
        self._scheduler.request_move(
            FitBoundsUpdate(framed),
            bounds.center,
            silent=silently,
            completion=completion,
        )

    # ------------------------------------------------------------------
    # Provider delegate callbacks
    # ------------------------------------------------------------------
    def on_idle(self, position: Coordinate) -> None:
        self._scheduler.on_idle(position)

    def on_gesture_will_move(self, is_gesture: bool) -> None:
        self._scheduler.on_gesture_will_move(is_gesture)

    def on_camera_position_changed(self, position: Coordinate) -> None:
        self._scheduler.on_camera_position_changed(position)

    # ------------------------------------------------------------------
    def _select_highlighted_marker(self) -> None:
        if self._highlighted_marker is not None:
            self._highlighted_marker.select()


__all__ = ["MapView"]
