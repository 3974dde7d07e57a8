"""Serialize camera transitions against an asynchronously animating provider."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from ..config import ZOOM_EPSILON
from ..geometry import Coordinate, CoordinateBounds
from ..settings import CameraSettings
from .center_state import ObservableCenterState
from .provider import MapProvider
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

LOGGER = logging.getLogger(__name__)


class CameraUpdateScheduler(QObject):
    """Own the pending camera requests and the single in-flight completion.

    A request is dispatched to the provider straight away unless the provider
    is still animating a previous one, in which case it waits in a bounded
    :class:`AnimationQueue`. Each idle report from the provider completes the
    in-flight request and dispatches the most recently queued one.

    All methods must run on the thread that owns the Qt event loop; providers
    animating on other threads marshal their callbacks first.
    """

    willMove = Signal(bool, object)
    """Signal emitted with ``(is_gesture, target)`` right before the camera moves."""

    def __init__(
        self,
        provider: MapProvider,
        *,
        settings: CameraSettings | None = None,
        on_settled: Callable[[], None] | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or CameraSettings()
        self._provider = provider
        self._on_settled = on_settled
        self._queue = AnimationQueue(self._settings.queue_size)
        self._state = ObservableCenterState(
            movement_threshold=self._settings.movement_threshold_m,
            parent=self,
        )
        self._in_flight: Optional[CameraUpdateRequest] = None
        self._last_camera_position = Coordinate.INVALID

    # ------------------------------------------------------------------
    @property
    def state(self) -> ObservableCenterState:
        """Expose the observed centre so callers can connect to its signals."""

        return self._state

    @property
    def queue(self) -> AnimationQueue:
        return self._queue

    @property
    def in_flight(self) -> Optional[CameraUpdateRequest]:
        return self._in_flight

    # ------------------------------------------------------------------
    def request_move(
        self,
        update: CameraUpdate,
        target: Coordinate,
        *,
        animated: bool = True,
        silent: bool = False,
        completion: CompletionCallback | None = None,
    ) -> None:
        """Dispatch *update* now, or queue it while the provider is animating."""

        request = CameraUpdateRequest(update, target, silent, CompletionHandle(completion))
        self._submit(request, animated)

    # ------------------------------------------------------------------
    def request_animated_move_to(
        self,
        target: Coordinate,
        zoom: float | None = None,
        *,
        silent: bool = False,
        completion: CompletionCallback | None = None,
    ) -> None:
        """Animate towards *target*, skipping the move when nothing would change."""

        current_zoom = self._provider.zoom
        zoom_changed = abs((current_zoom if zoom is None else zoom) - current_zoom) > ZOOM_EPSILON
        if target == self._provider.center_position and not zoom_changed:
            CompletionHandle(completion).resolve(CameraMoveOutcome.NO_OP)
            return

        self.request_move(
            TargetUpdate(target, zoom),
            target,
            silent=silent,
            completion=completion,
        )

    # ------------------------------------------------------------------
    def request_move_to_fit_region(
        self,
        coordinates: Iterable[Coordinate] | None = None,
        *,
        bounds: CoordinateBounds | None = None,
        silent: bool = False,
        allow_pan: bool = True,
        offset_factor: float | None = None,
        min_distance: float = 0.0,
        max_distance: float = math.inf,
        completion: CompletionCallback | None = None,
    ) -> None:
        """Frame the region covering *coordinates* (or *bounds*).

        With ``allow_pan=False`` the region is grown around the current centre
        so the camera only zooms, optionally leaving room for an offset
        centre. The diagonal is clamped to ``[min_distance, max_distance]``
        last; swapping the steps changes the framed region.
        """

        if bounds is None:
            points = list(coordinates or ())
            if not points:
                return
            bounds = CoordinateBounds.including(points)

        if not allow_pan:
            bounds = bounds.derive(self._provider.center_position)
            if offset_factor is not None:
                bounds = bounds.extend_south_east(offset_factor)

        bounds = bounds.bound_to_distance(min_distance, max_distance)
        self.request_move(
            FitBoundsUpdate(bounds),
            bounds.center,
            silent=silent,
            completion=completion,
        )

    # ------------------------------------------------------------------
    def on_idle(self, position: Coordinate) -> None:
        """Handle the provider reporting that the camera settled at *position*."""

        request, self._in_flight = self._in_flight, None
        silent = request.silent if request is not None else False

        # Tiny movements while following the user fire very often and are
        # not worth reporting.
        if self._state.moved_enough(position) or not self._provider.camera_follows_user:
            self._state.update(position, self._provider.zoom, silent=silent)
        else:
            self._state.update(zoom=self._provider.zoom, silent=silent)

        if request is not None:
            request.completion.resolve(CameraMoveOutcome.COMPLETED)

        if self._queue:
            self._submit(self._queue.pop_front(), animated=True)
            return

        if self._on_settled is not None:
            # Observers of this turn's centre/zoom signals run first.
            QTimer.singleShot(0, self._on_settled)

    # ------------------------------------------------------------------
    def on_gesture_will_move(self, is_gesture: bool) -> None:
        if is_gesture:
            self.willMove.emit(True, None)
            self._provider.camera_follows_user = False

    # ------------------------------------------------------------------
    def on_camera_position_changed(self, position: Coordinate) -> None:
        silent = self._in_flight.silent if self._in_flight is not None else False
        previous, self._last_camera_position = self._last_camera_position, position
        self._state.notify_camera_position(position, previous, silent=silent)

    # ------------------------------------------------------------------
    def _submit(self, request: CameraUpdateRequest, animated: bool) -> None:
        if animated and self._provider.is_animating:
            evicted = self._queue.push_front(request)
            LOGGER.debug("Provider busy, queued camera move to %s", request.target)
            if evicted is not None:
                self._drop(evicted)
            return

        self._provider.camera_follows_user = False
        superseded, self._in_flight = self._in_flight, request
        if superseded is not None:
            LOGGER.debug("Camera move to %s superseded by %s", superseded.target, request.target)
            superseded.completion.resolve(CameraMoveOutcome.SUPERSEDED)
            if self._in_flight is not request:
                # The callback dispatched a newer move, which already
                # superseded this request.
                return

        self.willMove.emit(False, request.target)
        LOGGER.debug("Dispatching camera move to %s (animated=%s)", request.target, animated)
        self._provider.move_camera(request.update, animated)

    # ------------------------------------------------------------------
    def _drop(self, request: CameraUpdateRequest) -> None:
        LOGGER.debug("Animation queue full, dropping camera move to %s", request.target)
        if self._settings.resolve_dropped_requests:
            request.completion.resolve(CameraMoveOutcome.SUPERSEDED)


__all__ = ["CameraUpdateScheduler"]
