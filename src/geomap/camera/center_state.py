"""Observed camera centre and zoom with thresholded change notifications."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..config import INITIAL_ZOOM, MINIMUM_MOVEMENT_THRESHOLD_M, ZOOM_EPSILON
from ..geometry import Coordinate


class ObservableCenterState(QObject):
    """Hold the last settled ``(center, zoom)`` and notify observers of real changes.

    Every signal carries ``(new, previous)``.
    """

    cameraPositionChanged = Signal(object, object)
    """Signal emitted for every distinct camera position reported while moving."""

    cameraZoomChanged = Signal(float, float)
    """Signal emitted when the settled zoom changes by more than float32 epsilon."""

    centerPositionChanged = Signal(object, object)
    """Signal emitted when the settled centre moves further than the threshold."""

    def __init__(
        self,
        *,
        movement_threshold: float = MINIMUM_MOVEMENT_THRESHOLD_M,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._movement_threshold = movement_threshold
        self._center = Coordinate.INVALID
        self._reported_center = Coordinate.INVALID
        self._zoom = INITIAL_ZOOM

    # ------------------------------------------------------------------
    @property
    def center(self) -> Coordinate:
        return self._center

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def movement_threshold(self) -> float:
        return self._movement_threshold

    # ------------------------------------------------------------------
    def moved_enough(self, position: Coordinate) -> bool:
        """Return ``True`` when *position* is beyond the threshold from the centre."""

        return self._center.distance_to(position) > self._movement_threshold

    # ------------------------------------------------------------------
    def update(
        self,
        center: Optional[Coordinate] = None,
        zoom: Optional[float] = None,
        *,
        silent: bool = False,
    ) -> None:
        """Store the new values and emit the signals whose threshold was crossed.

        ``None`` leaves the corresponding value untouched. The centre is
        measured against the last centre observers were told about, so a run
        of small moves still notifies once it adds up to the threshold. When
        *silent* is true the values are stored and become that baseline
        without notifying anybody.
        """

        previous_zoom = self._zoom
        if center is not None:
            self._center = center
        if zoom is not None:
            self._zoom = float(zoom)

        if silent:
            self._reported_center = self._center
            return

        if abs(self._zoom - previous_zoom) > ZOOM_EPSILON:
            self.cameraZoomChanged.emit(self._zoom, previous_zoom)

        reported = self._reported_center
        if reported.distance_to(self._center) > self._movement_threshold:
            self._reported_center = self._center
            self.centerPositionChanged.emit(self._center, reported)

    # ------------------------------------------------------------------
    def notify_camera_position(
        self,
        position: Coordinate,
        previous: Coordinate,
        *,
        silent: bool = False,
    ) -> None:
        """Forward an in-motion camera position to observers."""

        if silent or position == previous:
            return
        self.cameraPositionChanged.emit(position, previous)


__all__ = ["ObservableCenterState"]
