"""Value objects describing camera transitions and their completion."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional, Union

from ..errors import CompletionAlreadyResolvedError
from ..geometry import Coordinate, CoordinateBounds


class CameraMoveOutcome(enum.Enum):
    """Final state reported to a camera request's completion."""

    COMPLETED = "completed"
    SUPERSEDED = "superseded"
    NO_OP = "no_op"

    @property
    def did_change(self) -> bool:
        return self is CameraMoveOutcome.COMPLETED


CompletionCallback = Callable[[CameraMoveOutcome], None]


class CompletionHandle:
    """One-shot owner of a request's completion callback.

    The handle is resolved exactly once; the scheduler keeps at most one
    unresolved handle in flight.
    """

    __slots__ = ("_callback", "_outcome")

    def __init__(self, callback: Optional[CompletionCallback] = None) -> None:
        self._callback = callback
        self._outcome: Optional[CameraMoveOutcome] = None

    @property
    def resolved(self) -> bool:
        return self._outcome is not None

    @property
    def outcome(self) -> Optional[CameraMoveOutcome]:
        return self._outcome

    def resolve(self, outcome: CameraMoveOutcome) -> None:
        """Invoke the callback with *outcome* and release it."""

        if self._outcome is not None:
            raise CompletionAlreadyResolvedError(
                f"completion already resolved as {self._outcome.value}",
            )
        self._outcome = outcome
        callback, self._callback = self._callback, None
        if callback is not None:
            callback(outcome)


@dataclass(frozen=True)
class TargetUpdate:
    """Centre the camera on ``target``, optionally changing the zoom level."""

    target: Coordinate
    zoom: Optional[float] = None


@dataclass(frozen=True)
class FitBoundsUpdate:
    """Move and zoom the camera so ``bounds`` fill the viewport."""

    bounds: CoordinateBounds


CameraUpdate = Union[TargetUpdate, FitBoundsUpdate]


@dataclass
class CameraUpdateRequest:
    """A camera transition waiting in the queue or in flight."""

    update: CameraUpdate
    target: Coordinate
    silent: bool = False
    completion: CompletionHandle = field(default_factory=CompletionHandle)


__all__ = [
    "CameraMoveOutcome",
    "CameraUpdate",
    "CameraUpdateRequest",
    "CompletionCallback",
    "CompletionHandle",
    "FitBoundsUpdate",
    "TargetUpdate",
]
