"""Bounded queue of camera requests waiting for the provider to settle."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from ..config import MAXIMUM_QUEUE_SIZE
from .requests import CameraUpdateRequest


class AnimationQueue:
    """Most-recent-first queue that evicts its oldest entry when full.

    New requests enter at the front and are also taken from the front, so the
    latest intent is dispatched first. The tail holds the oldest request and
    is the one dropped on overflow.
    """

    def __init__(self, capacity: int = MAXIMUM_QUEUE_SIZE) -> None:
        if capacity < 1:
            raise ValueError(f"queue capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._items: deque[CameraUpdateRequest] = deque()

    def push_front(self, request: CameraUpdateRequest) -> Optional[CameraUpdateRequest]:
        """Insert *request* at the front and return the evicted tail, if any."""

        evicted = None
        if len(self._items) >= self._capacity:
            evicted = self._items.pop()
        self._items.appendleft(request)
        return evicted

    def pop_front(self) -> CameraUpdateRequest:
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[CameraUpdateRequest]:
        return iter(list(self._items))


__all__ = ["AnimationQueue"]
