"""Markers the map view can highlight and select."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional

from .geometry import Coordinate


@dataclass(eq=False)
class HighlightableMarker:
    """A marker that can be promoted to the map's single highlighted marker.

    Markers compare by identity, mirroring how providers track the native
    objects they render.
    """

    position: Coordinate
    highlighted: bool = False
    on_select: Optional[Callable[["HighlightableMarker"], None]] = field(default=None, repr=False)

    def select(self) -> None:
        """Show the marker's info window by notifying ``on_select``."""

        if self.on_select is not None:
            self.on_select(self)


__all__ = ["HighlightableMarker"]
