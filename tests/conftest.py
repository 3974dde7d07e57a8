import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Qt objects are created without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from geomap.camera import FitBoundsUpdate, TargetUpdate  # noqa: E402
from geomap.geometry import Coordinate  # noqa: E402


class FakeProvider:
    """In-memory stand-in for a native map SDK.

    ``move_camera`` records the update and, when animated, reports busy until
    the test calls :meth:`settle`.
    """

    def __init__(self, center: Coordinate = Coordinate(0.0, 0.0), zoom: float = 10.0) -> None:
        self.is_animating = False
        self.zoom = zoom
        self.center_position = center
        self.camera_follows_user = True
        self.moves: list[tuple[object, bool]] = []

    def move_camera(self, update, animated: bool) -> None:
        self.moves.append((update, animated))
        self.is_animating = animated
        if isinstance(update, TargetUpdate):
            self.center_position = update.target
            if update.zoom is not None:
                self.zoom = update.zoom
        elif isinstance(update, FitBoundsUpdate):
            self.center_position = update.bounds.center

    def settle(self, delegate) -> None:
        """Finish the running animation and report idle to *delegate*."""

        self.is_animating = False
        delegate.on_idle(self.center_position)


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()
