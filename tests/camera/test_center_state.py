"""Tests for the observed camera centre and its change signals."""

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for signal tests", exc_type=ImportError)

from PySide6.QtTest import QSignalSpy

from geomap.camera import ObservableCenterState
from geomap.geometry import Coordinate

# Roughly one metre of latitude.
ONE_METRE = 1.0 / 111_195.0


@pytest.fixture
def state(qapp) -> ObservableCenterState:
    return ObservableCenterState(movement_threshold=10.0)


def test_initial_state_is_invalid(state):
    assert state.center == Coordinate.INVALID
    assert state.zoom == -1.0


def test_first_update_notifies_center_and_zoom(state):
    centers = []
    zooms = []
    state.centerPositionChanged.connect(lambda new, old: centers.append((new, old)))
    state.cameraZoomChanged.connect(lambda new, old: zooms.append((new, old)))

    state.update(Coordinate(1.0, 2.0), 12.0)

    assert centers == [(Coordinate(1.0, 2.0), Coordinate.INVALID)]
    assert zooms == [(12.0, -1.0)]


def test_small_movement_is_debounced(state):
    state.update(Coordinate(0.0, 0.0), 5.0)
    center_spy = QSignalSpy(state.centerPositionChanged)
    zoom_spy = QSignalSpy(state.cameraZoomChanged)

    state.update(Coordinate(ONE_METRE, 0.0), 5.0)

    assert center_spy.count() == 0
    assert zoom_spy.count() == 0
    assert state.center == Coordinate(ONE_METRE, 0.0)


def test_large_movement_notifies(state):
    state.update(Coordinate(0.0, 0.0), 5.0)
    center_spy = QSignalSpy(state.centerPositionChanged)

    state.update(Coordinate(20 * ONE_METRE, 0.0))

    assert center_spy.count() == 1


def test_small_movements_add_up_to_a_notification(state):
    state.update(Coordinate(0.0, 0.0), 5.0)
    centers = []
    state.centerPositionChanged.connect(lambda new, old: centers.append((new, old)))

    for step in (6, 12, 18):
        state.update(Coordinate(step * ONE_METRE, 0.0))

    # 12 m from the last reported centre crosses the threshold; 18 m is 6 m past it.
    assert centers == [(Coordinate(12 * ONE_METRE, 0.0), Coordinate(0.0, 0.0))]
    assert state.center == Coordinate(18 * ONE_METRE, 0.0)


def test_zoom_below_epsilon_is_ignored(state):
    state.update(zoom=5.0)
    zoom_spy = QSignalSpy(state.cameraZoomChanged)

    state.update(zoom=5.0 + 1e-9)
    state.update(zoom=5.5)

    assert zoom_spy.count() == 1


def test_silent_update_stores_without_notifying(state):
    center_spy = QSignalSpy(state.centerPositionChanged)
    zoom_spy = QSignalSpy(state.cameraZoomChanged)

    state.update(Coordinate(3.0, 4.0), 9.0, silent=True)

    assert center_spy.count() == 0
    assert zoom_spy.count() == 0
    assert state.center == Coordinate(3.0, 4.0)
    assert state.zoom == 9.0

    # The silence applies to that call only.
    state.update(zoom=10.0)
    assert zoom_spy.count() == 1


def test_camera_position_uses_exact_inequality(state):
    positions = []
    state.cameraPositionChanged.connect(lambda new, old: positions.append((new, old)))

    state.notify_camera_position(Coordinate(1.0, 1.0), Coordinate(1.0, 1.0))
    state.notify_camera_position(Coordinate(1.0, 1.0 + ONE_METRE), Coordinate(1.0, 1.0))
    state.notify_camera_position(Coordinate(2.0, 2.0), Coordinate(1.0, 1.0), silent=True)

    assert positions == [(Coordinate(1.0, 1.0 + ONE_METRE), Coordinate(1.0, 1.0))]
