"""Tests for the animation queue and completion handles."""

import pytest

from geomap.camera import AnimationQueue, CameraMoveOutcome, CameraUpdateRequest, CompletionHandle, TargetUpdate
from geomap.errors import CompletionAlreadyResolvedError
from geomap.geometry import Coordinate


def _request(index: int) -> CameraUpdateRequest:
    target = Coordinate(float(index), 0.0)
    return CameraUpdateRequest(TargetUpdate(target), target)


def test_completion_handle_resolves_once():
    outcomes = []
    handle = CompletionHandle(outcomes.append)

    handle.resolve(CameraMoveOutcome.COMPLETED)

    assert outcomes == [CameraMoveOutcome.COMPLETED]
    assert handle.resolved
    assert handle.outcome is CameraMoveOutcome.COMPLETED
    with pytest.raises(CompletionAlreadyResolvedError):
        handle.resolve(CameraMoveOutcome.SUPERSEDED)
    assert outcomes == [CameraMoveOutcome.COMPLETED]


def test_completion_handle_without_callback():
    handle = CompletionHandle()

    handle.resolve(CameraMoveOutcome.NO_OP)

    assert handle.outcome is CameraMoveOutcome.NO_OP


def test_outcome_did_change():
    assert CameraMoveOutcome.COMPLETED.did_change
    assert not CameraMoveOutcome.SUPERSEDED.did_change
    assert not CameraMoveOutcome.NO_OP.did_change


def test_queue_pops_most_recent_first():
    queue = AnimationQueue(capacity=3)
    for index in range(3):
        assert queue.push_front(_request(index)) is None

    assert queue.pop_front().target == Coordinate(2.0, 0.0)
    assert queue.pop_front().target == Coordinate(1.0, 0.0)
    assert len(queue) == 1


def test_queue_evicts_tail_when_full():
    queue = AnimationQueue(capacity=2)
    queue.push_front(_request(0))
    queue.push_front(_request(1))

    evicted = queue.push_front(_request(2))

    assert evicted.target == Coordinate(0.0, 0.0)
    assert [request.target.latitude for request in queue] == [2.0, 1.0]


def test_queue_requires_positive_capacity():
    with pytest.raises(ValueError):
        AnimationQueue(capacity=0)
