import logging
import threading

import numpy as np
import pytest

from L3_world import CellType
from L4_detection import BoundingBox, DetectedObject, Detector, InputActuator
from L5_decision import MovementDirection, NavigationLayer, force_to_direction

GOAL = (0.8, 0.2)


@pytest.fixture
def detector(mocker):
    """Detector that reports one wall for every prompt."""
    mock = mocker.Mock(spec=Detector)
    mock.detect.return_value = [
        DetectedObject(BoundingBox(0.25, 0.25, 0.125, 0.25), "wall", 0.9)]
    return mock


@pytest.fixture
def actuator(mocker):
    return mocker.Mock(spec=InputActuator)


@pytest.fixture
def layer(detector, actuator):
    return NavigationLayer(detector, actuator, tick_interval=0.0)


@pytest.mark.parametrize("force, expected", [
    ((1.0, 0.0), MovementDirection.FORWARD_RIGHT),
    ((0.0, 1.0), MovementDirection.FORWARD_LEFT),
    ((0.0, -1.0), MovementDirection.BACK_RIGHT),
    ((-1.0, 0.0), MovementDirection.BACK_LEFT),
    ((-1.0, -0.5), MovementDirection.BACK_LEFT),
    ((0.05, -0.05), MovementDirection.IDLE),
])
def test_force_to_direction(force, expected):
    assert force_to_direction(force) == expected


def test_invalid_detection_interval(detector, actuator):
    with pytest.raises(ValueError):
        NavigationLayer(detector, actuator, detection_interval=0)


def test_detection_every_third_tick(layer, detector, actuator):
    layer.step(GOAL)
    layer.step(GOAL)
    assert detector.detect.call_count == 0
    assert layer.grid.count(CellType.OBSTACLE) == 0

    layer.step(GOAL)
    # obstacle prompt and goal prompt
    assert detector.detect.call_count == 2
    assert layer.grid.count(CellType.OBSTACLE) > 0
    assert layer.grid.get_cell(64, 12) == CellType.GOAL
    assert actuator.apply.call_count == 3


def test_step_applies_bounded_force(layer, actuator):
    force = layer.step(GOAL)
    applied = actuator.apply.call_args[0][0]
    assert np.array_equal(force, applied)
    assert np.linalg.norm(force) <= layer.navigator.params.velocity_damping_factor + 1e-9


def test_failing_detector_is_tolerated(layer, detector, caplog):
    detector.detect.side_effect = RuntimeError("model unavailable")
    with caplog.at_level(logging.WARNING, logger="L5_decision.layer"):
        for _ in range(3):
            layer.step(GOAL)
    assert layer.last_detections == []
    assert layer.grid.count(CellType.OBSTACLE) == 0
    assert "Detection failed" in caplog.text


def test_detector_returning_none(layer, detector):
    detector.detect.return_value = None
    assert layer.detect_objects() == []


def test_capture_feeds_detector(detector, actuator, mocker):
    capture = mocker.Mock(return_value="frame")
    layer = NavigationLayer(detector, actuator, capture=capture)
    layer.detect_objects()
    scenes = [c.args[0] for c in detector.detect.call_args_list]
    assert scenes == ["frame", "frame"]


def test_navigates_without_detector(actuator):
    layer = NavigationLayer(None, actuator, tick_interval=0.0)
    for _ in range(3):
        layer.step(GOAL)
    assert layer.get_statistics()['frame_count'] == 3


def test_run_until_tick_limit(layer, actuator):
    assert layer.run(GOAL, max_ticks=5) == 5
    assert actuator.apply.call_count == 5
    actuator.stop.assert_called_once()


def test_run_honours_stop_event(layer, actuator):
    stop = threading.Event()
    stop.set()
    assert layer.run(GOAL, stop_event=stop) == 0
    actuator.apply.assert_not_called()
    actuator.stop.assert_called_once()


def test_run_releases_input_on_error(layer, actuator):
    actuator.apply.side_effect = RuntimeError("device lost")
    with pytest.raises(RuntimeError):
        layer.run(GOAL, max_ticks=3)
    actuator.stop.assert_called_once()


def test_run_starts_new_session(layer):
    layer.run(GOAL, max_ticks=4)
    assert layer.frame_count == 4
    layer.run(GOAL, max_ticks=1)
    assert layer.frame_count == 1
    assert len(layer.navigator.visited_cells) == 1


def test_statistics(layer):
    layer.step(GOAL)
    stats = layer.get_statistics()
    assert stats['frame_count'] == 1
    assert stats['visited_cells'] == 1
    assert stats['direction'] in {d.value for d in MovementDirection}


def test_set_grid_size(layer):
    layer.set_grid_size(40, 30)
    assert layer.grid.shape == (40, 30)
