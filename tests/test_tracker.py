import pytest

from config import Config
from centered_face.tracker import DisplacementTracker
from centered_face.selection import CenterSelector
from centered_face.types import Rectangle, FrameSize, Location


FRAME = FrameSize(width=640, height=480)


class CountingSelector(CenterSelector):
    def __init__(self):
        self.calls = 0

    def select(self, frame_size, candidates):
        self.calls += 1
        return super().select(frame_size, candidates)


def test_initial_location_is_frame_center():
    tracker = DisplacementTracker(Config())
    assert tracker.location == Location(0.5, 0.5)
    update = tracker.update(FRAME, [])
    assert update.detected is False
    assert update.displacement.as_tuple() == (0.0, 0.0)
    assert update.size_difference is None


def test_update_moves_location_to_selected_face():
    tracker = DisplacementTracker(Config())
    update = tracker.update(FRAME, [Rectangle(x=0, y=0, width=100, height=100)])
    assert update.selected == Rectangle(x=0, y=0, width=100, height=100)
    assert update.location.x == pytest.approx(50 / 640)
    assert update.location.y == pytest.approx(50 / 480)
    assert update.displacement.dx == pytest.approx(50 / 640 - 0.5)
    assert update.displacement.dy == pytest.approx(50 / 480 - 0.5)
    assert update.size_difference == (290, 290)


def test_location_persists_when_no_faces():
    selector = CountingSelector()
    tracker = DisplacementTracker(Config(), selector=selector)
    first = tracker.update(FRAME, [Rectangle(x=13, y=17, width=101, height=99)])
    second = tracker.update(FRAME, [])
    third = tracker.update(FRAME, ())
    assert selector.calls == 1
    assert second.location == first.location
    assert third.location.x == first.location.x
    assert third.location.y == first.location.y
    assert second.displacement == first.displacement
    assert second.selected is None


def test_nominal_location_and_size_from_config():
    cfg = Config()
    cfg.set('tracking', 'nominal_location', (0.25, 0.75))
    cfg.set('tracking', 'nominal_size', (200, 100))
    tracker = DisplacementTracker(cfg)
    update = tracker.update(FRAME, [Rectangle(x=270, y=190, width=100, height=100)])
    assert update.location == Location(0.5, 0.5)
    assert update.displacement.dx == pytest.approx(0.25)
    assert update.displacement.dy == pytest.approx(-0.25)
    assert update.size_difference == (100, 0)


def test_reset_restores_initial_location():
    cfg = Config()
    cfg.set('tracking', 'initial_location', (0.1, 0.2))
    tracker = DisplacementTracker(cfg)
    tracker.update(FRAME, [Rectangle(x=270, y=190, width=100, height=100)])
    assert tracker.location == Location(0.5, 0.5)
    tracker.reset()
    assert tracker.location == Location(0.1, 0.2)
