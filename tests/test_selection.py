import numpy as np
import pytest

from centered_face.selection import CenterSelector, distance_squared, center_of
from centered_face.types import Rectangle, FrameSize
from centered_face.errors import EmptyInputError, CoordinateError


FRAME = FrameSize(width=640, height=480)


def test_center_uses_floor_division():
    assert center_of(Rectangle(x=10, y=20, width=5, height=7)) == (12, 23)
    assert FrameSize(width=641, height=479).center() == (320, 239)


def test_single_centered_candidate_has_zero_distance():
    rect = Rectangle(x=270, y=190, width=100, height=100)
    assert distance_squared(FRAME, rect) == 0
    assert CenterSelector().select(FRAME, [rect]) == rect


def test_scenario_picks_centered_face():
    far = Rectangle(x=0, y=0, width=100, height=100)
    centered = Rectangle(x=270, y=190, width=100, height=100)
    assert distance_squared(FRAME, far) == 109000
    assert distance_squared(FRAME, centered) == 0
    assert CenterSelector().select(FRAME, [far, centered]) == centered


def test_selected_rectangle_is_a_copy():
    rect = Rectangle(x=270, y=190, width=100, height=100)
    candidates = [rect]
    chosen = CenterSelector().select(FRAME, candidates)
    assert chosen == rect
    assert chosen is not rect
    candidates.clear()
    assert chosen == Rectangle(x=270, y=190, width=100, height=100)


def test_minimum_matches_brute_force():
    rng = np.random.default_rng(1234)
    selector = CenterSelector()
    checked = 0
    for _ in range(300):
        n = int(rng.integers(1, 8))
        rects = [
            Rectangle(
                x=int(rng.integers(0, 600)),
                y=int(rng.integers(0, 440)),
                width=int(rng.integers(0, 200)),
                height=int(rng.integers(0, 200)),
            )
            for _ in range(n)
        ]
        dists = []
        for r in rects:
            cx, cy = r.x + r.width // 2, r.y + r.height // 2
            dists.append((cx - 320) ** 2 + (cy - 240) ** 2)
        if len(set(dists)) != len(dists):
            continue
        expected = rects[dists.index(min(dists))]
        assert selector.select(FRAME, rects) == expected
        checked += 1
    assert checked > 100


def test_tie_goes_to_first_candidate():
    small = Rectangle(x=310, y=230, width=20, height=20)
    large = Rectangle(x=270, y=190, width=100, height=100)
    assert distance_squared(FRAME, small) == distance_squared(FRAME, large)
    selector = CenterSelector()
    assert selector.select(FRAME, [small, large]) == small
    assert selector.select(FRAME, [large, small]) == large


def test_nonzero_tie_goes_to_first_candidate():
    right = Rectangle(x=320, y=230, width=20, height=20)  # center (330, 240)
    below = Rectangle(x=300, y=240, width=40, height=20)  # center (320, 250)
    assert distance_squared(FRAME, right) == distance_squared(FRAME, below) == 100
    selector = CenterSelector()
    assert selector.select(FRAME, [right, below]) == right
    assert selector.select(FRAME, [below, right]) == below


def test_empty_candidates_raise():
    candidates = []
    with pytest.raises(EmptyInputError):
        CenterSelector().select(FRAME, candidates)
    assert candidates == []


def test_ranked_is_stable_and_ascending():
    a = Rectangle(x=0, y=0, width=100, height=100)
    b = Rectangle(x=320, y=230, width=20, height=20)
    c = Rectangle(x=300, y=240, width=40, height=20)
    ranked = CenterSelector().ranked(FRAME, [a, b, c])
    assert [r for _, r in ranked] == [b, c, a]
    assert [d for d, _ in ranked] == [100, 100, 109000]
    assert CenterSelector().ranked(FRAME, []) == []


def test_invalid_geometry_rejected():
    with pytest.raises(CoordinateError):
        Rectangle(x=0, y=0, width=-1, height=10)
    with pytest.raises(CoordinateError):
        FrameSize(width=0, height=480)


def test_from_xywh_converts_numpy_ints():
    rect = Rectangle.from_xywh(np.array([1, 2, 3, 4], dtype=np.int32))
    assert rect == Rectangle(x=1, y=2, width=3, height=4)
    assert type(rect.x) is int


def test_select_is_head_of_ranking():
    rects = [
        Rectangle(x=0, y=0, width=100, height=100),
        Rectangle(x=300, y=240, width=40, height=20),
        Rectangle(x=320, y=230, width=20, height=20),
        Rectangle(x=600, y=400, width=10, height=10),
    ]
    selector = CenterSelector()
    _, head = selector.ranked(FRAME, rects)[0]
    assert selector.select(FRAME, rects) == head == rects[1]
