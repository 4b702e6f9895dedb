from __future__ import annotations
from dataclasses import replace
from typing import Iterable, List, Tuple

from .types import Rectangle, FrameSize
from .errors import EmptyInputError


def center_of(rect: Rectangle) -> Tuple[int, int]:
    return rect.center()


def distance_squared(frame_size: FrameSize, rect: Rectangle) -> int:
    """Squared distance between the rectangle center and the frame center.

    The square root is skipped since only the ordering matters.
    """
    cx, cy = center_of(rect)
    fx, fy = frame_size.center()
    dx = cx - fx
    dy = cy - fy
    return dx * dx + dy * dy


class CenterSelector:
    """Chooses the detection whose center lies nearest the frame center.

    Ties go to the candidate that comes first in the input sequence.
    """

    def ranked(self, frame_size: FrameSize, candidates: Iterable[Rectangle]) -> List[Tuple[int, Rectangle]]:
        scored = [(distance_squared(frame_size, c), c) for c in candidates]
        # sort is stable, so equal distances keep input order
        scored.sort(key=lambda pair: pair[0])
        return scored

    def select(self, frame_size: FrameSize, candidates: Iterable[Rectangle]) -> Rectangle:
        ranked = self.ranked(frame_size, candidates)
        if not ranked:
            raise EmptyInputError("no candidates to select from")
        _, best = ranked[0]
        return replace(best)
