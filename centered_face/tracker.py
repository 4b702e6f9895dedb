from __future__ import annotations
from typing import Iterable, Optional, Tuple

from .types import Rectangle, FrameSize, Location, TrackerUpdate
from .selection import CenterSelector
from .errors import CoordinateError


class DisplacementTracker:
    """Keeps the normalized location of the most centered face across frames.

    - Frames with detections move the location to the selected face center
    - Frames without detections keep the last known location
    - Displacement is always reported against the nominal location
    """

    def __init__(self, config, selector: Optional[CenterSelector] = None):
        self.config = config
        self.selector = selector or CenterSelector()
        self.nominal_location = self._get_location('nominal_location', (0.5, 0.5))
        self.initial_location = self._get_location('initial_location', (0.5, 0.5))
        self.nominal_size = self._get_size('nominal_size', (390, 390))
        self._location = self.initial_location

    # --- Config helpers ---
    def _get_pair(self, key: str, default):
        val = self.config.get('tracking', key)
        if val is None:
            return default
        try:
            a, b = val
        except (TypeError, ValueError):
            raise CoordinateError(f"tracking.{key} must be a pair, got {val!r}")
        return a, b

    def _get_location(self, key: str, default: Tuple[float, float]) -> Location:
        x, y = self._get_pair(key, default)
        return Location(x=float(x), y=float(y))

    def _get_size(self, key: str, default: Tuple[int, int]) -> Tuple[int, int]:
        w, h = self._get_pair(key, default)
        return int(w), int(h)

    @property
    def location(self) -> Location:
        return self._location

    def update(self, frame_size: FrameSize, candidates: Iterable[Rectangle]) -> TrackerUpdate:
        candidates = list(candidates)
        selected = None
        size_difference = None
        if candidates:
            selected = self.selector.select(frame_size, candidates)
            self._location = Location.normalized(selected.center(), frame_size)
            size_difference = (
                self.nominal_size[0] - selected.width,
                self.nominal_size[1] - selected.height,
            )
        return TrackerUpdate(
            selected=selected,
            location=self._location,
            displacement=self._location - self.nominal_location,
            size_difference=size_difference,
        )

    def reset(self) -> None:
        self._location = self.initial_location
