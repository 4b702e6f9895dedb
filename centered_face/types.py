from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple, List, Dict

from .errors import CoordinateError


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned detection box in frame pixels (x, y is the top-left corner)."""
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise CoordinateError(f"negative rectangle size: {self.width}x{self.height}")

    @classmethod
    def from_xywh(cls, xywh) -> "Rectangle":
        """Build from any (x, y, w, h) sequence, e.g. a row of detectMultiScale output."""
        try:
            x, y, w, h = (int(v) for v in xywh)
        except (TypeError, ValueError) as e:
            raise CoordinateError(f"invalid rectangle {xywh!r}: {e}")
        return cls(x=x, y=y, width=w, height=h)

    def center(self) -> Tuple[int, int]:
        return self.x + self.width // 2, self.y + self.height // 2

    def corners(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        return (self.x, self.y), (self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class FrameSize:
    """Pixel dimensions of the current frame."""
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise CoordinateError(f"invalid frame size: {self.width}x{self.height}")

    @classmethod
    def from_frame(cls, frame) -> "FrameSize":
        shape = getattr(frame, "shape", None)
        if shape is None or len(shape) < 2:
            raise CoordinateError("frame has no 2-D shape")
        height, width = int(shape[0]), int(shape[1])
        return cls(width=width, height=height)

    def center(self) -> Tuple[int, int]:
        return self.width // 2, self.height // 2


@dataclass(frozen=True)
class Displacement:
    dx: float
    dy: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.dx, self.dy


@dataclass(frozen=True)
class Location:
    """A point normalized to frame width/height."""
    x: float  # normalized [0,1]
    y: float  # normalized [0,1]

    @classmethod
    def normalized(cls, point: Tuple[int, int], size: FrameSize) -> "Location":
        return cls(x=float(point[0]) / float(size.width), y=float(point[1]) / float(size.height))

    def __sub__(self, other: "Location") -> Displacement:
        return Displacement(dx=self.x - other.x, dy=self.y - other.y)


@dataclass
class TrackerUpdate:
    """Result of feeding one frame's candidates to the tracker."""
    selected: Optional[Rectangle]
    location: Location
    displacement: Displacement
    size_difference: Optional[Tuple[int, int]]  # nominal - detected, informational only

    @property
    def detected(self) -> bool:
        return self.selected is not None


@dataclass
class PerformanceStats:
    """Timing metrics for each stage of the pipeline."""
    t_detect_ms: float = 0.0
    t_select_ms: float = 0.0
    t_annotate_ms: float = 0.0
    t_total_ms: float = 0.0


@dataclass
class PipelineOutput:
    """Aggregated output from one pipeline step."""
    frame_size: FrameSize
    candidates: List[Rectangle]
    update: TrackerUpdate
    perf: PerformanceStats
    frame: Optional[object] = None  # annotated BGR frame (np.ndarray)
    debug: Dict[str, float] = field(default_factory=dict)

    @property
    def detected(self) -> bool:
        return self.update.detected
