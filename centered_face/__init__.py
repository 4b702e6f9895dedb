"""
centered_face package
Picks the face nearest the frame center and reports its displacement.
"""

from .types import (
    Rectangle,
    FrameSize,
    Location,
    Displacement,
    TrackerUpdate,
    PerformanceStats,
    PipelineOutput,
)
from .errors import EmptyInputError, CoordinateError, FaceDetectionError, CaptureError, DisplayError
from .selection import center_of, distance_squared, CenterSelector
from .tracker import DisplacementTracker
from .detection import to_grayscale, HaarCascadeDetector
from .capture import FrameSource
from .display import FrameDisplay
from .logger import EventLogger
from .monitor import PerformanceMonitor
from .pipeline import FaceCenteringPipeline

__all__ = [
    "Rectangle",
    "FrameSize",
    "Location",
    "Displacement",
    "TrackerUpdate",
    "PerformanceStats",
    "PipelineOutput",
    "EmptyInputError",
    "CoordinateError",
    "FaceDetectionError",
    "CaptureError",
    "DisplayError",
    "center_of",
    "distance_squared",
    "CenterSelector",
    "DisplacementTracker",
    "to_grayscale",
    "HaarCascadeDetector",
    "FrameSource",
    "FrameDisplay",
    "EventLogger",
    "PerformanceMonitor",
    "FaceCenteringPipeline",
]
