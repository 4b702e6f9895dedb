from __future__ import annotations
import time

from .types import FrameSize, PerformanceStats, PipelineOutput
from .detection import to_grayscale
from .errors import FaceDetectionError


class FaceCenteringPipeline:
    """One pass per frame: grayscale → detect → select/track → annotate.

    Detection failures are logged and re-raised; the caller decides to stop.
    """

    def __init__(self, detector, tracker, annotator, perf_monitor, logger):
        self.detector = detector
        self.tracker = tracker
        self.annotator = annotator
        self.perf = perf_monitor
        self.log = logger

    def step(self, frame) -> PipelineOutput:
        t_total0 = time.time()
        stats = PerformanceStats()
        frame_size = FrameSize.from_frame(frame)

        # 1) Detect
        t0 = time.time()
        try:
            candidates = self.detector.detect(to_grayscale(frame))
        except FaceDetectionError as e:
            self.log.error(f"detection error: {e}")
            raise
        finally:
            stats.t_detect_ms = (time.time() - t0) * 1000.0

        # 2) Select and track; an empty frame keeps the last location
        t0 = time.time()
        update = self.tracker.update(frame_size, candidates)
        stats.t_select_ms = (time.time() - t0) * 1000.0

        # 3) Annotate
        t0 = time.time()
        if update.selected is not None:
            self.annotator.annotate(frame, update.selected)
            self.log.size_difference(update.size_difference)
        stats.t_annotate_ms = (time.time() - t0) * 1000.0

        self.log.displacement(update.displacement)

        stats.t_total_ms = (time.time() - t_total0) * 1000.0
        self.perf.record(stats)

        debug = {
            "candidates": float(len(candidates)),
            "location_x": update.location.x,
            "location_y": update.location.y,
        }

        return PipelineOutput(
            frame_size=frame_size,
            candidates=candidates,
            update=update,
            perf=stats,
            frame=frame,
            debug=debug,
        )
