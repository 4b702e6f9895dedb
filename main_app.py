"""
Centered Face Tracker - webcam application
Detects faces, follows the most centered one and reports its displacement
"""

import argparse
import logging
from typing import Optional

from config import Config
from centered_face import (
    CaptureError,
    CoordinateError,
    DisplacementTracker,
    DisplayError,
    EventLogger,
    FaceCenteringPipeline,
    FaceDetectionError,
    FrameDisplay,
    FrameSize,
    FrameSource,
    HaarCascadeDetector,
    PerformanceMonitor,
)


class CenteringApp:
    """Owns the capture device, detector, window and the tracking loop."""

    def __init__(self, config: Config, logger: EventLogger, source=None, detector=None, display=None):
        self.config = config
        self.log = logger
        self.source = source or FrameSource(config.get('video'))
        self.detector = detector or HaarCascadeDetector(config)
        self.display = display or FrameDisplay(config.get('display'))
        self.tracker = DisplacementTracker(config)
        self.perf = PerformanceMonitor()
        self.pipeline = FaceCenteringPipeline(self.detector, self.tracker, self.display, self.perf, self.log)

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run until the window asks to stop or max_frames is reached; returns frames processed."""
        frames = 0
        self.source.open()
        try:
            # Initial frame tells us what the camera actually delivers
            size = FrameSize.from_frame(self.source.read())
            self.log.info(f"capture resolution {size.width}x{size.height}")
            self.display.open()
            while max_frames is None or frames < max_frames:
                out = self.pipeline.step(self.source.read())
                frames += 1
                if not self.display.show(out.frame):
                    self.log.info("stop requested from window")
                    break
        except BaseException:
            # The failure that ended the loop wins over cleanup failures
            self._shutdown(frames, quiet=True)
            raise
        self._shutdown(frames)
        return frames

    def _shutdown(self, frames: int, quiet: bool = False) -> None:
        try:
            self.source.release()
            try:
                self.display.close()
            except DisplayError as e:
                if not quiet:
                    raise
                self.log.error(f"display close failed: {e}")
        finally:
            summary = self.perf.summary()
            self.log.info(
                f"processed {frames} frames, avg total {summary['avg_total_ms']:.1f} ms "
                f"(detect {summary['avg_detect_ms']:.1f}, select {summary['avg_select_ms']:.2f}, "
                f"annotate {summary['avg_annotate_ms']:.2f} ms)"
            )


def build_config(args) -> Config:
    cfg = Config()
    if args.camera is not None:
        cfg.set('video', 'capture_index', args.camera)
    if args.cascade:
        cfg.set('detection', 'cascade_path', args.cascade)
    if args.fullscreen:
        cfg.set('display', 'fullscreen', True)
    if args.log_file:
        cfg.set('logging', 'log_file', args.log_file)
    if args.verbose:
        cfg.set('logging', 'level', 'DEBUG')
    return cfg


def main(argv=None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Centered face tracker")
    parser.add_argument("--camera", type=int, default=None, help="Camera index (default 0)")
    parser.add_argument("--cascade", type=str, default=None, help="Path to a Haar cascade XML model")
    parser.add_argument("--fullscreen", action="store_true", help="Show the preview fullscreen")
    parser.add_argument("--max-frames", type=int, default=None, help="Stop after this many frames")
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    parser.add_argument("--log-file", type=str, default=None, help="Path to session log file")
    args = parser.parse_args(argv)

    cfg = build_config(args)
    logging.basicConfig(level=cfg.get('logging', 'level'), format='%(asctime)s - %(levelname)s - %(message)s')
    logger = EventLogger(
        name=cfg.get('logging', 'name'),
        log_file_path=cfg.get('logging', 'log_file'),
        level=cfg.get('logging', 'level'),
    )
    try:
        app = CenteringApp(cfg, logger)
        app.run(max_frames=args.max_frames)
    except (CaptureError, CoordinateError, FaceDetectionError, DisplayError) as e:
        logger.error(f"fatal: {e}")
        return 1
    except KeyboardInterrupt:
        # Ctrl+C is a normal way to stop the loop
        logger.info("KeyboardInterrupt received; closing application...")
    finally:
        logger.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
