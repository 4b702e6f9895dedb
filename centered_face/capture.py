from __future__ import annotations
from typing import Optional, Dict, Any

import cv2
import numpy as np

from .errors import CaptureError

_BACKENDS = {
    'ANY': cv2.CAP_ANY,
    'DSHOW': cv2.CAP_DSHOW,
    'MSMF': cv2.CAP_MSMF,
    'V4L2': cv2.CAP_V4L2,
    'AVFOUNDATION': cv2.CAP_AVFOUNDATION,
}


class FrameSource:
    """Blocking OpenCV camera reader.

    Expects cfg keys: capture_index, backend, width, height (width/height optional).
    A read that fails is fatal to the caller; there is no retry or frame holding.
    """

    def __init__(self, cfg: Dict[str, Any], capture=None):
        self.index = int(cfg.get('capture_index', 0) or 0)
        self.backend = (cfg.get('backend') or 'ANY').upper()
        self.width = cfg.get('width')
        self.height = cfg.get('height')
        self.cap = capture

    def open(self) -> "FrameSource":
        if self.cap is None:
            flag = _BACKENDS.get(self.backend)
            if flag is None:
                raise CaptureError(f"unknown capture backend: {self.backend}")
            try:
                self.cap = cv2.VideoCapture(self.index, flag)
            except cv2.error as e:
                raise CaptureError(f"cannot open camera {self.index}: {e}")
        if not self.cap.isOpened():
            self.release()
            raise CaptureError(f"camera {self.index} not available (backend {self.backend})")
        # Resolution hints; backends are free to ignore them
        if self.width:
            self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, int(self.width))
        if self.height:
            self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, int(self.height))
        return self

    def read(self) -> np.ndarray:
        if self.cap is None:
            raise CaptureError("capture not opened")
        try:
            ok, frame = self.cap.read()
        except cv2.error as e:
            raise CaptureError(f"frame read failed: {e}")
        if not ok or frame is None:
            raise CaptureError(f"camera {self.index} returned no frame")
        return frame

    def release(self) -> None:
        if self.cap is not None:
            self.cap.release()
            self.cap = None

    def __enter__(self) -> "FrameSource":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
