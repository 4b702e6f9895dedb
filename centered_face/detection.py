from __future__ import annotations
import os
from typing import List, Optional, Tuple

import cv2
import numpy as np

from .types import Rectangle
from .errors import FaceDetectionError

DEFAULT_CASCADE = "haarcascade_frontalface_alt_tree.xml"


def to_grayscale(frame: np.ndarray) -> np.ndarray:
    if frame is None:
        raise FaceDetectionError("no frame to convert")
    if frame.ndim == 2:
        return frame
    try:
        return cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
    except cv2.error as e:
        raise FaceDetectionError(f"grayscale conversion failed: {e}")


class IFaceDetector:
    """Interface for face detection components."""

    def detect(self, gray) -> List[Rectangle]:
        raise NotImplementedError


class HaarCascadeDetector(IFaceDetector):
    """Face detector backed by an OpenCV Haar cascade.

    Sensitivity settings from the ``detection`` config section are handed to
    ``detectMultiScale`` as-is. Pass ``classifier`` to use an already loaded
    cascade (or a stand-in with the same ``detectMultiScale`` signature).
    """

    def __init__(self, config, classifier=None):
        self.config = config
        self.scale_factor = float(self._get('scale_factor', 1.1))
        self.min_neighbors = int(self._get('min_neighbors', 2))
        self.min_size = self._get_size('min_size', (100, 100))
        self.max_size = self._get_size('max_size', (0, 0))
        self.cascade_path: Optional[str] = None
        self.classifier = classifier if classifier is not None else self._load()

    def _get(self, key: str, default):
        val = self.config.get('detection', key)
        return default if val is None else val

    def _get_size(self, key: str, default: Tuple[int, int]) -> Tuple[int, int]:
        w, h = self._get(key, default)
        return int(w), int(h)

    def resolve_cascade_path(self) -> str:
        path = self.config.get('detection', 'cascade_path')
        if path:
            return str(path)
        name = self._get('cascade_name', DEFAULT_CASCADE)
        return os.path.join(cv2.data.haarcascades, name)

    def _load(self):
        path = self.resolve_cascade_path()
        self.cascade_path = path
        if not os.path.isfile(path):
            raise FaceDetectionError(f"cascade model not found: {path}")
        if not hasattr(cv2, 'CascadeClassifier'):
            raise FaceDetectionError(f"OpenCV {cv2.__version__} has no CascadeClassifier")
        try:
            classifier = cv2.CascadeClassifier(path)
        except cv2.error as e:
            raise FaceDetectionError(f"failed to load cascade {path}: {e}")
        if classifier.empty():
            raise FaceDetectionError(f"failed to load cascade {path}")
        return classifier

    def detect(self, gray) -> List[Rectangle]:
        try:
            faces = self.classifier.detectMultiScale(
                gray,
                scaleFactor=self.scale_factor,
                minNeighbors=self.min_neighbors,
                flags=cv2.CASCADE_SCALE_IMAGE,
                minSize=self.min_size,
                maxSize=self.max_size,
            )
        except cv2.error as e:
            raise FaceDetectionError(f"detectMultiScale failed: {e}")
        # OpenCV hands back an empty tuple when nothing is found
        if faces is None or len(faces) == 0:
            return []
        return [Rectangle.from_xywh(f) for f in np.asarray(faces).reshape(-1, 4)]
