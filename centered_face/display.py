from __future__ import annotations
from typing import Dict, Any, Tuple

import cv2
import numpy as np

from .types import Rectangle
from .errors import DisplayError


class FrameDisplay:
    """Draws the selected face and renders frames in an OpenCV window.

    Expects cfg keys: window_name, fullscreen, rect_color, rect_thickness, quit_key, wait_ms.
    """

    def __init__(self, cfg: Dict[str, Any]):
        self.window_name = str(cfg.get('window_name') or 'window')
        self.fullscreen = bool(cfg.get('fullscreen', False))
        self.rect_color: Tuple[int, int, int] = tuple(int(c) for c in cfg.get('rect_color', (0, 255, 0)))
        self.rect_thickness = int(cfg.get('rect_thickness', 2))
        self.quit_key = cfg.get('quit_key', 'q')
        self.wait_ms = max(1, int(cfg.get('wait_ms', 1)))
        self._opened = False

    def open(self) -> None:
        try:
            if self.fullscreen:
                cv2.namedWindow(self.window_name, cv2.WINDOW_NORMAL)
                cv2.setWindowProperty(self.window_name, cv2.WND_PROP_FULLSCREEN, cv2.WINDOW_FULLSCREEN)
            else:
                cv2.namedWindow(self.window_name, cv2.WINDOW_AUTOSIZE)
        except cv2.error as e:
            raise DisplayError(f"cannot create window {self.window_name!r}: {e}")
        self._opened = True

    def annotate(self, frame: np.ndarray, rect: Rectangle) -> np.ndarray:
        top_left, bottom_right = rect.corners()
        try:
            cv2.rectangle(frame, top_left, bottom_right, self.rect_color, self.rect_thickness, cv2.LINE_8)
        except cv2.error as e:
            raise DisplayError(f"cannot draw rectangle {rect}: {e}")
        return frame

    def show(self, frame: np.ndarray) -> bool:
        """Render a frame; returns False once the user asked to stop."""
        try:
            cv2.imshow(self.window_name, frame)
            key = cv2.waitKey(self.wait_ms) & 0xFF
            # Closing the window drops its visible property below 1
            visible = cv2.getWindowProperty(self.window_name, cv2.WND_PROP_VISIBLE)
        except cv2.error as e:
            raise DisplayError(f"cannot render to {self.window_name!r}: {e}")
        if self.quit_key and key == ord(self.quit_key[0]):
            return False
        return visible >= 1

    def close(self) -> None:
        if not self._opened:
            return
        self._opened = False
        try:
            cv2.destroyWindow(self.window_name)
        except cv2.error as e:
            raise DisplayError(f"cannot close {self.window_name!r}: {e}")
