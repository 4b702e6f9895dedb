from typing import Any, Dict


class Config:
    """Minimal config shim providing nested dict access via get/set.

    Defaults run out-of-the-box with the first webcam and OpenCV's bundled cascades.
    """

    def __init__(self):
        self._cfg: Dict[str, Dict[str, Any]] = {
            'video': {
                'capture_index': 0,
                'backend': 'ANY',
                # Resolution hints; None keeps the camera default
                'width': None,
                'height': None,
            },
            'detection': {
                # Explicit model path wins over cascade_name in cv2.data.haarcascades
                'cascade_path': None,
                'cascade_name': 'haarcascade_frontalface_alt_tree.xml',
                'scale_factor': 1.1,
                'min_neighbors': 2,
                'min_size': (100, 100),
                'max_size': (0, 0),  # (0, 0): no upper bound
            },
            'tracking': {
                'nominal_location': (0.5, 0.5),
                'initial_location': (0.5, 0.5),
                'nominal_size': (390, 390),
            },
            'display': {
                'window_name': 'window',
                'fullscreen': False,
                'rect_color': (0, 255, 0),  # BGR
                'rect_thickness': 2,
                'quit_key': 'q',
                'wait_ms': 1,
            },
            'logging': {
                'name': 'centered_face',
                'level': 'INFO',
                'log_file': None,
            },
        }

    def get(self, section: str, key: str = None):
        sec = self._cfg.get(section, {})
        if key is None:
            return sec
        return sec.get(key)

    def set(self, section: str, key: str, value: Any) -> None:
        self._cfg.setdefault(section, {})[key] = value
