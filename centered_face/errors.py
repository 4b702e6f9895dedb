class EmptyInputError(Exception):
    """Raised when center selection is asked to choose from zero candidates."""


class CoordinateError(Exception):
    """Raised when rectangle or frame geometry is invalid."""


class FaceDetectionError(Exception):
    """Raised when the cascade model cannot be loaded or detection fails."""


class CaptureError(Exception):
    """Raised when the camera cannot be opened or a frame cannot be read."""


class DisplayError(Exception):
    """Raised when the preview window cannot be created or rendered."""
