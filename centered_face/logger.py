from __future__ import annotations
import logging
from typing import Callable, Optional

from .types import Displacement

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class _SinkHandler(logging.Handler):
    """Forwards formatted records to a plain callable (UI console, list.append, ...)."""

    def __init__(self, sink: Callable[[str], None]):
        super().__init__()
        self.sink = sink

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.sink(self.format(record))
        except Exception:
            self.handleError(record)


class EventLogger:
    """Structured logger for the tracking loop on top of the ``logging`` module.

    Keeps the pipeline decoupled from where lines end up: a session file,
    a UI sink, or whatever handlers the application configured.
    """

    def __init__(self, name: str = "centered_face", ui_logger: Optional[Callable[[str], None]] = None,
                 log_file_path: Optional[str] = None, level: str = "INFO"):
        self.name = name
        self.log_file_path = log_file_path
        self._logger = logging.getLogger(name)
        self._logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
        self._handlers = []
        formatter = logging.Formatter(LOG_FORMAT)
        if ui_logger:
            self._add_handler(_SinkHandler(ui_logger), formatter)
        if log_file_path:
            self._add_handler(logging.FileHandler(log_file_path, mode="a", encoding="utf-8"), formatter)

    def _add_handler(self, handler: logging.Handler, formatter: logging.Formatter):
        handler.setFormatter(formatter)
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    def info(self, msg: str):
        self._logger.info(msg)

    def debug(self, msg: str):
        self._logger.debug(msg)

    def warning(self, msg: str):
        self._logger.warning(msg)

    def error(self, msg: str):
        self._logger.error(msg)

    def displacement(self, d: Displacement):
        self._logger.info("Displacement: (%.4f, %.4f)", d.dx, d.dy)

    def size_difference(self, diff):
        self._logger.info("Size difference: (%d, %d)", diff[0], diff[1])

    def close(self):
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            handler.close()
        self._handlers = []
