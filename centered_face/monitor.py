from __future__ import annotations
from collections import deque
from dataclasses import astuple

import numpy as np

from .types import PerformanceStats

_STAGES = ("detect", "select", "annotate", "total")


class PerformanceMonitor:
    """Keeps the last ``history_len`` frame timings and averages them per stage."""

    def __init__(self, history_len: int = 200):
        self.history = deque(maxlen=history_len)
        self.frames = 0

    def record(self, stats: PerformanceStats):
        self.frames += 1
        self.history.append(astuple(stats))

    def summary(self) -> dict:
        if self.history:
            means = np.asarray(self.history, dtype=float).mean(axis=0)
        else:
            means = np.zeros(len(_STAGES))
        out = {"frames": float(self.frames)}
        out.update({f"avg_{stage}_ms": float(m) for stage, m in zip(_STAGES, means)})
        return out
