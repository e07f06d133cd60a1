"""
Host-side wrapper around StateEngine.
Supplies the clock, fires the drift callback and notifies subscribers; the engine itself knows nothing of callbacks.
"""

import time
from typing import Callable, List, Optional

import numpy as np

from ..core.engine import StateEngine
from ..util.logging import logger
from ..vector.ops import VectorLike
from ..vector.types import Snapshot, UpdateResult

DriftCallback = Callable[[np.ndarray, float], None]


def wall_clock_ms() -> float:
    """Current wall-clock time in milliseconds."""
    return time.time() * 1000.0


class SemanticStateTracker:
    """
    Connects a StateEngine to a host.

    - on_drift_detected(vector, drift_score) fires after an update reports drift
    - subscribers are called with no arguments after every successful update or reset
    """

    def __init__(self, engine: StateEngine, on_drift_detected: Optional[DriftCallback] = None,
                 clock: Optional[Callable[[], float]] = None):
        self.engine = engine
        self.on_drift_detected = on_drift_detected
        self._clock = clock or wall_clock_ms
        self._listeners: List[Callable[[], None]] = []

    def now(self) -> float:
        return self._clock()

    def update(self, embedding: VectorLike, now_ms: Optional[float] = None) -> UpdateResult:
        """Feed an embedding to the engine, timestamped by the tracker's clock unless given."""
        now = self.now() if now_ms is None else now_ms
        result = self.engine.update(embedding, now)

        try:
            if result.drift_detected:
                logger.log_drift_detected(result.drift_score, self.engine.drift_threshold,
                                          {"update_count": self.engine.update_count})
                if self.on_drift_detected is not None:
                    self.on_drift_detected(result.vector, result.drift_score)
        finally:
            # The engine already committed the update; subscribers hear about it even if the callback raised.
            self._notify()

        return result

    def get_snapshot(self, now_ms: Optional[float] = None) -> Snapshot:
        now = self.now() if now_ms is None else now_ms
        return self.engine.get_snapshot(now)

    def reset(self):
        self.engine.reset()
        self._notify()

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Register a change listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        for listener in list(self._listeners):
            listener()
