"""
Semantic state engine - tracks one embedding stream with EMA fusion and flags drift.

The engine is synchronous and owns no external resources. It is not safe for
concurrent calls on the same instance; hosts serialize access.
"""

from typing import Any, Dict, Optional

import numpy as np

from ..util.logging import logger
from ..vector import ops
from ..vector.fusion import ema_fuse
from ..vector.types import Snapshot, UpdateResult
from .config import validate_engine_params
from .drift import DriftDetector
from .errors import DimensionMismatchError, EmptyInputError, InvalidParameterError, InvalidShapeError
from .health import HealthModel


class StateEngine:
    """
    Stateful tracker of a single embedding stream.

    Lifecycle:
    - Uninitialized: no updates yet, no state vector
    - Tracking: the first successful update fixed the dimension and set the
      baseline; every later update runs drift detection and then fuses

    Failed updates leave all state untouched.
    """

    def __init__(self, alpha: float, drift_threshold: float, health_model: Optional[HealthModel] = None):
        """
        Args:
            alpha: EMA weight given to each new embedding, in [0, 1]
            drift_threshold: cosine similarity below which drift is flagged, in [-1, 1]
            health_model: health scoring policy, defaults to the standard knobs

        Raises:
            InvalidParameterError: if alpha or drift_threshold is out of range
        """
        issues = validate_engine_params(alpha, drift_threshold)
        if issues:
            raise InvalidParameterError(issues)

        self.alpha = float(alpha)
        self.drift_threshold = float(drift_threshold)
        self.health_model = health_model or HealthModel()
        self._detector = DriftDetector(self.drift_threshold)
        self._clear()

    def _clear(self):
        self._state_vector = np.zeros(0, dtype=ops.DTYPE)
        self._last_updated_at = 0.0
        self._last_drift = 0.0
        self._update_count = 0

    @property
    def is_tracking(self) -> bool:
        return self._update_count > 0

    @property
    def dimension(self) -> Optional[int]:
        """Established embedding length, or None before the first update."""
        return int(self._state_vector.shape[0]) if self.is_tracking else None

    @property
    def update_count(self) -> int:
        return self._update_count

    @property
    def last_drift(self) -> float:
        return self._last_drift

    @property
    def last_updated_at(self) -> float:
        return self._last_updated_at

    def update(self, embedding: ops.VectorLike, now_ms: float) -> UpdateResult:
        """
        Fuse a new embedding into the state.

        The first call establishes the baseline by fusing against a zero
        origin and never reports drift. Later calls score drift against the
        current state before fusing.

        Args:
            embedding: the new embedding, any sequence of floats
            now_ms: caller-clock timestamp in milliseconds

        Returns:
            UpdateResult with the drift verdict and the input embedding

        Raises:
            InvalidShapeError: if the embedding is a scalar or nested sequence
            EmptyInputError: if the embedding has no components
            DimensionMismatchError: if its length differs from the established one
        """
        try:
            vector = ops.as_vector(embedding)
        except InvalidShapeError as e:
            logger.log_rejected_update("invalid_shape", {"shape": list(e.shape)})
            raise

        if vector.shape[0] == 0:
            logger.log_rejected_update("empty_input")
            raise EmptyInputError()

        if not self.is_tracking:
            baseline = np.zeros_like(vector)
            self._state_vector = ema_fuse(vector, baseline, self.alpha)
            result = UpdateResult(drift_detected=False, drift_score=0.0, vector=vector)
        else:
            expected = self._state_vector.shape[0]
            if vector.shape[0] != expected:
                logger.log_rejected_update("dimension_mismatch", {"expected": expected, "got": vector.shape[0]})
                raise DimensionMismatchError(expected, vector.shape[0])

            reading = self._detector.evaluate(self._state_vector, vector)
            self._state_vector = ema_fuse(vector, self._state_vector, self.alpha)
            self._last_drift = reading.drift_score
            result = UpdateResult(drift_detected=reading.detected, drift_score=reading.drift_score, vector=vector)

        baseline_call = self._update_count == 0
        self._last_updated_at = float(now_ms)
        self._update_count += 1

        logger.log_update(self._update_count, vector.shape[0], result.drift_score, baseline=baseline_call)
        return result

    def get_snapshot(self, now_ms: float) -> Snapshot:
        """Read the current state and its health. Never fails, never mutates."""
        health = self.health_model.score(now_ms, self._last_updated_at, self._last_drift)
        summary = self.health_model.summarize(health)
        logger.log_snapshot(health, summary, self._update_count)

        return Snapshot(
            vector=self._state_vector.copy(),
            health_score=health,
            timestamp=self._last_updated_at,
            semantic_summary=summary
        )

    snapshot = get_snapshot

    def reset(self):
        """Return the engine to the uninitialized state, forgetting the dimension."""
        logger.log_reset(self._update_count)
        self._clear()

    def debug_info(self) -> Dict[str, Any]:
        """Get bookkeeping details for diagnostics; the state vector itself is omitted."""
        return {
            "alpha": self.alpha,
            "drift_threshold": self.drift_threshold,
            "age_decay_rate": self.health_model.age_decay_rate,
            "drift_weight": self.health_model.drift_weight,
            "tracking": self.is_tracking,
            "dimension": self.dimension,
            "update_count": self._update_count,
            "last_drift": self._last_drift,
            "last_updated_at": self._last_updated_at
        }


def normalize(v: ops.VectorLike) -> np.ndarray:
    """Normalize an embedding to unit length before feeding it to an engine."""
    return ops.normalize(v)
