"""
Value types returned by the semantic state engine.
Produced fresh on every call; the engine keeps no reference to them.
"""

from dataclasses import dataclass
from typing import Any, Dict

import numpy as np


@dataclass
class UpdateResult:
    """Outcome of fusing one embedding into the engine state."""

    drift_detected: bool
    """True when similarity to the prior state fell below the drift threshold"""

    drift_score: float
    """Drift magnitude, 1 - cosine similarity, in [0, 2]"""

    vector: np.ndarray
    """The input embedding, echoed back for host convenience"""

    def to_dict(self) -> Dict[str, Any]:
        """Host representation using the canonical camelCase field names."""
        return {
            "driftDetected": bool(self.drift_detected),
            "driftScore": float(self.drift_score),
            "vector": self.vector.tolist(),
        }


@dataclass
class Snapshot:
    """Point-in-time view of the semantic state."""

    vector: np.ndarray
    """Copy of the current EMA state vector (empty before the first update)"""

    health_score: float
    """Reliability indicator in [0, 1], degrading with age and drift"""

    timestamp: float
    """Caller-clock time (ms) of the last successful update"""

    semantic_summary: str
    """One of 'stable', 'drifting', 'volatile'"""

    def to_dict(self) -> Dict[str, Any]:
        """Host representation using the canonical camelCase field names."""
        return {
            "vector": self.vector.tolist(),
            "healthScore": float(self.health_score),
            "timestamp": float(self.timestamp),
            "semanticSummary": self.semantic_summary,
        }
