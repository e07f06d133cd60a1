"""
Health scoring for the semantic state - decays with inactivity and with the last observed drift.
"""

from dataclasses import dataclass

import numpy as np

from ..vector.ops import DTYPE

# Health lost per millisecond since the last update; age alone reaches 0 after ~10s.
AGE_DECAY_RATE = 0.0001

# Health lost per unit of drift; orthogonal drift (1.0) costs 0.5.
DRIFT_WEIGHT = 0.5

STABLE_ABOVE = 0.8
DRIFTING_ABOVE = 0.5

SUMMARY_STABLE = "stable"
SUMMARY_DRIFTING = "drifting"
SUMMARY_VOLATILE = "volatile"


def summarize(health: float) -> str:
    """Map a health score to its qualitative label. Boundary values fall to the lower bucket."""
    # Compared at score precision, so a float32 0.8 is still on the boundary.
    health = DTYPE(health)
    if health > DTYPE(STABLE_ABOVE):
        return SUMMARY_STABLE
    if health > DTYPE(DRIFTING_ABOVE):
        return SUMMARY_DRIFTING
    return SUMMARY_VOLATILE


@dataclass(frozen=True)
class HealthModel:
    """Scores state reliability from elapsed time and last drift."""

    age_decay_rate: float = AGE_DECAY_RATE
    drift_weight: float = DRIFT_WEIGHT

    def score(self, now: float, last_updated_at: float, last_drift: float) -> float:
        """
        Compute health in [0, 1].

        Negative elapsed time (clock skew, out-of-order calls) counts as zero
        rather than inflating health. Timestamps are subtracted at full
        precision; the score itself is float32 like the drift it consumes.
        """
        elapsed = DTYPE(max(0.0, now - last_updated_at))
        age_penalty = elapsed * DTYPE(self.age_decay_rate)
        drift_penalty = DTYPE(last_drift) * DTYPE(self.drift_weight)
        return float(np.clip(DTYPE(1.0) - age_penalty - drift_penalty, 0.0, 1.0))

    def summarize(self, health: float) -> str:
        return summarize(health)
