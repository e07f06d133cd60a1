"""
Drift detection - compares an incoming embedding against the current EMA state.
"""

from dataclasses import dataclass

from ..vector.ops import DTYPE, VectorLike, cosine_similarity


@dataclass
class DriftReading:
    """Result of comparing one embedding against the state vector."""
    similarity: float  # cosine similarity in [-1, 1]
    drift_score: float  # 1 - similarity, in [0, 2]
    detected: bool


class DriftDetector:
    """Flags drift when cosine similarity to the state falls below a threshold."""

    def __init__(self, threshold: float):
        self.threshold = threshold

    def evaluate(self, state_vector: VectorLike, embedding: VectorLike) -> DriftReading:
        """
        Score an embedding against the current state.

        0 drift means identical direction, 1 orthogonal, 2 opposite. Detection
        uses the raw similarity, so a threshold of 0.5 flags anything more than
        60 degrees away from the state.
        The score is computed in float32, the precision of the vectors it describes.
        """
        similarity = cosine_similarity(state_vector, embedding)
        return DriftReading(
            similarity=similarity,
            drift_score=float(DTYPE(1.0) - DTYPE(similarity)),
            detected=similarity < self.threshold
        )
