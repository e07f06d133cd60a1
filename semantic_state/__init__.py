"""
semantic-state-engine: tracks the semantic position of an embedding stream with EMA fusion,
flags drift by cosine thresholding, and scores health from age and drift.
"""

from .core.engine import StateEngine, normalize
from .core.drift import DriftDetector, DriftReading
from .core.health import HealthModel, summarize, AGE_DECAY_RATE, DRIFT_WEIGHT
from .core.errors import SemanticStateError, EmptyInputError, DimensionMismatchError, InvalidParameterError, InvalidShapeError
from .vector import dot, magnitude, cosine_similarity, add, scale, ema_fuse, UpdateResult, Snapshot

__all__ = [
    'StateEngine',
    'normalize',
    'DriftDetector',
    'DriftReading',
    'HealthModel',
    'summarize',
    'AGE_DECAY_RATE',
    'DRIFT_WEIGHT',
    'SemanticStateError',
    'EmptyInputError',
    'DimensionMismatchError',
    'InvalidParameterError',
    'InvalidShapeError',
    'dot',
    'magnitude',
    'cosine_similarity',
    'add',
    'scale',
    'ema_fuse',
    'UpdateResult',
    'Snapshot'
]
