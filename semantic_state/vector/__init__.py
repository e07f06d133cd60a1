"""
Vector primitives for the semantic state engine - pure functions and value types, no state.
"""

# Package initialization for vector module
from .ops import DTYPE, as_vector, dot, magnitude, cosine_similarity, normalize, add, scale
from .fusion import ema_fuse
from .types import UpdateResult, Snapshot

__all__ = [
    'DTYPE',
    'as_vector',
    'dot',
    'magnitude',
    'cosine_similarity',
    'normalize',
    'add',
    'scale',
    'ema_fuse',
    'UpdateResult',
    'Snapshot'
]
