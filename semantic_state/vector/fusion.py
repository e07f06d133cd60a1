"""
EMA fusion - the single rule by which the engine's state vector evolves.
"""

import numpy as np

from ..core.errors import DimensionMismatchError
from .ops import DTYPE, VectorLike, as_vector


def ema_fuse(current: VectorLike, previous: VectorLike, alpha: float) -> np.ndarray:
    """
    Blend a new observation into a prior state.

    S_t = alpha * E_t + (1 - alpha) * S_{t-1}

    alpha=1 returns ``current`` unchanged, alpha=0 returns ``previous`` unchanged.

    Raises:
        DimensionMismatchError: if the two vectors differ in length.
    """
    current = as_vector(current)
    previous = as_vector(previous)
    if current.shape != previous.shape:
        raise DimensionMismatchError(previous.shape[0], current.shape[0])

    weight = DTYPE(alpha)
    return weight * current + (DTYPE(1.0) - weight) * previous
