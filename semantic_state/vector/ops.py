"""
Vector math primitives for the semantic state engine.
Stateless helpers over 1-D float32 arrays: dot product, magnitude, cosine similarity, normalization.
"""

from typing import Sequence, Union

import numpy as np

from ..core.errors import DimensionMismatchError, InvalidShapeError

DTYPE = np.float32

VectorLike = Union[np.ndarray, Sequence[float]]


def as_vector(values: VectorLike) -> np.ndarray:
    """
    Copy a sequence of numbers into an owned float32 array.

    Raises:
        InvalidShapeError: if the input is a scalar or nested, rather than flat.
    """
    vector = np.array(values, dtype=DTYPE)
    if vector.ndim != 1:
        raise InvalidShapeError(vector.shape)
    return vector


def _dot32(a: np.ndarray, b: np.ndarray) -> np.float32:
    # Unequal lengths are truncated to the shorter one, like zip.
    n = min(a.shape[0], b.shape[0])
    return DTYPE(np.dot(a[:n], b[:n]))


def dot(a: VectorLike, b: VectorLike) -> float:
    """Sum of elementwise products. Callers are expected to pass equal lengths."""
    return float(_dot32(as_vector(a), as_vector(b)))


def magnitude(v: VectorLike) -> float:
    """L2 norm of a vector."""
    v = as_vector(v)
    return float(np.sqrt(_dot32(v, v)))


def cosine_similarity(a: VectorLike, b: VectorLike) -> float:
    """
    Cosine similarity between two vectors, clamped to [-1, 1].

    Returns exactly 0.0 when either vector has zero magnitude, so zero vectors
    never produce NaN.
    """
    a = as_vector(a)
    b = as_vector(b)

    mag_a = np.sqrt(_dot32(a, a))
    mag_b = np.sqrt(_dot32(b, b))
    if mag_a == 0.0 or mag_b == 0.0:
        return 0.0

    similarity = _dot32(a, b) / (mag_a * mag_b)
    return float(np.clip(similarity, -1.0, 1.0))


def normalize(v: VectorLike) -> np.ndarray:
    """Scale a vector to unit length. A zero vector comes back as zeros of the same length."""
    v = as_vector(v)
    mag = np.sqrt(_dot32(v, v))
    if mag == 0.0:
        return np.zeros(v.shape[0], dtype=DTYPE)
    return (v / mag).astype(DTYPE)


def add(a: VectorLike, b: VectorLike) -> np.ndarray:
    """Elementwise sum of two equal-length vectors."""
    a = as_vector(a)
    b = as_vector(b)
    if a.shape != b.shape:
        raise DimensionMismatchError(a.shape[0], b.shape[0])
    return a + b


def scale(v: VectorLike, scalar: float) -> np.ndarray:
    """Multiply every component of a vector by a scalar."""
    return as_vector(v) * DTYPE(scalar)
