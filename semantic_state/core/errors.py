"""
Exceptions raised by the semantic state engine.
All of them derive from SemanticStateError so hosts can catch the package's failures in one place.
"""

from typing import Iterable


class SemanticStateError(Exception):
    """Base exception for semantic state operations."""
    pass


class EmptyInputError(SemanticStateError, ValueError):
    """Raised when an embedding with no components is supplied."""

    def __init__(self, message: str = "Embedding must not be empty"):
        super().__init__(message)


class DimensionMismatchError(SemanticStateError, ValueError):
    """Raised when an embedding's length differs from the established dimension."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Embedding dimension mismatch: expected {expected}, got {actual}")


class InvalidParameterError(SemanticStateError, ValueError):
    """Raised when engine parameters fail validation."""

    def __init__(self, issues: Iterable[str]):
        self.issues = list(issues)
        super().__init__(f"Engine configuration invalid: {self.issues}")


class InvalidShapeError(SemanticStateError, ValueError):
    """Raised when an embedding is not a flat, one-dimensional sequence."""

    def __init__(self, shape):
        self.shape = tuple(shape)
        super().__init__(f"Embedding must be a one-dimensional sequence, got shape {self.shape}")
