"""
Cosine similarity between embedding vectors.
"""

import numpy as np

from ..core.errors import DimensionMismatch, InvalidEmbedding


def ensure_finite(vector: np.ndarray) -> None:
    """Raise InvalidEmbedding if vector holds NaN or infinite values."""
    if not np.all(np.isfinite(vector)):
        raise InvalidEmbedding("Embedding contains NaN or infinite values")


def cosine_similarity(a, b) -> float:
    """
    Compute dot(a, b) / (|a| * |b|).

    A zero-magnitude vector has similarity 0.0 to everything, so rankings
    never see NaN.

    Raises:
        DimensionMismatch: if the vectors differ in length
        InvalidEmbedding: if either vector holds NaN or infinite values
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        raise DimensionMismatch(len(a), len(b))
    ensure_finite(a)
    ensure_finite(b)

    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    similarity = float(np.dot(a, b) / (norm_a * norm_b))
    # Rounding can push |similarity| slightly past 1
    return max(-1.0, min(1.0, similarity))
