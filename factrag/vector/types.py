"""
Record types held and produced by the in-memory vector store.
"""

from dataclasses import dataclass, field
import numpy as np


@dataclass(frozen=True, eq=False)
class VectorRecord:
    """A single ingested fact and its embedding."""

    text: str
    """The fact as it appeared in the corpus"""

    vector: np.ndarray = field(repr=False)
    """Embedding of the text (float64, read-only)"""

    def __post_init__(self):
        vector = np.array(self.vector, dtype=np.float64)
        vector.setflags(write=False)
        object.__setattr__(self, "vector", vector)

    @property
    def dimension(self) -> int:
        return len(self.vector)


@dataclass(frozen=True)
class QueryResult:
    """Represents a ranked match returned by retrieval."""

    text: str
    """Text of the matching record"""

    score: float
    """Cosine similarity of the match (-1 to 1)"""
