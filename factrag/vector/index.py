"""
Append-only in-memory vector store.
Records keep insertion order and share one dimensionality for the store's lifetime.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import List, Optional

from ..core.errors import DimensionMismatch
from .similarity import ensure_finite
from .types import VectorRecord


class IVectorStore(ABC):
    """Abstract interface for vector storage operations."""

    @abstractmethod
    def append(self, text: str, embedding) -> VectorRecord:
        """Add a single record to the store."""
        pass

    @abstractmethod
    def all(self) -> Sequence:
        """Read-only view of every record in insertion order."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass


class RecordView(Sequence):
    """Read-only window onto a store's records. Cheap to create, never copies."""

    def __init__(self, records: List[VectorRecord]):
        self._records = records

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RecordView({len(self._records)} records)"


class InMemoryVectorStore(IVectorStore):
    """List-backed store; similarity search is an exhaustive scan done by the retriever."""

    def __init__(self):
        self._records: List[VectorRecord] = []
        self._dimension: Optional[int] = None

    @property
    def dimension(self) -> Optional[int]:
        """Dimensionality shared by all records, None while the store is empty."""
        return self._dimension

    def append(self, text: str, embedding) -> VectorRecord:
        """
        Add a record for text.

        Raises:
            DimensionMismatch: if the embedding is empty or its length differs
                from the records already stored
            InvalidEmbedding: if the embedding holds NaN or infinite values
        """
        record = VectorRecord(text=text, vector=embedding)

        if record.dimension == 0:
            raise DimensionMismatch(self._dimension or 0, 0)
        if self._dimension is not None and record.dimension != self._dimension:
            raise DimensionMismatch(self._dimension, record.dimension)
        ensure_finite(record.vector)

        if self._dimension is None:
            self._dimension = record.dimension
        self._records.append(record)
        return record

    def all(self) -> RecordView:
        return RecordView(self._records)

    def __len__(self) -> int:
        return len(self._records)
