"""
Append-only in-memory store: ordering, dimensionality and immutability.
"""

import numpy as np
import pytest

from factrag.core.errors import DimensionMismatch, InvalidEmbedding
from conftest import make_store
from factrag.vector.index import IVectorStore, InMemoryVectorStore
from factrag.vector.types import VectorRecord


def test_vector_store_interface():
    """InMemoryVectorStore implements IVectorStore."""
    store = InMemoryVectorStore()
    assert isinstance(store, IVectorStore)


def test_empty_store():
    store = InMemoryVectorStore()

    assert len(store) == 0
    assert store.dimension is None
    assert list(store.all()) == []


def test_append_sets_dimension_on_first_insert():
    store = InMemoryVectorStore()

    record = store.append("first fact", [1.0, 0.0, 0.0])

    assert isinstance(record, VectorRecord)
    assert store.dimension == 3
    assert len(store) == 1
    assert record.text == "first fact"
    assert record.vector.dtype == np.float64


def test_all_preserves_insertion_order():
    store = make_store([
        ("a", [1.0, 0.0]),
        ("b", [0.0, 1.0]),
        ("c", [1.0, 1.0]),
    ])

    assert [record.text for record in store.all()] == ["a", "b", "c"]


def test_append_with_different_length_fails():
    store = InMemoryVectorStore()
    store.append("a", [1.0, 0.0])

    with pytest.raises(DimensionMismatch) as exc_info:
        store.append("b", [1.0, 0.0, 0.0])

    assert exc_info.value.expected == 2
    assert exc_info.value.actual == 3
    assert len(store) == 1


def test_append_empty_embedding_fails():
    store = InMemoryVectorStore()

    with pytest.raises(DimensionMismatch):
        store.append("empty", [])
    assert store.dimension is None


@pytest.mark.parametrize("bad", [[float("nan"), 1.0], [float("inf"), 1.0]])
def test_append_non_finite_embedding_fails(bad):
    store = InMemoryVectorStore()
    store.append("good", [1.0, 0.0])

    with pytest.raises(InvalidEmbedding):
        store.append("corrupt", bad)

    assert [record.text for record in store.all()] == ["good"]


def test_first_append_non_finite_leaves_store_empty():
    store = InMemoryVectorStore()

    with pytest.raises(InvalidEmbedding):
        store.append("corrupt", [float("nan"), 0.0])

    assert len(store) == 0
    assert store.dimension is None


def test_all_is_a_live_read_only_view():
    """The view reflects later appends and offers no way to mutate the store."""
    store = InMemoryVectorStore()
    store.append("a", [1.0, 0.0])
    view = store.all()

    store.append("b", [0.0, 1.0])

    assert len(view) == 2
    assert view[1].text == "b"
    assert not hasattr(view, "append")
    with pytest.raises(TypeError):
        view[0] = None


def test_records_are_immutable():
    """Neither a record's fields nor its vector can be changed after creation."""
    source = [1.0, 2.0]
    store = InMemoryVectorStore()
    record = store.append("a", source)

    source[0] = 99.0
    assert record.vector[0] == 1.0

    with pytest.raises(ValueError):
        record.vector[0] = 5.0
    with pytest.raises(AttributeError):
        record.text = "changed"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
