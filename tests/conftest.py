"""
Shared stubs for pipeline tests.
"""

import math

import pytest

from factrag.core.errors import EmbeddingUnavailable
from factrag.vector.embeddings import IEmbeddingProvider
from factrag.vector.index import InMemoryVectorStore

CAT_SLEEP = "Cats sleep 12-16 hours a day."
CAT_CLAWS = "Cats have retractable claws."
CAT_QUERY = "How much do cats sleep?"


class StubEmbedding(IEmbeddingProvider):
    """Looks vectors up in a table; raises EmbeddingUnavailable for texts listed in fail_on."""

    def __init__(self, vectors, fail_on=()):
        self.vectors = dict(vectors)
        self.fail_on = set(fail_on)
        self.calls = []

    def embed_text(self, text):
        self.calls.append(text)
        if text in self.fail_on:
            raise EmbeddingUnavailable(f"embedding failed for {text!r}")
        return list(self.vectors[text])

    def get_dimension(self):
        return len(next(iter(self.vectors.values())))


def make_store(items):
    """Store holding (text, embedding) pairs in order."""
    store = InMemoryVectorStore()
    for text, embedding in items:
        store.append(text, embedding)
    return store


def unit_at(cosine):
    """2-D unit vector whose cosine similarity to [1, 0] is `cosine`."""
    return [cosine, math.sqrt(1 - cosine ** 2)]


@pytest.fixture
def cat_embeddings():
    """Query [1, 0]; the sleep fact scores 0.9 and the claws fact 0.3."""
    return StubEmbedding({
        CAT_QUERY: [1.0, 0.0],
        CAT_SLEEP: unit_at(0.9),
        CAT_CLAWS: unit_at(0.3),
    })
