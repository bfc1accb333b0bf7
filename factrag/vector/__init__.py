"""
Vector layer: record types, the in-memory store, similarity and embedding providers.
"""

from .index import IVectorStore, InMemoryVectorStore, RecordView
from .types import VectorRecord, QueryResult
from .similarity import cosine_similarity
from .embeddings import (
    IEmbeddingProvider,
    DeterministicHashEmbedding,
    OllamaEmbedding,
    SentenceTransformerEmbedding,
)

__all__ = [
    'IVectorStore',
    'InMemoryVectorStore',
    'RecordView',
    'VectorRecord',
    'QueryResult',
    'cosine_similarity',
    'IEmbeddingProvider',
    'DeterministicHashEmbedding',
    'OllamaEmbedding',
    'SentenceTransformerEmbedding',
]
