"""
Similarity-ranked retrieval over the in-memory store.

Every query is an exhaustive O(n*D) scan: one cosine similarity per record,
then a stable descending sort so records with exactly equal scores keep
their insertion order. Corpora here are hundreds to low thousands of facts.
"""

from typing import List, Sequence

import numpy as np

from ..vector.similarity import cosine_similarity
from ..vector.types import QueryResult, VectorRecord
from util.logging import logger


def rank_records(query_vector, records: Sequence[VectorRecord], top_n: int) -> List[QueryResult]:
    """
    Score every record against query_vector and return the best top_n.

    Args:
        query_vector: Embedding of the query
        records: Records in insertion order
        top_n: Maximum number of results (positive)

    Returns:
        QueryResults sorted by descending score, ties in insertion order
    """
    if top_n < 1:
        raise ValueError(f"top_n must be a positive integer, got {top_n}")

    query_vector = np.asarray(query_vector, dtype=np.float64)
    scored = []
    for record in records:
        scored.append(QueryResult(text=record.text, score=cosine_similarity(query_vector, record.vector)))

    # sorted() is stable, including with reverse=True
    scored = sorted(scored, key=lambda result: result.score, reverse=True)
    return scored[:top_n]


def retrieve(query: str, top_n: int, embedding_provider, vector_store) -> List[QueryResult]:
    """
    Embed query once and return the top_n most similar records.

    An empty store returns [] without calling the embedding provider.
    Embedding failures propagate unchanged; there are no partial results.
    """
    if top_n < 1:
        raise ValueError(f"top_n must be a positive integer, got {top_n}")

    if len(vector_store) == 0:
        logger.log_retrieval(query, top_n, [], status="empty_store")
        return []

    query_vector = embedding_provider.embed_text(query)
    results = rank_records(query_vector, vector_store.all(), top_n)

    logger.log_retrieval(query, top_n, results)
    return results
