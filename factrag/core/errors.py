"""
Error taxonomy for the retrieval pipeline.
Provider adapters translate library failures into these; the core never swallows them.
"""


class RagError(Exception):
    """Base class for all pipeline errors."""


class DimensionMismatch(RagError):
    """Vector lengths disagree, or a vector is empty."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Vector dimension {actual} does not match expected dimension {expected}")


class InvalidEmbedding(RagError):
    """A vector holds NaN or infinite values."""


class EmbeddingUnavailable(RagError):
    """The embedding provider failed to return a vector."""


class ChatUnavailable(RagError):
    """The chat provider failed to return an answer."""


class InvalidQuery(RagError):
    """Query text is empty or whitespace only."""


class PipelineNotReady(RagError):
    """A query was issued before a corpus was fully ingested."""


class CorpusUnavailable(RagError):
    """The corpus file could not be read."""
