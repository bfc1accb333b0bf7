"""
Ingestion and query orchestration.

State machine: IDLE -> INGESTING -> READY -> QUERYING -> ANSWERED, with FAILED
reachable from INGESTING or QUERYING. Ingestion is all-or-nothing: records are
embedded into a private store that is only published once every line succeeds.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from . import config
from .errors import InvalidQuery, PipelineNotReady
from .prompt import build_instruction
from .retriever import retrieve
from ..vector.index import InMemoryVectorStore
from ..vector.types import QueryResult
from util.logging import logger

PROGRESS_EVERY = 10


class PipelineState(str, Enum):
    IDLE = "idle"
    INGESTING = "ingesting"
    READY = "ready"
    QUERYING = "querying"
    ANSWERED = "answered"
    FAILED = "failed"


@dataclass
class Answer:
    """Result of one query: the ranked matches shown to the user and the generated text."""
    query: str
    matches: List[QueryResult] = field(default_factory=list)
    instruction: str = ""
    text: str = ""


class RagPipeline:
    """
    Wires an embedding provider, the vector store and a chat provider.

    Providers are passed in so tests can supply stubs; the CLI builds them
    from config.
    """

    def __init__(self, embedding_provider, chat_provider, top_n: int = None, temperature: float = None):
        self.embedding_provider = embedding_provider
        self.chat_provider = chat_provider
        self.top_n = top_n if top_n is not None else config.TOP_N
        self.temperature = temperature if temperature is not None else config.CHAT_TEMPERATURE
        self.state = PipelineState.IDLE
        self.last_error: Optional[Exception] = None
        self._store: Optional[InMemoryVectorStore] = None

    @property
    def store(self) -> Optional[InMemoryVectorStore]:
        """The published store, or None until an ingestion has fully succeeded."""
        return self._store

    @property
    def record_count(self) -> int:
        return len(self._store) if self._store is not None else 0

    def ingest(self, lines: Iterable[str]) -> int:
        """
        Embed and store every non-blank line, in order.

        Any failure aborts the whole ingestion: the state becomes FAILED, no
        store is exposed, and the original error is re-raised.

        Returns:
            Number of records stored
        """
        chunks = [line.strip() for line in lines if line.strip()]
        self.state = PipelineState.INGESTING
        self._store = None
        self.last_error = None

        store = InMemoryVectorStore()
        try:
            for i, chunk in enumerate(chunks, start=1):
                embedding = self.embedding_provider.embed_text(chunk)
                store.append(chunk, embedding)
                if i % PROGRESS_EVERY == 0:
                    logger.log_ingestion("in_progress", i, len(chunks))
        except Exception as e:
            self.state = PipelineState.FAILED
            self.last_error = e
            logger.log_ingestion("failed", len(store), len(chunks), {"error": str(e)[:100]})
            raise

        self._store = store
        self.state = PipelineState.READY
        logger.log_ingestion("success", len(store), len(chunks), {"dimension": store.dimension})
        return len(store)

    def query(self, query: str, top_n: int = None) -> Answer:
        """
        Answer a question from the ingested facts.

        Raises:
            InvalidQuery: if query is empty or whitespace, before any provider call
            PipelineNotReady: if no ingestion has completed
            EmbeddingUnavailable, ChatUnavailable: provider failures, unchanged
        """
        if query is None or not query.strip():
            raise InvalidQuery("Query must not be empty")
        if self._store is None:
            raise PipelineNotReady(f"Cannot query while pipeline is {self.state.value}")

        top_n = top_n if top_n is not None else self.top_n
        self.state = PipelineState.QUERYING
        try:
            matches = retrieve(query, top_n, self.embedding_provider, self._store)
            instruction = build_instruction(matches)
            text = self.chat_provider.chat(instruction, query, temperature=self.temperature)
        except Exception as e:
            self.state = PipelineState.FAILED
            self.last_error = e
            logger.log_operation("pipeline.query", "failed", {"error": str(e)[:100]})
            raise

        self.state = PipelineState.ANSWERED
        return Answer(query=query, matches=matches, instruction=instruction, text=text)
