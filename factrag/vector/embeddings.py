"""
Embedding providers: Ollama (default), sentence-transformers, and a deterministic hash
embedding for offline runs and tests.
"""

from abc import ABC, abstractmethod
import hashlib
import ollama
from sentence_transformers import SentenceTransformer

from ..core.errors import EmbeddingUnavailable
from util.logging import logger


class IEmbeddingProvider(ABC):
    """Abstract interface for embedding providers."""

    @abstractmethod
    def embed_text(self, text: str) -> list[float]:
        """Generate embedding vector for given text."""
        pass

    @abstractmethod
    def get_dimension(self) -> int:
        """Get the dimension of the embedding vectors."""
        pass


class DeterministicHashEmbedding(IEmbeddingProvider):
    """Deterministic hash-based embedding provider for testing purposes.

    Identical text always maps to the identical vector, so retrieval over
    duplicate facts is reproducible without a model.
    """

    def __init__(self, dimension: int = 384):
        self.dimension = dimension

    def embed_text(self, text: str) -> list[float]:
        """Generate deterministic embedding vector from chained SHA-256 digests."""
        vector = []
        counter = 0
        while len(vector) < self.dimension:
            digest = hashlib.sha256(f"{counter}:{text}".encode()).hexdigest()
            for i in range(0, len(digest), 8):
                value = int(digest[i:i + 8], 16)
                # Map [0, 2**32) onto [-1, 1)
                vector.append((value / 2**32) * 2 - 1)
            counter += 1

        return vector[:self.dimension]

    def get_dimension(self) -> int:
        return self.dimension


class OllamaEmbedding(IEmbeddingProvider):
    """Embedding provider backed by a local Ollama server."""

    def __init__(self, model_name: str, host: str = None):
        self.model_name = model_name
        self.host = host
        self._client = None
        self._dimension = None

    @property
    def client(self) -> ollama.Client:
        if self._client is None:
            self._client = ollama.Client(host=self.host)
        return self._client

    def embed_text(self, text: str) -> list[float]:
        """
        Embed text with the configured Ollama model.

        Raises:
            EmbeddingUnavailable: on any client failure or an empty vector
        """
        try:
            response = self.client.embeddings(model=self.model_name, prompt=text)
        except ollama.ResponseError as e:
            logger.log_embedding_failure(self.model_name, text, str(e))
            raise EmbeddingUnavailable(f"Ollama model error: {e.error}") from e
        except Exception as e:
            logger.log_embedding_failure(self.model_name, text, str(e))
            raise EmbeddingUnavailable(f"Ollama embedding request failed: {e}") from e

        embedding = response["embedding"]
        if not embedding:
            logger.log_embedding_failure(self.model_name, text, "empty embedding")
            raise EmbeddingUnavailable(f"Ollama returned an empty embedding for model {self.model_name}")

        if self._dimension is None:
            self._dimension = len(embedding)
        return [float(x) for x in embedding]

    def get_dimension(self) -> int:
        """Dimension of the model's vectors, probed with a dummy request on first use."""
        if self._dimension is None:
            self.embed_text("test")
        return self._dimension


class SentenceTransformerEmbedding(IEmbeddingProvider):
    """Sentence transformers embedding provider using pre-trained models."""

    def __init__(self, model_name: str = "all-MiniLM-L6-v2"):
        self.model_name = model_name
        self._model = None

    @property
    def model(self):
        if self._model is None:
            try:
                self._model = SentenceTransformer(self.model_name)
            except Exception as e:
                logger.log_embedding_failure(self.model_name, "", str(e))
                raise EmbeddingUnavailable(f"Failed to load embedding model {self.model_name}: {e}") from e
        return self._model

    def embed_text(self, text: str) -> list[float]:
        """
        Raises:
            EmbeddingUnavailable: if the model fails to load or encode
        """
        model = self.model
        try:
            embedding = model.encode(text, convert_to_tensor=False)
        except Exception as e:
            logger.log_embedding_failure(self.model_name, text, str(e))
            raise EmbeddingUnavailable(f"Sentence-transformers encode failed: {e}") from e
        return embedding.tolist()

    def get_dimension(self) -> int:
        model = self.model
        try:
            dimension = model.get_sentence_embedding_dimension()
        except Exception as e:
            logger.log_embedding_failure(self.model_name, "", str(e))
            raise EmbeddingUnavailable(f"Cannot read dimension of {self.model_name}: {e}") from e
        if dimension is None:
            raise EmbeddingUnavailable(f"Model {self.model_name} does not report a fixed dimension")
        return dimension
