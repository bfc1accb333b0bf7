"""
Runtime configuration read from the environment (and a .env file when present).
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Corpus
CORPUS_PATH = os.getenv("CORPUS_PATH", "cat-facts.txt")

# Providers
EMBED_PROVIDER = os.getenv("EMBED_PROVIDER", "ollama")  # ollama|sentence_transformers|hash
CHAT_PROVIDER = os.getenv("CHAT_PROVIDER", "ollama")  # ollama|mock
EMBEDDING_MODEL = os.getenv("EMBEDDING_MODEL", "hf.co/CompendiumLabs/bge-base-en-v1.5-gguf")
LANGUAGE_MODEL = os.getenv("LANGUAGE_MODEL", "hf.co/bartowski/Llama-3.2-1B-Instruct-GGUF")
SENTENCE_TRANSFORMER_MODEL = os.getenv("SENTENCE_TRANSFORMER_MODEL", "all-MiniLM-L6-v2")
OLLAMA_HOST = os.getenv("OLLAMA_HOST", "http://localhost:11434")
HASH_EMBED_DIM = int(os.getenv("HASH_EMBED_DIM", "384"))

# Retrieval and generation
TOP_N = int(os.getenv("TOP_N", "3"))
CHAT_TEMPERATURE = float(os.getenv("CHAT_TEMPERATURE", "0.1"))

EMBED_PROVIDERS = ["ollama", "sentence_transformers", "hash"]
CHAT_PROVIDERS = ["ollama", "mock"]


def get_embedding_provider(provider: str = None):
    """Build the configured embedding provider."""
    provider = provider or EMBED_PROVIDER

    if provider == "ollama":
        from factrag.vector.embeddings import OllamaEmbedding
        return OllamaEmbedding(EMBEDDING_MODEL, host=OLLAMA_HOST)
    elif provider == "sentence_transformers":
        from factrag.vector.embeddings import SentenceTransformerEmbedding
        return SentenceTransformerEmbedding(SENTENCE_TRANSFORMER_MODEL)
    elif provider == "hash":
        from factrag.vector.embeddings import DeterministicHashEmbedding
        return DeterministicHashEmbedding(HASH_EMBED_DIM)
    else:
        raise ValueError(f"Unknown embedding provider: {provider}")


def get_chat_provider(provider: str = None):
    """Build the configured chat provider."""
    provider = provider or CHAT_PROVIDER

    if provider == "ollama":
        from factrag.agents.ollama_agent import OllamaChatProvider
        return OllamaChatProvider(LANGUAGE_MODEL, host=OLLAMA_HOST)
    elif provider == "mock":
        from factrag.agents.mock_agent import MockChatProvider
        return MockChatProvider()
    else:
        raise ValueError(f"Unknown chat provider: {provider}")


def validate_config(embed_provider: str = None, chat_provider: str = None, top_n: int = None, temperature: float = None):
    """Validate configuration and return any issues. Arguments override the environment settings."""
    embed_provider = embed_provider if embed_provider is not None else EMBED_PROVIDER
    chat_provider = chat_provider if chat_provider is not None else CHAT_PROVIDER
    top_n = top_n if top_n is not None else TOP_N
    temperature = temperature if temperature is not None else CHAT_TEMPERATURE
    issues = []

    if embed_provider not in EMBED_PROVIDERS:
        issues.append(f"Invalid EMBED_PROVIDER: {embed_provider}")

    if chat_provider not in CHAT_PROVIDERS:
        issues.append(f"Invalid CHAT_PROVIDER: {chat_provider}")

    if top_n < 1:
        issues.append("TOP_N must be >= 1")

    if not 0.0 <= temperature <= 2.0:
        issues.append("CHAT_TEMPERATURE must be between 0 and 2")

    if HASH_EMBED_DIM < 1:
        issues.append("HASH_EMBED_DIM must be >= 1")

    return issues
