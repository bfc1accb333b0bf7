"""Chat providers."""

from .agent import IChatProvider
from .ollama_agent import OllamaChatProvider, check_ollama_health
from .mock_agent import MockChatProvider

__all__ = ['IChatProvider', 'OllamaChatProvider', 'MockChatProvider', 'check_ollama_health']
