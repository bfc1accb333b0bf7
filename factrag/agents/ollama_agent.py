"""
Ollama-backed chat provider.
"""

import time

import ollama

from .agent import IChatProvider
from ..core.errors import ChatUnavailable
from util.logging import logger


class OllamaChatProvider(IChatProvider):
    """Chat provider that calls a local Ollama model with a single non-streaming request."""

    def __init__(self, model_name: str, host: str = None):
        super().__init__(model_name)
        self.host = host
        self._client = None

    @property
    def client(self) -> ollama.Client:
        if self._client is None:
            self._client = ollama.Client(host=self.host)
        return self._client

    def chat(self, system_instruction: str, user_message: str, temperature: float = 0.1) -> str:
        messages = self.build_messages(system_instruction, user_message)
        start_time = time.time()

        try:
            response = self.client.chat(
                model=self.model_name,
                messages=messages,
                stream=False,
                options={'temperature': temperature},
            )
        except ollama.ResponseError as e:
            logger.log_chat(self.model_name, start_time, time.time(), "failed", {"error": str(e)[:100]})
            raise ChatUnavailable(f"Ollama model error: {e.error}") from e
        except Exception as e:
            logger.log_chat(self.model_name, start_time, time.time(), "failed", {"error": str(e)[:100]})
            raise ChatUnavailable(f"Ollama chat request failed: {e}") from e

        content = response['message']['content'] or ''
        logger.log_chat(self.model_name, start_time, time.time(), details={"response_length": len(content)})
        return content


def check_ollama_health(host: str = None) -> bool:
    """Check whether the Ollama service at host answers a model listing."""
    try:
        ollama.Client(host=host).list()
        return True
    except Exception:
        return False
