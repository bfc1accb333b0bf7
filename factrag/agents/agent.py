"""
Chat provider interface: a system instruction and a user message in, answer text out.
"""

from abc import ABC, abstractmethod
from typing import Dict, List


class IChatProvider(ABC):
    """
    Abstract base class for chat backends.
    All providers must implement the chat method.
    """

    def __init__(self, model_name: str):
        self.model_name = model_name

    @abstractmethod
    def chat(self, system_instruction: str, user_message: str, temperature: float = 0.1) -> str:
        """
        Generate an answer to user_message constrained by system_instruction.

        Args:
            system_instruction: Grounding instruction sent as the system message
            user_message: The user's question
            temperature: Sampling temperature

        Returns:
            The generated answer text

        Raises:
            ChatUnavailable: if the backend fails
        """
        pass

    def build_messages(self, system_instruction: str, user_message: str) -> List[Dict[str, str]]:
        """Messages array in the role/content format chat backends expect."""
        return [
            {'role': 'system', 'content': system_instruction},
            {'role': 'user', 'content': user_message},
        ]
