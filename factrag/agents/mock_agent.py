"""
Mock chat provider for offline runs and tests.
Answers from the grounding instruction without any external service.
"""

from .agent import IChatProvider

CONTEXT_BULLET = " - "


class MockChatProvider(IChatProvider):
    """
    Returns the first context line of the instruction as the answer,
    or a fixed fallback when the context is empty.
    """

    FALLBACK_ANSWER = "I don't know based on the provided context."

    def __init__(self, model_name: str = "mock-model"):
        super().__init__(model_name)
        self.calls = []

    def chat(self, system_instruction: str, user_message: str, temperature: float = 0.1) -> str:
        self.calls.append({
            'system_instruction': system_instruction,
            'user_message': user_message,
            'temperature': temperature,
        })

        for line in system_instruction.splitlines():
            if line.startswith(CONTEXT_BULLET):
                return line[len(CONTEXT_BULLET):]
        return self.FALLBACK_ANSWER
