"""
Grounding instruction for the chat model.
"""

from typing import Iterable

INSTRUCTION_HEADER = (
    "You are a helpful chatbot.\n"
    "Use only the following pieces of context to answer the question. "
    "Don't make up any new information:\n"
)


def build_instruction(matches: Iterable) -> str:
    """
    Build the system instruction from ranked matches.

    Each match's text becomes a ' - ' bullet in the order given. Scores are
    left out. No matches leaves the context section empty.
    """
    context_lines = [f" - {match.text}" for match in matches]
    return INSTRUCTION_HEADER + "\n".join(context_lines)
