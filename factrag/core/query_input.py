"""
Question input for the CLI: interactive prompt or piped stdin.
"""

import sys
from abc import ABC, abstractmethod

PROMPT = "Ask me a question: "


class IQueryReader(ABC):
    """Abstract interface for reading the user's question."""

    @abstractmethod
    def read_query(self) -> str:
        pass


class InteractiveQueryReader(IQueryReader):
    """Prompts on the terminal."""

    def __init__(self, input_func=None):
        self._input = input_func or input

    def read_query(self) -> str:
        try:
            return self._input(PROMPT)
        except EOFError:
            return ""


class PipedQueryReader(IQueryReader):
    """Reads all of a piped stream as one question, prompting instead if it was empty."""

    def __init__(self, stream=None, fallback: IQueryReader = None):
        self.stream = stream if stream is not None else sys.stdin
        self.fallback = fallback if fallback is not None else InteractiveQueryReader()

    def read_query(self) -> str:
        query = self.stream.read().strip()
        if not query:
            return self.fallback.read_query()
        return query


def select_query_reader(stream=None) -> IQueryReader:
    """Pick the reader for stream: interactive on a TTY, piped otherwise."""
    stream = stream if stream is not None else sys.stdin
    if stream.isatty():
        return InteractiveQueryReader()
    return PipedQueryReader(stream)
