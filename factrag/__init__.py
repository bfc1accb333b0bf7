"""Retrieval-augmented question answering over a corpus of short facts."""

__version__ = "0.1.0"
