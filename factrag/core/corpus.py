"""
Flat-file corpus loading: one fact per line.
"""

from pathlib import Path
from typing import List

from .errors import CorpusUnavailable


def parse_corpus(text: str) -> List[str]:
    """Split text into stripped, non-blank lines, preserving order."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_corpus(path) -> List[str]:
    """
    Read a UTF-8 corpus file.

    Raises:
        CorpusUnavailable: if the file is missing or unreadable
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusUnavailable(f"Cannot read corpus {path}: {e}") from e
    return parse_corpus(text)
