"""
Structured logging for ingestion, retrieval and provider calls.
"""

import logging
import os
from typing import Any, Dict, List

TEXT_PREVIEW_LIMIT = 50


def _preview(text: str, limit: int = TEXT_PREVIEW_LIMIT) -> str:
    return text[:limit] + "..." if len(text) > limit else text


class StructuredLogger:
    """Structured logger for pipeline operations."""

    def __init__(self, name: str = "factrag"):
        self.logger = logging.getLogger(name)
        level = logging.DEBUG if os.getenv("DEBUG", "false").lower() == "true" else logging.INFO
        self.logger.setLevel(level)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation. Failed operations are logged at error level."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        if status == "failed":
            self.logger.error(message)
        else:
            self.logger.info(message)

    def log_ingestion(self, status: str, record_count: int, total: int, details: Dict[str, Any] = None):
        """Log ingestion progress or outcome."""
        log_details = {"record_count": record_count, "total": total}
        if details:
            log_details.update(details)

        self.log_operation("pipeline.ingest", status, log_details)

    def log_retrieval(self, query: str, top_n: int, matches: List[Any], status: str = "success"):
        """Log a retrieval with the scores it produced."""
        log_details = {
            "query": _preview(query),
            "top_n": top_n,
            "scores": [round(m.score, 4) for m in matches],
        }
        self.log_operation("retriever.retrieve", status, log_details)

    def log_chat(self, model: str, start_time: float, end_time: float, status: str = "success", details: Dict[str, Any] = None):
        """Log a chat call and its duration."""
        duration_ms = round((end_time - start_time) * 1000, 2)
        log_details = {"model": model, "duration_ms": duration_ms}
        if details:
            log_details.update(details)

        self.log_operation("chat.complete", status, log_details)

    def log_embedding_failure(self, model: str, text: str, error: str):
        """Log a failed embedding request."""
        self.log_operation("embedding.embed", "failed", {
            "model": model,
            "text": _preview(text),
            "error": error[:100],
        })

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)


# Global logger instance
logger = StructuredLogger()
