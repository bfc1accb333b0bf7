"""Core pipeline: configuration, errors, retrieval, prompt assembly and orchestration."""
