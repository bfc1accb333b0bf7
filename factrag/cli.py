#!/usr/bin/env python3
"""
Command-line entry point: load the corpus, ingest it, ask one question.
"""

import argparse
import sys

from factrag.agents.ollama_agent import check_ollama_health
from factrag.core import config
from factrag.core.corpus import load_corpus
from factrag.core.errors import RagError
from factrag.core.pipeline import RagPipeline
from factrag.core.query_input import select_query_reader
from util.logging import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Answer a question from a corpus of short facts")
    parser.add_argument("--corpus", default=config.CORPUS_PATH, help="Path to the corpus file, one fact per line")
    parser.add_argument("--top-n", type=int, default=config.TOP_N, help="Number of facts to retrieve")
    parser.add_argument("--question", help="Question to ask; read from stdin when omitted")
    parser.add_argument("--embed-provider", choices=config.EMBED_PROVIDERS, default=config.EMBED_PROVIDER)
    parser.add_argument("--chat-provider", choices=config.CHAT_PROVIDERS, default=config.CHAT_PROVIDER)
    parser.add_argument("--temperature", type=float, default=config.CHAT_TEMPERATURE)
    return parser


def print_answer(answer, out=None):
    out = out or sys.stdout
    print("Retrieved knowledge:", file=out)
    for match in answer.matches:
        print(f" - (similarity: {match.score:.2f}) {match.text}", file=out)
    print("Chatbot response:", file=out)
    print(answer.text, file=out)


def main(argv=None, stdin=None) -> int:
    args = build_parser().parse_args(argv)

    issues = config.validate_config(args.embed_provider, args.chat_provider, args.top_n, args.temperature)
    if issues:
        for issue in issues:
            logger.error(f"Invalid configuration: {issue}")
        return 2

    if "ollama" in (args.embed_provider, args.chat_provider) and not check_ollama_health(config.OLLAMA_HOST):
        logger.error(f"Ollama is not reachable at {config.OLLAMA_HOST}")
        return 1

    try:
        dataset = load_corpus(args.corpus)
        print(f"Loaded {len(dataset)} entries")

        pipeline = RagPipeline(
            embedding_provider=config.get_embedding_provider(args.embed_provider),
            chat_provider=config.get_chat_provider(args.chat_provider),
            top_n=args.top_n,
            temperature=args.temperature,
        )
        pipeline.ingest(dataset)

        question = args.question if args.question is not None else select_query_reader(stdin).read_query()
        answer = pipeline.query(question)
    except RagError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    print_answer(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
