"""Command-line entry points: ``docqa ingest`` and ``docqa ask``.

Both commands read their inputs from the environment (or ``.env``); flags
override the environment. Exit status is 0 on success and 1 when a
configuration or provider error aborts the run.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from pydantic import ValidationError

from docqa.answering.pipeline import answer_question
from docqa.clients import build_clients
from docqa.config import Settings
from docqa.errors import ConfigurationError, DocQAError
from docqa.ingestion.pipeline import ingest_file

logger = logging.getLogger("docqa")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docqa",
        description="Question answering over a single paragraph-chunked document",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    ingest = sub.add_parser("ingest", help="Chunk, embed and upsert a document (env: FILE_PATH)")
    ingest.add_argument("--file", dest="file_path", help="Path of the text document to ingest")
    ingest.add_argument("--index", dest="index_name", help="Target collection / index name")

    ask = sub.add_parser("ask", help="Answer a question against an ingested document (env: QUESTION)")
    ask.add_argument("question", nargs="?", help="Question text")
    ask.add_argument("--index", dest="index_name", help="Collection / index to query")
    ask.add_argument("--top-k", dest="retrieval_top_k", type=int, help="Number of chunks to retrieve")
    ask.add_argument("--model", dest="llm_model_name", help="Chat model identifier")

    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Build settings from env / ``.env`` with non-empty CLI flags on top."""
    overrides: dict[str, Any] = {
        key: value
        for key, value in vars(args).items()
        if key != "command" and value is not None
    }
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def run_ingest(settings: Settings) -> int:
    settings.require_for_ingest()
    clients = build_clients(settings)
    ingest_file(settings.file_path, clients)
    return 0


def run_ask(settings: Settings) -> int:
    settings.require_for_ask()
    clients = build_clients(settings, with_llm=True)
    answer = answer_question(settings.question, clients, top_k=settings.retrieval_top_k)
    print(answer)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args)
    except ConfigurationError as exc:
        logging.basicConfig(stream=sys.stderr)
        logger.error("%s failed: %s", args.command, exc)
        return 1

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "ingest":
            return run_ingest(settings)
        return run_ask(settings)
    except DocQAError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
