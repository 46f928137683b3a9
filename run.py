"""Entry point: ask a dataset a question from the command line."""

import argparse
import logging
import sys

import requests

from college_rag.api import ApiClient, ChatApi
from college_rag.chat import extract_think_content
from college_rag.config import load_config


def main() -> None:
    """Ask one question and print the visible answer."""
    parser = argparse.ArgumentParser(description="Ask a College RAG dataset a question.")
    parser.add_argument("dataset_id")
    parser.add_argument("question")
    parser.add_argument("--config", default="config.yaml")
    parser.add_argument("--show-reasoning", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    core = ApiClient(
        config.api.core_url,
        access_token=config.access_token,
        timeout=config.api.request_timeout_seconds,
    )
    chat = ChatApi(
        core,
        timeout=config.chat.timeout_seconds,
        max_retries=config.chat.max_retries,
    )

    try:
        response = chat.ask_question(args.dataset_id, args.question)
    except requests.RequestException as exc:
        print(f"Request failed: {exc}", file=sys.stderr)
        sys.exit(1)

    split = extract_think_content(response.answer)
    if args.show_reasoning and split.hidden_text:
        print(split.hidden_text)
        print()
    print(split.visible_text)
    for citation in response.citations:
        print(f"  [chunk {citation.chunk_id}] score {citation.score:.3f}")


if __name__ == "__main__":
    main()
