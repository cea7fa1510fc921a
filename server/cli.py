"""
Command-line driver for the drafting pipeline.

Reads a sales form from a JSON file (or stdin with ``-``), runs the same
enrich-then-generate pipeline as ``POST /api/generate`` and prints the drafts.
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from sales_agent.llm.gemini_client import GeminiError, GeminiText
from sales_agent.services.draft_generator import parse_drafts

from .config.settings import load_config
from .services.email_draft_service import EmailDraftService

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate three sales email drafts from a form JSON file.",
    )
    parser.add_argument("form", help="Path to the form JSON file, or '-' to read stdin")
    parser.add_argument("--model", help="Gemini model name (defaults to GEMINI_MODEL)")
    parser.add_argument("--raw", action="store_true", help="Print the raw upstream response instead of parsed drafts")
    parser.add_argument("--log-level", default=None, help="Logging level (defaults to LOG_LEVEL)")
    return parser


def _read_form(path: str) -> dict:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    config = load_config("production")
    logging.basicConfig(
        level=(args.log_level or str(config["LOG_LEVEL"])).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not config["GEMINI_API_KEY"]:
        print("GEMINI_API_KEY environment variable is missing.", file=sys.stderr)
        return 1

    try:
        form = _read_form(args.form)
    except (OSError, ValueError) as exc:
        print(f"Unable to read form: {exc}", file=sys.stderr)
        return 1

    text_client = GeminiText(
        api_key=str(config["GEMINI_API_KEY"]),
        model=args.model or str(config["GEMINI_MODEL"]),
        timeout=int(config["GEMINI_TIMEOUT"]),
    )
    try:
        data = EmailDraftService(text_client=text_client).generate_drafts(form)
    except (GeminiError, TypeError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if args.raw:
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return 0

    try:
        drafts = parse_drafts(data)
    except ValueError as exc:
        print(f"Could not parse drafts: {exc}", file=sys.stderr)
        return 1

    for draft in drafts:
        print(f"=== {draft.tone} ===")
        print(f"Subject: {draft.subject}")
        print(draft.body)
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
