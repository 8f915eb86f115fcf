"""Shared CLI plumbing for the demo scripts.

Every demo follows the same shape: parse flags, check the API key, make
one structured request, report the result. Failures of the request are
caught here and turned into a None result, so a demo never exits with a
traceback for a bad model answer.
"""

import argparse
import sys
from typing import Optional, Type, TypeVar

from pydantic import BaseModel

from src import config
from src.shared.extraction import ExtractionError, SchemaViolation, request_structured
from src.shared.files import setup_file_logging, setup_logging

T = TypeVar("T", bound=BaseModel)

logger = setup_logging(__name__)


def build_parser(description: str, default_prompt: str) -> argparse.ArgumentParser:
    """Argument parser with the flags every demo accepts."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--model", type=str, default=config.GEMINI_MODEL,
        help=f"Gemini model (default: {config.GEMINI_MODEL})",
    )
    parser.add_argument(
        "--prompt", type=str, default=default_prompt,
        help="Override the built-in prompt",
    )
    parser.add_argument(
        "--log-file", action="store_true",
        help=f"Also write logs to a timestamped file in {config.LOGS_DIR}",
    )
    return parser


def start_demo(args: argparse.Namespace, name: str) -> None:
    """Common startup: optional file logging, then the credential check.

    Exits with status 1 when GOOGLE_API_KEY is missing.
    """
    if args.log_file:
        log_file = setup_file_logging(name)
        logger.info(f"Logging to {log_file}")

    try:
        config.validate_api_key()
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"Prompt: {args.prompt}")


def run_structured(
    prompt: str,
    schema: Type[T],
    system_instruction: Optional[str],
    model: str,
    log_raw: bool = False,
) -> Optional[T]:
    """Make the demo's single request; return None on any extraction failure."""
    try:
        return request_structured(
            prompt,
            schema,
            system_instruction=system_instruction,
            model=model,
            log_raw=log_raw,
        )
    except ExtractionError as e:
        logger.error(e.describe())
        if isinstance(e, SchemaViolation):
            for violation in e.violations:
                logger.error(f"  - {violation}")
        return None
