"""Command line entry point for categorizing image detection data.

Usage:
    disc-categorize detection.json
    disc-categorize - --brands brands.txt --molds molds.txt < detection.json
"""
import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

import structlog

from disc_categorizer.config import configure_logging, get_settings
from disc_categorizer.models.responses import CategorizeResponse
from disc_categorizer.services.categorize import CategorizeService
from disc_categorizer.services.reference_client import (
    HttpReferenceDataProvider,
    StaticReferenceDataProvider,
)

logger = structlog.get_logger(__name__)


def match_distance(value: str) -> float:
    """argparse type for a match distance in [0, 1]."""
    try:
        distance = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid distance: {value!r}")
    if not 0.0 <= distance <= 1.0:
        raise argparse.ArgumentTypeError(f"distance must be within [0, 1], got {value}")
    return distance


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="disc-categorize",
        description="Categorize OCR words and pick the primary color of a disc image",
    )
    parser.add_argument(
        "input",
        help="Path to ImageDetectionData JSON, or '-' to read stdin",
    )
    parser.add_argument(
        "--brands",
        help="Newline separated brand names (skips the reference API)",
    )
    parser.add_argument(
        "--molds",
        help="Newline separated mold names (skips the reference API)",
    )
    parser.add_argument(
        "--allow-partial",
        action="store_true",
        help="Classify with one vocabulary when the other cannot be fetched",
    )
    parser.add_argument(
        "--threshold",
        type=match_distance,
        help="Maximum match distance in [0, 1]",
    )
    args = parser.parse_args(argv)

    if bool(args.brands) != bool(args.molds):
        parser.error("--brands and --molds must be given together")
    return args


def load_input(source: str) -> Dict[str, Any]:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as f:
        return json.load(f)


async def run(args: argparse.Namespace) -> CategorizeResponse:
    overrides: Dict[str, Any] = {}
    if args.allow_partial:
        overrides["allow_partial_vocabulary"] = True
    if args.threshold is not None:
        overrides["match_threshold"] = args.threshold
    settings = get_settings().model_copy(update=overrides)

    detection = load_input(args.input)

    if args.brands:
        provider = StaticReferenceDataProvider.from_files(args.brands, args.molds)
        return await CategorizeService(provider, settings).categorize_image_text(detection)

    async with HttpReferenceDataProvider(settings) as provider:
        return await CategorizeService(provider, settings).categorize_image_text(detection)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level, json_logs=settings.is_production)

    try:
        response = asyncio.run(run(args))
    except OSError as e:
        path = e.filename or args.input
        logger.error("file_read_failed", path=path, error=str(e))
        print(f"Error: cannot read {path}: {e.strerror or e}", file=sys.stderr)
        return 2
    except json.JSONDecodeError as e:
        logger.error("input_read_failed", input=args.input, error=str(e))
        print(f"Error: cannot read input {args.input}: {e}", file=sys.stderr)
        return 2

    print(json.dumps(response.to_dict(), indent=2))
    return 0 if response.ok else 1


if __name__ == "__main__":
    sys.exit(main())
