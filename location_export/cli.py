"""Command-line entry point: write location suggestions for a city to CSV."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from .config import SERVICE_CONFIG
from .core import (
    ExportError,
    FetchError,
    MissingFieldError,
    ParseError,
    SuggestQuery,
    WriteError,
)
from .pipelines import ExportPipeline

LOGGER = logging.getLogger(__name__)

# Most specific classes first.
_ERROR_KINDS = (
    (FetchError, "Network error"),
    (MissingFieldError, "Invalid placemark"),
    (ParseError, "Parse error"),
    (WriteError, "IO error"),
)


def describe_error(error: ExportError) -> str:
    """Return the one-line report printed for ``error``."""

    for error_type, kind in _ERROR_KINDS:
        if isinstance(error, error_type):
            return f"{kind}: {error}"
    return f"Export failed: {error}"


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="location-export",
        description="Fetch location suggestions for a city and write them to CSV.",
    )
    parser.add_argument("city", help="City name, appended verbatim to the service URL")
    parser.add_argument(
        "--output",
        type=Path,
        help="Output CSV path (defaults to '<city>.csv' in the current directory)",
    )
    parser.add_argument(
        "--base-url",
        default=SERVICE_CONFIG.base_url,
        help=f"Suggestion endpoint prefix (default: {SERVICE_CONFIG.base_url})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=SERVICE_CONFIG.timeout,
        help="Timeout in seconds for the HTTP request (default: no explicit timeout)",
    )
    parser.add_argument(
        "--encoding",
        default=SERVICE_CONFIG.encoding,
        help="Response encoding, or 'auto' to detect it (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    query = SuggestQuery(city_name=args.city, base_url=args.base_url)
    output_path = args.output or Path(f"{args.city}.csv")
    pipeline = ExportPipeline.default(timeout=args.timeout, encoding=args.encoding)

    try:
        summary = pipeline.run(query, output_path)
    except ExportError as error:
        print(describe_error(error), file=sys.stderr)
        return 1

    LOGGER.info("file %s generated at: %s", summary.output_path, Path.cwd())
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
