"""Command line entry point: ``python -m urlkit`` or ``urlkit``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from dotenv import load_dotenv

from .canonical import canonicalize_url
from .config import HostLimits, load_app_config
from .encoding import check_host_limits, encode_host
from .parse import parse_url
from .punycode import PunycodeOverflowError
from .utils import normalize_url

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="urlkit", description="URL parsing, encoding and IDN host conversion.")
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration YAML (default: $URLKIT_CONFIG or config/urlkit.yaml)",
    )
    parser.add_argument(
        "--enforce-limits",
        action="store_true",
        help="Reject hosts exceeding DNS label (63) or name (253) length limits.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    to_ascii_cmd = subparsers.add_parser("to-ascii", help="Convert domains or email addresses to ASCII form.")
    to_ascii_cmd.add_argument("values", nargs="+")

    normalize_cmd = subparsers.add_parser("normalize", help="Re-encode every part of a URL.")
    normalize_cmd.add_argument("values", nargs="+")

    canonical_cmd = subparsers.add_parser("canonical", help="Canonicalize absolute http(s) URLs.")
    canonical_cmd.add_argument("values", nargs="+")

    parse_cmd = subparsers.add_parser("parse", help="Print the parsed parts of a URL as JSON.")
    parse_cmd.add_argument("values", nargs="+")

    return parser


def _run_each(values: Sequence[str], convert: Callable[[str], str]) -> int:
    status = 0
    for value in values:
        try:
            print(convert(value))
        except (PunycodeOverflowError, ValueError) as exc:
            print(f"urlkit: {value!r}: {exc}", file=sys.stderr)
            status = 1
    return status


def _check_result_host(convert: Callable[[str], str], limits: HostLimits) -> Callable[[str], str]:
    """Apply the host limits to the host of each URL that ``convert`` returns."""

    def run(value: str) -> str:
        result = convert(value)
        if limits.enforce:
            check_host_limits(parse_url(result).host, limits)
        return result

    return run


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    config = load_app_config(args.config)
    logging.basicConfig(level=config.log_level, format="%(name)s %(levelname)s %(message)s")

    limits = config.host
    if args.enforce_limits:
        limits = limits.model_copy(update={"enforce": True})
    _logger.debug("Running %s with limits %s", args.command, limits)

    if args.command == "to-ascii":
        return _run_each(args.values, lambda value: encode_host(value, limits=limits))
    if args.command == "normalize":
        return _run_each(args.values, _check_result_host(normalize_url, limits))
    if args.command == "canonical":
        return _run_each(args.values, _check_result_host(canonicalize_url, limits))
    return _run_each(args.values, lambda value: json.dumps(asdict(parse_url(value)), ensure_ascii=False))


if __name__ == "__main__":
    sys.exit(main())
