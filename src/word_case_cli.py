"""Command-line front end for the word-case converters."""

import argparse
import logging
import sys

from src.case_style import STYLE_NAMES, style_from_name
from src.config_error import ConfigError
from src.load_config import load_config
from src.word_case import convert_many

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    ap = argparse.ArgumentParser(
        description=(
            "Convert space, hyphen or underscore separated text to camelCase, "
            "dot.case or kebab-case."
        ),
    )
    ap.add_argument(
        "text",
        nargs="*",
        help="Words to convert (joined with spaces). Reads stdin lines if omitted",
    )
    ap.add_argument(
        "-s",
        "--style",
        choices=sorted(STYLE_NAMES),
        help="Target style (default: conversion.default_style from config, camel)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--preserve-dot-acronyms",
        action="store_true",
        default=None,
        help="Keep all-caps words uppercase in dot.case output",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return ap


def read_inputs(args: argparse.Namespace) -> list[str]:
    """Return the strings to convert: the joined arguments or stdin lines."""
    if args.text:
        return [" ".join(args.text)]
    return [line for line in sys.stdin.read().splitlines() if line.strip()]


def run_conversion(args: argparse.Namespace) -> int:
    """Convert every input and print one result per line."""
    config = load_config(args.config)
    conversion = config["conversion"]

    level = "DEBUG" if args.verbose else config["logging"]["level"].upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)

    style = style_from_name(args.style or conversion["default_style"])
    preserve = args.preserve_dot_acronyms
    if preserve is None:
        preserve = conversion["preserve_dot_acronyms"]

    inputs = read_inputs(args)
    logger.info("Converting %d input(s) to %s", len(inputs), style.display_name)
    results = convert_many(inputs, style, preserve_dot_acronyms=preserve)
    for result in results:
        print(result.text)

    failed = sum(1 for r in results if not r.ok)
    if failed:
        logger.warning("%d of %d input(s) could not be converted", failed, len(results))
        return 1
    return 0


def main() -> int:
    """Run the converter."""
    ap = build_parser()
    args = ap.parse_args()
    try:
        return run_conversion(args)
    except ConfigError as e:
        ap.error(str(e))


if __name__ == "__main__":
    raise SystemExit(main())
