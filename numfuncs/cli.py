"""
Command-line interface for numfuncs
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import yaml

from numfuncs._version import __version__
from numfuncs.config import LOG_LEVELS, OUTPUT_FORMATS, Config, ValidationConfig, load_config
from numfuncs.functions import addition, sort_async
from numfuncs.validation import NonFiniteInputError, NumericInputError, ValidationMode

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_number(text: str) -> int | float:
    """Parse a command-line argument as an int, falling back to float"""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        prog="numfuncs",
        description="numfuncs - sum or sort numbers",
        epilog="Use '--' before the numbers when one of them is '-inf'.",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("--config", "-c", help="Path to configuration file (YAML)", default=None)

    parser.add_argument(
        "--log-level",
        "-l",
        help="Logging level",
        choices=list(LOG_LEVELS),
        default=None,
    )

    parser.add_argument(
        "--format",
        "-f",
        help="Output format (default: plain)",
        choices=list(OUTPUT_FORMATS),
        default=None,
    )

    parser.add_argument(
        "--precision",
        "-p",
        help="Round float results to this many digits",
        type=int,
        default=None,
    )

    parser.add_argument(
        "--permissive",
        action="store_true",
        help="Skip argument validation, including the NaN and infinity checks",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Print the sum of the numbers")
    add_parser.add_argument("numbers", nargs="*", type=parse_number, help="Numbers to add")

    sort_parser = subparsers.add_parser("sort", help="Print the numbers in ascending order")
    sort_parser.add_argument("numbers", nargs="*", type=parse_number, help="Numbers to sort")

    return parser.parse_args(argv)


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command-line overrides to a loaded config"""
    if args.log_level:
        config.log_level = args.log_level

    if args.format:
        config.output.format = args.format

    if args.precision is not None:
        if args.precision < 0:
            raise ValueError(f"precision must be non-negative, got {args.precision}")
        config.output.precision = args.precision

    if args.permissive:
        config.validation = ValidationConfig(
            mode=ValidationMode.PERMISSIVE,
            allow_nan=config.validation.allow_nan,
            allow_infinity=config.validation.allow_infinity,
        )

    return config


def _round(value: Any, precision: int | None) -> Any:
    if precision is not None and isinstance(value, float):
        return round(value, precision)
    return value


def format_result(result: Any, config: Config) -> str:
    """Render a sum or a sorted list for printing"""
    precision = config.output.precision

    if isinstance(result, list):
        result = [_round(v, precision) for v in result]
        if config.output.format == "json":
            return json.dumps(result, allow_nan=False)
        return " ".join(str(v) for v in result)

    result = _round(result, precision)
    if config.output.format == "json":
        return json.dumps(result, allow_nan=False)
    return str(result)


async def main_async(argv: list[str] | None = None) -> int:
    """
    Main asynchronous entry point

    Returns:
        Exit code
    """
    args = parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration: {e!s}", file=sys.stderr)
        return 1

    logging.basicConfig(level=getattr(logging, config.log_level), format=LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, config.log_level))

    try:
        if args.command == "add":
            result = addition(*args.numbers, validation=config.validation)
        else:
            result = await sort_async(*args.numbers, validation=config.validation)
    except (NumericInputError, NonFiniteInputError) as e:
        logger.debug(f"{args.command} failed: {e!s}")
        print(f"Error: {e!s}", file=sys.stderr)
        return 1

    try:
        output = format_result(result, config)
    except ValueError as e:
        # JSON has no NaN or Infinity
        logger.debug(f"Cannot format {result!r} as {config.output.format}: {e!s}")
        print(f"Error: result is not representable as JSON: {result!r}", file=sys.stderr)
        return 1

    print(output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point

    Returns:
        Exit code
    """
    return asyncio.run(main_async(argv))


if __name__ == "__main__":
    sys.exit(main())
