from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from wirefactory.container import Container
from wirefactory.definitions import compose_configs, load_config_file
from wirefactory.exceptions import WireFactoryError
from wirefactory.match_mode import MatchMode

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wirefactory",
        description="Build an object graph from JSON definitions and optionally run it.",
    )
    parser.add_argument("root", help="Dotted class name of the object to build.")
    parser.add_argument(
        "-c",
        "--config",
        dest="configs",
        action="append",
        required=True,
        type=Path,
        help="JSON file with an array of definitions. Repeat to append overrides in order.",
    )
    parser.add_argument(
        "--call",
        metavar="METHOD",
        default=None,
        help="Method to call on the built object (for example 'run').",
    )
    parser.add_argument(
        "--plan",
        action="store_true",
        help="Print the resolution plan instead of constructing anything.",
    )
    parser.add_argument(
        "--match-mode",
        choices=[mode.value for mode in MatchMode],
        default=MatchMode.SUBTYPE.value,
        help="How requested names are matched against definitions (default: subtype).",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = compose_configs(*(load_config_file(path) for path in args.configs))
        container = Container(config, match_mode=MatchMode(args.match_mode))
        if args.plan:
            print(container.plan(args.root).render())
            return 0
        instance = container.get_instance(args.root)
    except (WireFactoryError, OSError) as exc:
        print(f"wirefactory: error: {exc}", file=sys.stderr)
        return 1

    if args.call is None:
        print(repr(instance))
        return 0
    return _call(instance, args.call)


def _call(instance: Any, method_name: str) -> int:
    method = getattr(instance, method_name, None)
    if not callable(method):
        print(
            f"wirefactory: error: {type(instance).__name__} has no callable '{method_name}'",
            file=sys.stderr,
        )
        return 1
    logger.info("Calling %s.%s()", type(instance).__name__, method_name)
    result = method()
    return result if isinstance(result, int) and not isinstance(result, bool) else 0


__all__ = ["build_parser", "main"]
