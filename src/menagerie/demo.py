"""Command-line demo of the menagerie exercises.

Provides the `menagerie` command with one subcommand per exercise:
- hierarchy: the Animal -> Mammal -> Rabbit classes
- unique: array deduplication
- anagrams: anagram grouping
- flatten: nested array flattening
- geometry: area formulas
- all: every exercise in turn (default)
"""

import argparse
import logging
import sys
from dataclasses import replace

from menagerie.arrays import flatten, group_anagrams, unique_values
from menagerie.config import get_config
from menagerie.core import Animal, Rabbit
from menagerie.geometry import (
    PI,
    area_of_circle,
    area_of_cylinder,
    area_of_rectangle,
)
from menagerie.logging_config import configure_logging

logger = logging.getLogger(__name__)

SAMPLE_NUMBERS = [1, 2, 2, 3, 3, 4, 4, 5, 5]
SAMPLE_WORDS = ["eat", "tea", "tan", "ate", "nat", "bat"]
SAMPLE_NESTED = [1, [2, [3, 4], 5], [6, 7], 8]


def cmd_hierarchy(args: argparse.Namespace) -> int:
    """Build two rabbits and report their attributes."""
    r1 = Rabbit("Bittu", True, 3)
    Rabbit("Bunny", True, 2)

    print(r1.name)
    print(r1.walks_on_land())
    print(r1.jump_count)
    print(r1.say_hello())
    print(f"Total animals: {Animal.total_count()}")
    return 0


def cmd_unique(args: argparse.Namespace) -> int:
    print(unique_values(SAMPLE_NUMBERS))
    return 0


def cmd_anagrams(args: argparse.Namespace) -> int:
    print(group_anagrams(SAMPLE_WORDS))
    return 0


def cmd_flatten(args: argparse.Namespace) -> int:
    print(flatten(SAMPLE_NESTED, depth=args.depth))
    return 0


def cmd_geometry(args: argparse.Namespace) -> int:
    print("PI =", PI)
    print("Circle Area:", area_of_circle(5))
    print("Rectangle Area:", area_of_rectangle(4, 6))
    print("Cylinder Area:", area_of_cylinder(3, 7))
    return 0


COMMANDS = {
    "hierarchy": cmd_hierarchy,
    "unique": cmd_unique,
    "anagrams": cmd_anagrams,
    "flatten": cmd_flatten,
    "geometry": cmd_geometry,
}


def cmd_all(args: argparse.Namespace) -> int:
    """Run every exercise, stopping at the first failure."""
    for name, command in COMMANDS.items():
        print(f"== {name}")
        status = command(args)
        if status != 0:
            return status
    return 0


def non_negative_int(value: str) -> int:
    depth = int(value)
    if depth < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {depth}")
    return depth


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="menagerie",
        description="Run the menagerie coursework exercises",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--depth",
        type=non_negative_int,
        default=None,
        help="Levels to flatten (default: all)",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="all",
        choices=["all", *COMMANDS],
        help="Exercise to run (default: all)",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging_config = get_config().logging
    if args.log_level:
        logging_config = replace(logging_config, level=args.log_level)
    configure_logging(logging_config)

    logger.debug(f"Running exercise: {args.command}")
    command = cmd_all if args.command == "all" else COMMANDS[args.command]
    return command(args)


if __name__ == "__main__":
    sys.exit(main())
