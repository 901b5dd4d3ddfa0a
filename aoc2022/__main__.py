# python
"""
aoc2022.__main__
Entry point for python -m aoc2022: run the selected days and print answers.
"""
import argparse
import logging
import pathlib
import sys
from typing import List, Optional

from . import env
from .errors import PuzzleError
from .fs_snapshot import dumps, render_text
from .inputs import InputLocator, read_input
from .runner import PARTS, available_days, run_day

logger = logging.getLogger("aoc2022")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2022", description="Run Advent of Code 2022 solutions.")
    parser.add_argument("--day", type=int, action="append", dest="days", choices=available_days(),
                        help="day to run (repeatable, default: all)")
    parser.add_argument("--part", type=int, choices=PARTS, help="part to run (default: both)")
    parser.add_argument("--input", type=pathlib.Path, help="input file, only valid with a single --day")
    parser.add_argument("--inputs-dir", type=pathlib.Path, help="directory holding dayNN.txt files")
    parser.add_argument("--log-level", help="logging level (default: $AOC_LOG_LEVEL or WARNING)")
    parser.add_argument("--dump-tree", action="store_true",
                        help="print the day 7 directory tree as JSON instead of answers")
    parser.add_argument("--text", action="store_true",
                        help="with --dump-tree, print an indented listing with directory sizes")
    return parser


def dump_tree(path: pathlib.Path, as_text: bool) -> int:
    from .days.day07 import load_tree

    try:
        tree = load_tree(read_input(path))
    except PuzzleError as exc:
        logger.error("day 07 failed: %s", exc)
        return 1
    print(render_text(tree) if as_text else dumps(tree))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = args.log_level.upper() if args.log_level else env.log_level()
    logging.basicConfig(level=level, format="%(levelname)s | %(name)s | %(message)s")

    if args.text and not args.dump_tree:
        parser.error("--text requires --dump-tree")
    locator = InputLocator(args.inputs_dir)

    # the tree dump only ever reads day 7
    if args.dump_tree:
        if args.days and args.days != [7]:
            parser.error("--dump-tree only applies to --day 7")
        path = args.input or locator.find(7)
        if path is None:
            logger.error("no input found for day 07 under %s", locator.inputs_root)
            return 1
        return dump_tree(path, args.text)

    days = args.days or available_days()
    if args.input and len(days) != 1:
        parser.error("--input requires exactly one --day")
    parts = [args.part] if args.part else list(PARTS)

    for day in days:
        path = args.input or locator.find(day)
        if path is None:
            logger.warning("skipping day %02d: no input under %s", day, locator.inputs_root)
            continue
        for part in parts:
            try:
                answer = run_day(day, part, path)
            except PuzzleError as exc:
                logger.error("day %02d part %d failed: %s", day, part, exc)
                return 1
            print(f"Day {day:02d} part {part}: {answer}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
