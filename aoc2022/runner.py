# python
"""
aoc2022/runner.py
Dispatch a (day, part) pair to the matching solution module.
"""
import importlib
import logging
import pathlib
from typing import Any, List, Union

logger = logging.getLogger(__name__)

DAY_MAP = {
    1: "aoc2022.days.day01",
    2: "aoc2022.days.day02",
    3: "aoc2022.days.day03",
    4: "aoc2022.days.day04",
    5: "aoc2022.days.day05",
    6: "aoc2022.days.day06",
    7: "aoc2022.days.day07",
}

PARTS = (1, 2)


def available_days() -> List[int]:
    return sorted(DAY_MAP)


def load_day(day: int):
    try:
        module_name = DAY_MAP[day]
    except KeyError:
        raise ValueError(f"no solution registered for day {day}") from None
    return importlib.import_module(module_name)


def run_day(day: int, part: int, file_path: Union[str, pathlib.Path]) -> Any:
    """
    Solve one part of one day against the input at `file_path`.
    Puzzle errors propagate to the caller untouched.
    """
    if part not in PARTS:
        raise ValueError(f"part must be one of {PARTS}, got {part}")
    module = load_day(day)
    solve = getattr(module, f"part{part}")
    logger.debug("dispatching day %02d part %d on %s", day, part, file_path)
    answer = solve(file_path)
    logger.info("day %02d part %d -> %s", day, part, answer)
    return answer
