# python
"""
aoc2022/days/day03.py
Rucksack Reorganization: find the item type shared between compartments
(part 1) or between each group of three elves (part 2).
"""
import string
from functools import reduce
from typing import Iterable, List, Set

from ..errors import ParseError, StructuralError
from ..inputs import read_input

PRIORITY = {c: i for i, c in enumerate(string.ascii_lowercase + string.ascii_uppercase, start=1)}

GROUP_SIZE = 3


def priority(item: str) -> int:
    try:
        return PRIORITY[item]
    except KeyError:
        raise ParseError(f"invalid item type {item!r}") from None


def parse_rucksacks(text: str) -> List[str]:
    rucksacks = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        bad = [c for c in line if c not in PRIORITY]
        if not line or bad:
            raise ParseError(f"invalid rucksack {line!r}", line=line, line_no=line_no)
        rucksacks.append(line)
    return rucksacks


def common_item(parts: Iterable[str]) -> str:
    """
    The single item type present in every part. When several are shared the
    alphabetically first is returned so results are deterministic.
    """
    shared: Set[str] = reduce(lambda acc, p: acc & set(p), parts, set(PRIORITY))
    if not shared:
        raise StructuralError("no item type is shared")
    return min(shared)


def compartments(rucksack: str) -> List[str]:
    if len(rucksack) % 2:
        raise ParseError(f"rucksack {rucksack!r} cannot be split into equal compartments")
    half = len(rucksack) // 2
    return [rucksack[:half], rucksack[half:]]


def duplicate_priorities(text: str) -> int:
    return sum(priority(common_item(compartments(r))) for r in parse_rucksacks(text))


def badge_priorities(text: str) -> int:
    rucksacks = parse_rucksacks(text)
    if len(rucksacks) % GROUP_SIZE:
        raise StructuralError(f"{len(rucksacks)} rucksacks do not divide into groups of {GROUP_SIZE}")
    total = 0
    for i in range(0, len(rucksacks), GROUP_SIZE):
        total += priority(common_item(rucksacks[i : i + GROUP_SIZE]))
    return total


def part1(file_path) -> int:
    return duplicate_priorities(read_input(file_path))


def part2(file_path) -> int:
    return badge_priorities(read_input(file_path))
