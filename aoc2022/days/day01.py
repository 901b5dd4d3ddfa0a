# python
"""
aoc2022/days/day01.py
Calorie Counting: sum each elf's inventory and pick the largest totals.
"""
from typing import List

from ..errors import ParseError
from ..inputs import read_input


def parse_inventories(text: str) -> List[List[int]]:
    """
    Split blank-line separated groups of integers into one list per elf.
    """
    inventories: List[List[int]] = []
    current: List[int] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            if current:
                inventories.append(current)
            current = []
            continue
        try:
            current.append(int(line))
        except ValueError:
            raise ParseError(f"expected a calorie count, got {line!r}", line=line, line_no=line_no) from None
    if current:
        inventories.append(current)
    return inventories


def top_totals(text: str, n: int) -> int:
    totals = sorted((sum(inv) for inv in parse_inventories(text)), reverse=True)
    if not totals:
        raise ParseError("no inventories in input")
    return sum(totals[:n])


def part1(file_path) -> int:
    return top_totals(read_input(file_path), 1)


def part2(file_path) -> int:
    return top_totals(read_input(file_path), 3)
