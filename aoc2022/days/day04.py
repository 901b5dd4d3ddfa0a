# python
"""
aoc2022/days/day04.py
Camp Cleanup: count assignment pairs that contain or overlap each other.
"""
import re
from dataclasses import dataclass
from typing import Callable, Iterator, Tuple

from ..errors import ParseError
from ..inputs import read_input

_PAIR_RE = re.compile(r"^(\d+)-(\d+),(\d+)-(\d+)$")


@dataclass(frozen=True)
class Sections:
    """Inclusive range of section IDs assigned to one elf."""
    start: int
    end: int

    def contains(self, other: "Sections") -> bool:
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: "Sections") -> bool:
        return self.start <= other.end and other.start <= self.end


def parse_pairs(text: str) -> Iterator[Tuple[Sections, Sections]]:
    for line_no, line in enumerate(text.splitlines(), start=1):
        m = _PAIR_RE.match(line.strip())
        if not m:
            raise ParseError(f"expected 'a-b,c-d', got {line!r}", line=line, line_no=line_no)
        a, b, c, d = (int(g) for g in m.groups())
        if a > b or c > d:
            raise ParseError(f"section range runs backwards in {line!r}", line=line, line_no=line_no)
        yield Sections(a, b), Sections(c, d)


def fully_contained(first: Sections, second: Sections) -> bool:
    # equal ranges satisfy both directions and count once
    return first.contains(second) or second.contains(first)


def overlapping(first: Sections, second: Sections) -> bool:
    return first.overlaps(second)


def count_pairs(text: str, rule: Callable[[Sections, Sections], bool]) -> int:
    return sum(1 for first, second in parse_pairs(text) if rule(first, second))


def part1(file_path) -> int:
    return count_pairs(read_input(file_path), fully_contained)


def part2(file_path) -> int:
    return count_pairs(read_input(file_path), overlapping)
