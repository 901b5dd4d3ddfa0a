# python
"""
aoc2022/days/day06.py
Tuning Trouble: locate the first run of distinct characters in a datastream.
"""
from collections import Counter
from typing import Optional

from ..errors import StructuralError
from ..inputs import read_input

PACKET_MARKER = 4
MESSAGE_MARKER = 14


def find_marker_end(stream: str, marker_size: int) -> Optional[int]:
    """
    Number of characters processed when the last `marker_size` characters
    are all different, or None if that never happens.
    """
    if marker_size <= 0:
        raise ValueError("marker_size must be positive")
    window: Counter = Counter()
    for idx, ch in enumerate(stream):
        window[ch] += 1
        if idx >= marker_size:
            old = stream[idx - marker_size]
            window[old] -= 1
            if not window[old]:
                del window[old]
        if len(window) == marker_size:
            return idx + 1
    return None


def _solve(file_path, marker_size: int) -> int:
    stream = read_input(file_path).strip()
    end = find_marker_end(stream, marker_size)
    if end is None:
        raise StructuralError(f"no run of {marker_size} distinct characters in datastream")
    return end


def part1(file_path) -> int:
    return _solve(file_path, PACKET_MARKER)


def part2(file_path) -> int:
    return _solve(file_path, MESSAGE_MARKER)
