# python
"""
aoc2022/days/day05.py
Supply Stacks: replay crane moves over a drawing of crate stacks and read
the top crate of every stack.

Input is the drawing, a blank line, then `move N from A to B` lines:

        [D]
    [N] [C]
    [Z] [M] [P]
     1   2   3

    move 1 from 2 to 1
"""
import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..errors import ParseError, StructuralError
from ..inputs import read_input

logger = logging.getLogger(__name__)

_MOVE_RE = re.compile(r"^move (\d+) from (\S+) to (\S+)$")

# each stack column is "[X] " wide, the crate letter sits at offset 1
COLUMN_WIDTH = 4


@dataclass(frozen=True)
class Move:
    count: int
    src: str
    dst: str


class Supplies:
    """
    Stacks keyed by their label from the drawing's last line. Bottom of each
    stack is index 0.
    """

    def __init__(self, stacks: Dict[str, List[str]]):
        self.stacks = stacks

    @classmethod
    def from_drawing(cls, drawing: str) -> "Supplies":
        lines = drawing.split("\n")
        keys = lines[-1].split()
        if not keys:
            raise ParseError("crate drawing has no stack labels")
        stacks: Dict[str, List[str]] = {key: [] for key in keys}
        width = COLUMN_WIDTH * len(keys)
        # walk bottom-up so appends build each stack from the floor
        for line in reversed(lines[:-1]):
            row = line.ljust(width)
            for i, key in enumerate(keys):
                cell = row[i * COLUMN_WIDTH : i * COLUMN_WIDTH + 3]
                if cell.strip() == "":
                    continue
                if len(cell) != 3 or cell[0] != "[" or cell[2] != "]" or not cell[1].isalpha():
                    raise ParseError(f"malformed crate {cell!r} in drawing line {line!r}", line=line)
                stacks[key].append(cell[1])
        return cls(stacks)

    def _stack(self, key: str) -> List[str]:
        try:
            return self.stacks[key]
        except KeyError:
            raise StructuralError(f"stack {key!r} does not exist") from None

    def _take(self, move: Move) -> Tuple[List[str], List[str]]:
        src = self._stack(move.src)
        dst = self._stack(move.dst)
        if move.count > len(src):
            raise StructuralError(
                f"cannot move {move.count} crates from stack {move.src!r} holding {len(src)}"
            )
        taken = src[len(src) - move.count :]
        del src[len(src) - move.count :]
        return taken, dst

    def move_one_at_a_time(self, move: Move) -> None:
        """CrateMover 9000: crates are lifted singly, so the moved run is reversed."""
        taken, dst = self._take(move)
        dst.extend(reversed(taken))

    def move_together(self, move: Move) -> None:
        """CrateMover 9001: the moved run keeps its order."""
        taken, dst = self._take(move)
        dst.extend(taken)

    def tops(self) -> str:
        out = []
        for key, stack in self.stacks.items():
            if not stack:
                raise StructuralError(f"stack {key!r} is empty")
            out.append(stack[-1])
        return "".join(out)


def parse_moves(text: str) -> List[Move]:
    moves = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        m = _MOVE_RE.match(line.strip())
        if not m:
            raise ParseError(f"expected 'move N from A to B', got {line!r}", line=line, line_no=line_no)
        moves.append(Move(int(m.group(1)), m.group(2), m.group(3)))
    return moves


def parse(text: str) -> Tuple[Supplies, List[Move]]:
    drawing, sep, instructions = text.partition("\n\n")
    if not sep:
        raise ParseError("missing blank line between crate drawing and moves")
    return Supplies.from_drawing(drawing), parse_moves(instructions)


def rearrange(text: str, together: bool) -> str:
    supplies, moves = parse(text)
    apply = supplies.move_together if together else supplies.move_one_at_a_time
    for move in moves:
        apply(move)
    logger.debug("applied %d moves across %d stacks", len(moves), len(supplies.stacks))
    return supplies.tops()


def part1(file_path) -> str:
    return rearrange(read_input(file_path), together=False)


def part2(file_path) -> str:
    return rearrange(read_input(file_path), together=True)
