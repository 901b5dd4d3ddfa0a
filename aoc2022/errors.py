# python
"""
aoc2022/errors.py
Exceptions shared by the puzzle solutions.
"""
from typing import Optional


class PuzzleError(Exception):
    """Base class for every failure raised while solving a puzzle."""


class ParseError(PuzzleError):
    """
    A line of puzzle input matched none of the day's grammar rules.
    """

    def __init__(self, message: str, line: Optional[str] = None, line_no: Optional[int] = None):
        self.line = line
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class StructuralError(PuzzleError):
    """
    The input parsed but asks for something the puzzle state cannot do,
    e.g. changing into a directory that was never listed.
    """
