from pathlib import Path
from typing import List, Optional, Union

from .env import input_dir


def day_name(day: int) -> str:
    return f"day{day:02d}"


def read_input(file_path: Union[str, Path]) -> str:
    """
    Read a puzzle input as UTF-8 text with Windows line endings normalised.
    """
    text = Path(file_path).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n")


class InputLocator:
    """
    Locate puzzle input files under an inputs root.

    Layout (first match wins):
      {root}/day07.txt
      {root}/day07/input.txt

    Public API:
      candidates(day) -> List[Path]
      find(day) -> Path | None
    """

    def __init__(self, inputs_root: Optional[Path] = None):
        self.inputs_root = Path(inputs_root or input_dir()).resolve()

    def candidates(self, day: int) -> List[Path]:
        name = day_name(day)
        return [
            self.inputs_root / f"{name}.txt",
            self.inputs_root / name / "input.txt",
        ]

    def find(self, day: int) -> Optional[Path]:
        """
        Return the first existing input path for `day`, or None.
        """
        for p in self.candidates(day):
            if p.is_file():
                return p
        return None
