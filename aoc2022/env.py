"""
Utilities for loading environment variables from the project .env file.
"""
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_INPUT_DIR = "resources"
DEFAULT_LOG_LEVEL = "WARNING"


@lru_cache(maxsize=1)
def load_env() -> Path:
    """
    Load environment variables from the repository-level .env file once.
    Returns the path to the .env that was attempted.
    """
    root = Path(__file__).resolve().parents[1]
    dotenv_path = root / ".env"
    # override=True so the .env file wins over any existing environment
    load_dotenv(dotenv_path=dotenv_path, override=True)
    return dotenv_path


def input_dir() -> Path:
    """
    Directory holding the dayNN.txt puzzle inputs (AOC_INPUT_DIR).
    Relative values are resolved against the repository root.
    """
    load_env()
    raw = os.getenv("AOC_INPUT_DIR") or DEFAULT_INPUT_DIR
    path = Path(raw)
    if not path.is_absolute():
        path = Path(__file__).resolve().parents[1] / path
    return path


def log_level() -> str:
    load_env()
    return (os.getenv("AOC_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
