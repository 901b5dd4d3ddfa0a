# python
"""aoc2022 package"""
__version__ = "0.1"

from aoc2022.env import load_env

# AOC_INPUT_DIR and AOC_LOG_LEVEL may come from a repo-level .env; load it once on import.
load_env()
