# python
"""Daily puzzle solutions. Each module exposes part1(file_path) and part2(file_path)."""
