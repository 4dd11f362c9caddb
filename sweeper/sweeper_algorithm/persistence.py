"""
Map files: plain text, whitespace separated.

    <rows> <cols>
    <x1> <y1>
    <x2> <y2>
    ...

Only the dimensions and the static obstacle coordinates are stored; mobile
flags, sweep progress and counters are not.
"""

import logging
from typing import List, Tuple

from .errors import InvalidDimension, MapFormatError
from .grid import GridState, check_dimensions
from .obstacles import ObstacleRegistry

logger = logging.getLogger(__name__)


def format_map(rows: int, cols: int, positions: List[Tuple[int, int]]) -> str:
    lines = [f"{rows} {cols}"]
    lines.extend(f"{x} {y}" for x, y in positions)
    return "\n".join(lines) + "\n"


def parse_map(text: str) -> Tuple[int, int, List[Tuple[int, int]]]:
    """Read dimensions and coordinate pairs; stops at the first non-integer token."""
    numbers = []
    for token in text.split():
        try:
            numbers.append(int(token))
        except ValueError:
            logger.warning("Stopped reading map at token %r", token)
            break

    if len(numbers) < 2:
        raise MapFormatError("map file must start with '<rows> <cols>'")
    rows, cols = numbers[0], numbers[1]
    pairs = numbers[2:]
    coords = [(pairs[i], pairs[i + 1]) for i in range(0, len(pairs) - 1, 2)]
    return rows, cols, coords


def save_map(path, grid: GridState, obstacles: ObstacleRegistry):
    if not grid.is_configured:
        raise InvalidDimension("grid dimensions are not set")
    content = format_map(grid.rows, grid.cols, obstacles.static_positions())
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info("Map saved to %s (%d obstacle(s))", path, obstacles.static_count())


def load_map(path, grid: GridState, obstacles: ObstacleRegistry):
    """
    Replace the grid dimensions and obstacle set with the file contents.
    Loaded obstacles are all static; out-of-range records are discarded.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise MapFormatError(f"map file {path} is not a text file: {e}") from e
    rows, cols, coords = parse_map(text)

    # validate before touching the current state
    check_dimensions(rows, cols, grid.max_size)

    obstacles.replace(rows, cols, coords)
    skipped = len(coords) - obstacles.static_count()
    logger.info("Map loaded from %s: %dx%d, %d obstacle(s), %d skipped",
                path, rows, cols, obstacles.static_count(), skipped)
    return rows, cols
