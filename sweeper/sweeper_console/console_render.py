"""
Terminal renderer: clears the screen and redraws the grid with statistics
after every sweep step.
"""

import os
import sys

from ..sweeper_algorithm.constants import GLYPHS, MOBILE_GLYPH, OBSTACLE, UNVISITED, VISITED
from ..sweeper_algorithm.utils import coverage_percentage, estimate_remaining


def clear_screen():
    os.system("cls" if os.name == "nt" else "clear")


def format_frame(grid, obstacles, cleaned_count, elapsed):
    rows, cols = grid.rows, grid.cols
    remaining = estimate_remaining(elapsed, cleaned_count, rows, cols, len(obstacles))
    coverage = coverage_percentage(cleaned_count, rows, cols, obstacles.static_count())

    lines = [
        "====== Sweeper Live Monitor ======",
        f"Map size: {rows}x{cols}",
        f"Obstacles: {len(obstacles)}",
        f"Elapsed: {elapsed:.1f}s",
        f"Remaining (est.): {remaining:.1f}s",
        f"Coverage: {coverage:.1f}%",
        f"  Legend: {GLYPHS[OBSTACLE]} obstacle {MOBILE_GLYPH} mobile obstacle",
        f"          {GLYPHS[UNVISITED]} unvisited {GLYPHS[VISITED]} visited",
        "          → ↓ ← ↑ direction of travel",
    ]

    mobile = {o.position for o in obstacles.mobile_obstacles()}
    for x in range(1, rows + 1):
        row = []
        for y in range(1, cols + 1):
            if (x, y) in mobile:
                row.append(MOBILE_GLYPH)
            else:
                row.append(GLYPHS.get(grid.status_at(x, y), GLYPHS[VISITED]))
        lines.append(" " + " ".join(row))
    return "\n".join(lines)


class ConsoleRenderer:
    """Render callback for Sweeper that redraws the terminal on each call"""

    def __init__(self, stream=None, clear=True):
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear

    def __call__(self, grid, obstacles, cleaned_count, elapsed):
        if self.clear:
            clear_screen()
        self.stream.write(format_frame(grid, obstacles, cleaned_count, elapsed) + "\n")
        self.stream.flush()
