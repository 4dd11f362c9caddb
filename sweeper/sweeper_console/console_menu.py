"""
Interactive terminal menu: configure the map, place obstacles, run the sweep,
save and load map files.
"""

import random

from ..sweeper_algorithm.constants import (MAP_SUFFIX, STEP_DELAY_MS,
                                           INVALID_CHOICE_DELAY_MS)
from ..sweeper_algorithm.errors import SweeperError, InvalidDimension, OutOfRange
from ..sweeper_algorithm.grid import GridState
from ..sweeper_algorithm.obstacles import ObstacleRegistry
from ..sweeper_algorithm.persistence import save_map, load_map
from ..sweeper_algorithm.sweeper import Sweeper, sleep_ms
from .console_render import ConsoleRenderer, clear_screen

MENU = """===== Main Menu =====
| 1. Set map size     |
| 2. Add obstacles    |
| 3. Start cleaning   |
| 4. Save map         |
| 5. Load map         |
| 6. Exit             |
-----------------------"""


class ConsoleMenu:
    def __init__(self, input_func=input, output_func=print, wait=None,
                 renderer=None, step_delay_ms=STEP_DELAY_MS, rng=None, clear=True):
        self.input = input_func
        self.output = output_func
        self.wait = wait if wait is not None else sleep_ms
        self.renderer = renderer if renderer is not None else ConsoleRenderer(clear=clear)
        self.step_delay_ms = step_delay_ms
        self.clear = clear

        self.grid = GridState()
        self.obstacles = ObstacleRegistry(self.grid, rng=rng if rng is not None else random.Random())
        self.last_results = None

    def _read_ints(self, prompt, count):
        parts = self.input(prompt).split()
        if len(parts) < count:
            return None
        try:
            return [int(p) for p in parts[:count]]
        except ValueError:
            return None

    def _require_grid(self) -> bool:
        if self.grid.is_configured:
            return True
        self.output("Please set the map size first!")
        self.wait(INVALID_CHOICE_DELAY_MS)
        return False

    # ---------- actions ----------
    def set_size(self):
        values = self._read_ints("Enter map size (rows cols): ", 2)
        if values is None:
            self.output("Invalid size.")
            return
        try:
            self.obstacles.resize(*values)
        except InvalidDimension as e:
            self.output(f"Invalid size: {e}")

    def add_obstacles(self):
        if not self._require_grid():
            return
        values = self._read_ints("Number of obstacles: ", 1)
        if values is None:
            self.output("Invalid number.")
            return
        rows, cols = self.grid.shape
        for _ in range(values[0]):
            coords = self._read_ints(f"Coordinates (x y, range 1-{rows} 1-{cols}): ", 2)
            if coords is None:
                self.output("Skipped: not a coordinate pair.")
                continue
            try:
                self.obstacles.add_static(*coords)
            except OutOfRange:
                self.output(f"Skipped: {tuple(coords)} is outside the map.")

    def start_cleaning(self):
        if not self._require_grid():
            return
        sweeper = Sweeper(self.grid, self.obstacles,
                          step_delay_ms=self.step_delay_ms, wait=self.wait)
        sweeper.set_callbacks(render_callback=self.renderer)
        _, results = sweeper.run()
        self.last_results = results
        self.output(f"\nCleaning finished! Total time: {results['elapsed']:.2f}s")
        self.input("Press Enter to return to the menu...")

    def save(self):
        if not self._require_grid():
            return
        filename = self.input("File name to save: ").strip() + MAP_SUFFIX
        try:
            save_map(filename, self.grid, self.obstacles)
        except OSError as e:
            self.output(f"Could not save map file {filename}: {e}")
            return
        self.output(f"Map saved to {filename}")

    def load(self):
        filename = self.input("File name to load: ").strip() + MAP_SUFFIX
        try:
            load_map(filename, self.grid, self.obstacles)
        except OSError as e:
            self.output(f"Could not load map file {filename}: {e}")
            return
        except SweeperError as e:
            self.output(f"Invalid map file {filename}: {e}")
            return
        self.output(f"Map loaded from {filename}")

    # ---------- main loop ----------
    def run(self):
        actions = {
            '1': self.set_size,
            '2': self.add_obstacles,
            '3': self.start_cleaning,
            '4': self.save,
            '5': self.load,
        }
        while True:
            if self.clear:
                clear_screen()
            self.output(MENU)
            try:
                choice = self.input(" Choice: ").strip()
                if choice == '6':
                    break
                action = actions.get(choice)
                if action is None:
                    self.output("Invalid choice.")
                    self.wait(INVALID_CHOICE_DELAY_MS)
                    continue
                action()
            except (KeyboardInterrupt, EOFError):
                self.output("\nGoodbye!")
                break


def main():
    ConsoleMenu().run()


if __name__ == '__main__':
    main()
