import logging

from .envs import create_test_environment
from .sweeper import Sweeper


def run_console_test():
    print("=== Grid Sweeper Console Test ===")
    grid, obstacles = create_test_environment(20, seed=0)
    sweeper = Sweeper(grid, obstacles, wait=lambda ms: None)
    path, results = sweeper.run()
    print(f"\nFinal Results:")
    print(f"Path length: {len(path)}")
    print(f"Coverage: {results['coverage_percentage']:.1f}%")
    print(f"Obstacle moves: {results['obstacle_moves']}")
    print(f"Mobile obstacles: {len(obstacles.mobile_obstacles())}/{len(obstacles)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_console_test()
