import random
from typing import Tuple

from .grid import GridState
from .obstacles import ObstacleRegistry


def create_test_environment(size: int = 20, seed=None) -> Tuple[GridState, ObstacleRegistry]:
    """Tạo môi trường kiểm thử đơn giản với vài chướng ngại vật hình chữ nhật"""
    grid = GridState(size, size)
    obstacles = ObstacleRegistry(grid, rng=random.Random(seed))

    blocks = [
        (4, 4, 6, 6),
        (10, 12, 12, 15),
        (15, 3, 17, 6),
        (3, 14, 5, 16),
    ]

    for start_r, start_c, end_r, end_c in blocks:
        for r in range(start_r, min(end_r, size) + 1):
            for c in range(start_c, min(end_c, size) + 1):
                obstacles.add_static(r, c)
    return grid, obstacles


def create_split_environment(rows: int = 3, cols: int = 3) -> Tuple[GridState, ObstacleRegistry]:
    """Bản đồ bị chia đôi bởi một bức tường chướng ngại vật tĩnh ở cột giữa"""
    grid = GridState(rows, cols)
    obstacles = ObstacleRegistry(grid)
    wall = (cols + 1) // 2
    obstacles.add_many(((r, wall) for r in range(1, rows + 1)), mobile=False)
    return grid, obstacles
