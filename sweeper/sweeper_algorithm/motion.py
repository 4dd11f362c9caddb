import logging
from typing import List, Tuple

from .constants import UNVISITED, OBSTACLE, DIR4
from .grid import GridState
from .obstacles import ObstacleRegistry

logger = logging.getLogger(__name__)

Move = Tuple[Tuple[int, int], Tuple[int, int]]


class ObstacleMotionStep:
    """Di chuyển mỗi chướng ngại vật động một bước ngẫu nhiên (nếu hợp lệ)."""

    def __init__(self, grid: GridState, obstacles: ObstacleRegistry, rng=None):
        self.grid = grid
        self.obstacles = obstacles
        self.rng = rng if rng is not None else obstacles.rng
        self.moves_made = 0

    def step(self) -> List[Move]:
        """
        Chọn ngẫu nhiên 1 trong 4 hướng cho từng chướng ngại vật động.
        Chỉ được đi vào ô trong bản đồ và đang UNVISITED; nếu không thì đứng yên.
        Trả về danh sách (vị trí cũ, vị trí mới) của các bước đã đi.
        """
        moves = []
        for obstacle in self.obstacles.mobile_obstacles():
            dx, dy = DIR4[self.rng.randrange(4)]
            nx, ny = obstacle.x + dx, obstacle.y + dy
            if not self.grid.is_unvisited(nx, ny):
                continue
            old = obstacle.position
            self.grid.set_status(obstacle.x, obstacle.y, UNVISITED)
            obstacle.x, obstacle.y = nx, ny
            self.grid.set_status(nx, ny, OBSTACLE)
            moves.append((old, (nx, ny)))

        self.moves_made += len(moves)
        if moves:
            logger.debug("Mobile obstacles moved: %s", moves)
        return moves
