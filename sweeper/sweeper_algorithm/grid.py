import logging
from typing import Tuple

import numpy as np

from .constants import UNVISITED, VISITED, DIRECTION_TAGS, ALL_STATUSES, MAX_SIZE
from .errors import InvalidDimension, OutOfBounds

logger = logging.getLogger(__name__)


def check_dimensions(rows: int, cols: int, max_size: int = MAX_SIZE):
    for name, value in (("rows", rows), ("cols", cols)):
        if value <= 0 or value > max_size:
            raise InvalidDimension(f"{name}={value} outside 1..{max_size}")


class GridState:
    """
    Bản đồ ô vuông rows x cols, tọa độ bắt đầu từ 1 (x = hàng, y = cột).
    Mỗi ô giữ đúng một trạng thái trong constants.ALL_STATUSES.
    """

    def __init__(self, rows: int = 0, cols: int = 0, max_size: int = MAX_SIZE):
        self.max_size = max_size
        self.rows, self.cols = 0, 0
        self.cells = np.zeros((0, 0), dtype=int)
        # 0 x 0 nghĩa là chưa cấu hình kích thước
        if rows or cols:
            self.reset(rows, cols)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def is_configured(self) -> bool:
        return self.rows > 0 and self.cols > 0

    def reset(self, rows: int, cols: int):
        """Đặt lại kích thước, mọi ô về UNVISITED (chướng ngại vật cũ bị xóa)."""
        check_dimensions(rows, cols, self.max_size)
        self.rows, self.cols = rows, cols
        self.cells = np.full((rows, cols), UNVISITED, dtype=int)
        logger.debug("Grid reset to %dx%d", rows, cols)

    def in_bounds(self, x: int, y: int) -> bool:
        return 1 <= x <= self.rows and 1 <= y <= self.cols

    def _check(self, x: int, y: int):
        if not self.in_bounds(x, y):
            raise OutOfBounds(f"({x}, {y}) outside {self.rows}x{self.cols} grid")

    def status_at(self, x: int, y: int) -> int:
        self._check(x, y)
        return int(self.cells[x - 1, y - 1])

    def set_status(self, x: int, y: int, value: int):
        self._check(x, y)
        if value not in ALL_STATUSES:
            raise ValueError(f"unknown cell status {value!r}")
        self.cells[x - 1, y - 1] = value

    def is_unvisited(self, x: int, y: int) -> bool:
        """Cổng kiểm tra của thuật toán quét: ngoài bản đồ coi như không đi được."""
        return self.in_bounds(x, y) and self.cells[x - 1, y - 1] == UNVISITED

    def settle(self):
        """Chuyển mọi ô đang mang mũi tên hướng thành VISITED (idempotent)."""
        self.cells[np.isin(self.cells, DIRECTION_TAGS)] = VISITED

    def count(self, status: int) -> int:
        return int(np.count_nonzero(self.cells == status))

    def snapshot(self) -> np.ndarray:
        return self.cells.copy()

    def __repr__(self):
        return f"GridState(rows={self.rows}, cols={self.cols})"
