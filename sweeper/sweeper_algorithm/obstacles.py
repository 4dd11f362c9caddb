import logging
import random
from typing import Iterable, List, Optional, Tuple

from .constants import OBSTACLE, MOBILE_PROBABILITY
from .errors import OutOfRange
from .grid import GridState

logger = logging.getLogger(__name__)


class Obstacle:
    """Chướng ngại vật trên bản đồ"""

    def __init__(self, x: int, y: int, mobile: bool = False):
        self.x, self.y = x, y           # Vị trí hiện tại
        self.origin = (x, y)            # Vị trí lúc tạo (được lưu ra file)
        self.mobile = mobile            # True nếu là chướng ngại vật động

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    def __repr__(self):
        kind = "mobile" if self.mobile else "static"
        return f"Obstacle({self.x}, {self.y}, {kind})"


class ObstacleRegistry:
    """
    Danh sách chướng ngại vật tĩnh và tập con động của chúng.

    Mỗi chướng ngại vật khi tạo được tung đồng xu một lần (xác suất
    mobile_probability) để quyết định có di chuyển hay không.
    """

    def __init__(self, grid: GridState, rng=None,
                 mobile_probability: float = MOBILE_PROBABILITY):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.mobile_probability = mobile_probability
        self.obstacles: List[Obstacle] = []

    def __len__(self):
        return len(self.obstacles)

    def __iter__(self):
        return iter(self.obstacles)

    def _coin_flip(self) -> bool:
        return self.rng.random() < self.mobile_probability

    def add_static(self, x: int, y: int, mobile: Optional[bool] = None) -> Optional[Obstacle]:
        """
        Đặt chướng ngại vật tại (x, y). mobile=None thì tung đồng xu.
        Trả về None nếu ô đó đã là chướng ngại vật, hoặc là vị trí gốc của
        một chướng ngại vật động đã rời đi (resize sẽ đưa nó về lại ô này).
        """
        if not self.grid.in_bounds(x, y):
            raise OutOfRange(
                f"obstacle ({x}, {y}) outside {self.grid.rows}x{self.grid.cols} grid")
        if self.grid.status_at(x, y) == OBSTACLE:
            logger.warning("Cell (%d, %d) already holds an obstacle, skipped", x, y)
            return None
        if any(o.origin == (x, y) for o in self.obstacles):
            logger.warning("Cell (%d, %d) is the origin of a moved obstacle, skipped", x, y)
            return None
        if mobile is None:
            mobile = self._coin_flip()
        self.grid.set_status(x, y, OBSTACLE)
        obstacle = Obstacle(x, y, mobile=mobile)
        self.obstacles.append(obstacle)
        logger.debug("Added %r", obstacle)
        return obstacle

    def add_many(self, coords: Iterable[Tuple[int, int]], mobile: Optional[bool] = None):
        """Thêm nhiều tọa độ; tọa độ ngoài bản đồ bị bỏ qua, các tọa độ khác vẫn được thêm."""
        added, rejected = [], []
        for x, y in coords:
            try:
                obstacle = self.add_static(x, y, mobile=mobile)
            except OutOfRange:
                rejected.append((x, y))
                continue
            if obstacle is not None:
                added.append(obstacle)
        if rejected:
            logger.warning("Dropped %d out-of-range obstacle(s): %s", len(rejected), rejected)
        return added, rejected

    def static_count(self) -> int:
        return len(self.obstacles)

    def static_positions(self) -> List[Tuple[int, int]]:
        return [o.origin for o in self.obstacles]

    def mobile_obstacles(self) -> List[Obstacle]:
        return [o for o in self.obstacles if o.mobile]

    def is_mobile_at(self, x: int, y: int) -> bool:
        return any(o.mobile and o.position == (x, y) for o in self.obstacles)

    def clear(self):
        self.obstacles = []

    def resize(self, rows: int, cols: int):
        """
        Đổi kích thước bản đồ. Các chướng ngại vật có vị trí gốc còn nằm trong
        bản đồ mới được đặt lại tại vị trí gốc, phần còn lại (kể cả ô gốc
        trùng nhau) bị loại.
        """
        self.grid.reset(rows, cols)
        kept, dropped = [], []
        for o in self.obstacles:
            if self.grid.in_bounds(*o.origin) and self.grid.status_at(*o.origin) != OBSTACLE:
                o.x, o.y = o.origin
                self.grid.set_status(o.x, o.y, OBSTACLE)
                kept.append(o)
            else:
                dropped.append(o.origin)
        self.obstacles = kept
        if dropped:
            logger.warning("Resize to %dx%d dropped obstacle(s) at %s", rows, cols, dropped)

    def replace(self, rows: int, cols: int, coords: Iterable[Tuple[int, int]]):
        """Thay toàn bộ: bản đồ mới + danh sách chướng ngại vật tĩnh (không động)."""
        self.grid.reset(rows, cols)
        self.clear()
        for x, y in coords:
            if self.grid.in_bounds(x, y):
                self.add_static(x, y, mobile=False)
