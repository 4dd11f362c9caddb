import logging
import time
from typing import Dict, List, Tuple

from .constants import SWEEP_ORDER, START_POS, START_TAG, STEP_DELAY_MS
from .grid import GridState
from .motion import ObstacleMotionStep
from .obstacles import ObstacleRegistry
from .utils import coverage_percentage

logger = logging.getLogger(__name__)


def sleep_ms(duration_ms: int):
    time.sleep(duration_ms / 1000.0)


class Sweeper:
    """
    Thuật toán quét DFS gắn hướng (depth-first, direction-tagged sweep).

    Từ ô (1, 1), mỗi ô UNVISITED được đánh dấu bằng hướng robot đi vào,
    vẽ lại bản đồ, chờ, cho chướng ngại vật động di chuyển, rồi lần lượt
    thử 4 ô kề theo thứ tự phải, xuống, trái, lên. Đệ quy được thay bằng
    stack tường minh để bản đồ 50x50 không vượt giới hạn đệ quy của Python.
    """

    def __init__(self, grid: GridState, obstacles: ObstacleRegistry,
                 step_delay_ms: int = STEP_DELAY_MS, wait=None, clock=None,
                 motion: ObstacleMotionStep = None):
        self.grid = grid
        self.obstacles = obstacles
        self.step_delay_ms = step_delay_ms
        self.wait = wait if wait is not None else sleep_ms
        self.clock = clock if clock is not None else time.perf_counter
        self.motion = motion if motion is not None else ObstacleMotionStep(grid, obstacles)

        # Trạng thái một lượt quét
        self.cleaned_count = 0
        self.current_pos = None
        self.path: List[Tuple[int, int]] = []
        self.renders = 0
        self.start_time = None
        self.cancelled = False

        # Callback cho hiển thị (nếu có)
        self.on_render_callback = None
        self.should_stop = None

    def set_callbacks(self, render_callback=None, should_stop=None):
        """Đăng ký callback vẽ bản đồ và hàm kiểm tra dừng (cooperative cancel)"""
        self.on_render_callback = render_callback
        self.should_stop = should_stop

    def elapsed(self) -> float:
        if self.start_time is None:
            return 0.0
        return self.clock() - self.start_time

    def coverage(self) -> float:
        return coverage_percentage(self.cleaned_count, self.grid.rows, self.grid.cols,
                                   self.obstacles.static_count())

    def _render(self):
        self.renders += 1
        if self.on_render_callback:
            self.on_render_callback(self.grid, self.obstacles,
                                    self.cleaned_count, self.elapsed())

    def _stop_requested(self) -> bool:
        if self.cancelled:
            return True
        if self.should_stop is not None and self.should_stop():
            self.cancelled = True
            logger.info("Sweep cancelled after %d cell(s)", self.cleaned_count)
        return self.cancelled

    def _visit(self, x: int, y: int, tag: int) -> bool:
        """
        Một bước quét tại (x, y). Trả về False nếu ô ngoài bản đồ,
        là chướng ngại vật hoặc đã quét (không phải lỗi, chỉ là bỏ qua).
        """
        if self._stop_requested():
            return False
        if not self.grid.is_unvisited(x, y):
            return False

        self.grid.set_status(x, y, tag)     # ghi hướng đi vào ô
        self.cleaned_count += 1
        self.current_pos = (x, y)
        self.path.append((x, y))

        self._render()
        self.wait(self.step_delay_ms)

        self.motion.step()
        self.grid.settle()
        return True

    def run(self) -> Tuple[List[Tuple[int, int]], Dict]:
        logger.info("Starting sweep on %dx%d grid with %d obstacle(s)",
                    self.grid.rows, self.grid.cols, len(self.obstacles))
        self.cleaned_count = 0
        self.current_pos = None
        self.path = []
        self.renders = 0
        self.cancelled = False
        self.start_time = self.clock()
        moves_before = self.motion.moves_made

        # Mỗi frame: [x, y, chỉ số hướng kế tiếp cần thử]
        stack = []
        if self._visit(*START_POS, START_TAG):
            stack.append([START_POS[0], START_POS[1], 0])

        while stack:
            frame = stack[-1]
            x, y, branch = frame
            if branch == len(SWEEP_ORDER) or self.cancelled:
                stack.pop()
                if not self.cancelled:
                    # vẽ lại trạng thái cuối trước khi quay lui
                    self._render()
                continue

            dx, dy, tag = SWEEP_ORDER[branch]
            frame[2] = branch + 1
            if self._visit(x + dx, y + dy, tag):
                stack.append([x + dx, y + dy, 0])

        results = {
            'cells_cleaned': self.cleaned_count,
            'coverage_percentage': self.coverage(),
            'elapsed': self.elapsed(),
            'obstacle_moves': self.motion.moves_made - moves_before,
            'renders': self.renders,
            'cancelled': self.cancelled,
        }
        logger.info("Sweep finished: %d cell(s), coverage %.1f%%",
                    self.cleaned_count, results['coverage_percentage'])
        return self.path, results
