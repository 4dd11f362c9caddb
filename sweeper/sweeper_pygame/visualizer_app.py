"""
App chính: vòng lặp, xử lý event, gọi renderer & callbacks
"""

import logging
import sys
import threading

import pygame

from ..sweeper_algorithm.envs import create_test_environment
from ..sweeper_algorithm.errors import OutOfRange
from ..sweeper_algorithm.sweeper import Sweeper
from ..sweeper_algorithm.utils import coverage_percentage, estimate_remaining

from .visualizer_ui import UIState, setup_ui_elements, handle_mouse_hover, update_slider, cell_at
from .visualizer_render import draw_grid, draw_info_panel
from .visualizer_callbacks import update_display, wait_step, should_stop

logger = logging.getLogger(__name__)


class SweeperPygameVisualizer:
    def __init__(self, grid_size=20, cell_size=28, step_size=0.1, seed=None):
        # ---------- cấu hình ----------
        self.grid_size = grid_size
        self.cell_size = cell_size
        self.step_size = step_size
        self.window_size = grid_size * cell_size
        self.panel_width = 300
        self.total_width = self.window_size + self.panel_width
        self.total_height = max(self.window_size, 760)

        # ---------- trạng thái thuật toán ----------
        self.is_paused = False
        self.is_running = False
        self.algorithm_running = False
        self.stop_requested = False
        self.sweeper = None
        self.thread = None

        # ---------- màu ----------
        self.colors = {
            'white': (255, 255, 255),
            'black': (0, 0, 0),
            'gray': (128, 128, 128),
            'light_gray': (211, 211, 211),
            'dark_gray': (64, 64, 64),
            'green': (0, 255, 0),
            'dark_green': (0, 128, 0),
            'blue': (0, 0, 255),
            'panel_bg': (240, 240, 240),
            'button_normal': (200, 200, 200),
            'button_hover': (180, 180, 180),
            'covered': (144, 238, 144),
            'fresh': (255, 255, 200),
            'path': (255, 20, 147),
            'mobile': (255, 165, 0),
        }

        # ---------- pygame ----------
        pygame.init()
        self.screen = pygame.display.set_mode((self.total_width, self.total_height))
        pygame.display.set_caption("Grid Sweeper - Pygame")
        self.clock = pygame.time.Clock()

        # fonts
        self.font_large = pygame.font.Font(None, 24)
        self.font_medium = pygame.font.Font(None, 20)
        self.font_small = pygame.font.Font(None, 16)

        # grid & obstacles mẫu
        self.grid, self.obstacles = create_test_environment(grid_size, seed=seed)
        self.step_count = 0
        self.sync_from_model()

        # UI state
        self.ui = UIState(self.window_size, self.panel_width, step_size)
        setup_ui_elements(self.ui, self.colors)

        # results
        self.results = {}

    def sync_from_model(self):
        self.cells = self.grid.snapshot()
        self.mobile_positions = [o.position for o in self.obstacles.mobile_obstacles()]
        self.robot_pos = None
        self.cleaned_count = 0
        self.elapsed = 0.0

    # ---------- events ----------
    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
                return False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    self.handle_mouse_click(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button == 1:
                    self.ui.dragging_slider = False
            elif event.type == pygame.MOUSEMOTION:
                if self.ui.dragging_slider:
                    self.step_size = update_slider(self.ui, event.pos[0])
                else:
                    handle_mouse_hover(self.ui, self.colors, event.pos)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    self.toggle_pause()
                elif event.key == pygame.K_r:
                    self.reset_sweep()
                elif event.key == pygame.K_c:
                    self.clear_obstacles()
                elif event.key == pygame.K_s and not self.algorithm_running:
                    self.start_algorithm()
        return True

    def handle_mouse_click(self, pos):
        for btn_id, btn_data in self.ui.buttons.items():
            if btn_data['rect'].collidepoint(pos) and btn_data['enabled']:
                if btn_id == 'start':
                    self.start_algorithm()
                elif btn_id == 'pause':
                    self.toggle_pause()
                elif btn_id == 'reset':
                    self.reset_sweep()
        if self.ui.slider_rect.collidepoint(pos):
            self.ui.dragging_slider = True
            self.step_size = update_slider(self.ui, pos[0])
            return
        if not self.algorithm_running:
            cell = cell_at(pos, self.cell_size, self.grid.rows, self.grid.cols)
            if cell is not None:
                self.add_obstacle(*cell)

    def add_obstacle(self, x, y):
        try:
            self.obstacles.add_static(x, y)
        except OutOfRange as e:
            logger.warning("%s", e)
            return
        self.sync_from_model()

    def toggle_pause(self):
        if self.algorithm_running:
            self.is_paused = not self.is_paused
            self.ui.buttons['pause']['text'] = 'Resume' if self.is_paused else 'Pause'

    def _stop_algorithm(self):
        if self.thread is not None and self.thread.is_alive():
            self.stop_requested = True
            self.is_paused = False
            self.thread.join(timeout=2.0)
        self.thread = None
        self.stop_requested = False

    def reset_sweep(self):
        """Dừng lượt quét, xóa trạng thái đã quét, giữ chướng ngại vật ở vị trí gốc"""
        self._stop_algorithm()
        self.obstacles.resize(self.grid.rows, self.grid.cols)
        self.sync_from_model()
        self.step_count = 0
        self.results = {}
        self._finish_ui()

    def clear_obstacles(self):
        if self.algorithm_running:
            return
        self.obstacles.replace(self.grid.rows, self.grid.cols, [])
        self.sync_from_model()
        self.results = {}

    def _finish_ui(self):
        self.algorithm_running = False
        self.is_paused = False
        self.ui.buttons['start']['enabled'] = True
        self.ui.buttons['pause']['enabled'] = False
        self.ui.buttons['pause']['text'] = 'Pause'

    # ---------- algorithm ----------
    def start_algorithm(self):
        if self.algorithm_running:
            return
        self.algorithm_running = True
        self.stop_requested = False
        self.ui.buttons['start']['enabled'] = False
        self.ui.buttons['pause']['enabled'] = True
        self.is_paused = False
        self.ui.buttons['pause']['text'] = 'Pause'
        self.step_count = 0

        def run_sweeper():
            self.sweeper = Sweeper(self.grid, self.obstacles,
                                   wait=lambda ms: wait_step(self, ms))
            self.sweeper.set_callbacks(
                render_callback=lambda *args: update_display(self, *args),
                should_stop=lambda: should_stop(self),
            )
            _, results = self.sweeper.run()
            self.results = results
            self._finish_ui()

        self.thread = threading.Thread(target=run_sweeper, daemon=True)
        self.thread.start()

    # ---------- draw ----------
    def stats(self):
        rows, cols = self.grid.rows, self.grid.cols
        return {
            'rows': rows,
            'cols': cols,
            'obstacles': len(self.obstacles),
            'mobile': len(self.mobile_positions),
            'steps': self.step_count,
            'robot_pos': self.robot_pos,
            'cleaned': self.cleaned_count,
            'coverage': coverage_percentage(self.cleaned_count, rows, cols,
                                            self.obstacles.static_count()),
            'elapsed': self.elapsed,
            'remaining': estimate_remaining(self.elapsed, self.cleaned_count, rows, cols,
                                            len(self.obstacles)),
        }

    def draw_grid(self):
        return draw_grid(
            (self.grid.cols * self.cell_size, self.grid.rows * self.cell_size),
            self.cell_size, self.cells, self.colors,
            self.mobile_positions, self.robot_pos
        )

    def draw_info_panel(self):
        return draw_info_panel(
            self.panel_width, self.total_height,
            (self.font_large, self.font_medium, self.font_small), self.colors,
            self.stats(), self.ui.slider_rect, self.ui.slider_handle, self.step_size,
            self.ui.buttons, self.results, self.window_size
        )

    # ---------- main loop ----------
    def run(self):
        self.is_running = True
        while self.is_running:
            if not self.handle_events():
                break
            self.screen.fill(self.colors['white'])

            grid_surface = self.draw_grid()
            self.screen.blit(grid_surface, (0, 0))

            panel_surface = self.draw_info_panel()
            self.screen.blit(panel_surface, (self.window_size, 0))

            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
        sys.exit()


if __name__ == '__main__':
    print("--- Grid Sweeper Visualization (Pygame) ---")
    print("Grid Size: 20x20")
    print("Starting Pygame GUI...")
    visualizer = SweeperPygameVisualizer(grid_size=20, cell_size=28, step_size=0.1)
    visualizer.run()
