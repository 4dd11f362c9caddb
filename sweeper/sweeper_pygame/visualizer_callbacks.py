import time
import pygame


def update_display(app, grid, obstacles, cleaned_count, elapsed):
    # app: instance SweeperPygameVisualizer (ở file app)
    if not app.is_running or not app.algorithm_running:
        return
    while app.is_paused and app.is_running and app.algorithm_running and not app.stop_requested:
        time.sleep(0.05)
        pygame.event.pump()
    if not app.is_running or not app.algorithm_running:
        return

    app.cells = grid.snapshot()
    app.mobile_positions = [o.position for o in obstacles.mobile_obstacles()]
    app.robot_pos = app.sweeper.current_pos if app.sweeper is not None else None
    app.cleaned_count = cleaned_count
    app.elapsed = elapsed
    app.step_count += 1


def wait_step(app, duration_ms):
    # tốc độ lấy từ thanh trượt, không dùng duration_ms mặc định
    if not app.is_paused and app.step_size > 0:
        time.sleep(max(0.001, app.step_size))


def should_stop(app):
    return app.stop_requested or not app.is_running
