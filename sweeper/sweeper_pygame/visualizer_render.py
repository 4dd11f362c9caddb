import pygame

from ..sweeper_algorithm.constants import (UNVISITED, OBSTACLE, VISITED, ENTERED_FROM_LEFT,
                                           ENTERED_FROM_ABOVE, ENTERED_FROM_RIGHT,
                                           ENTERED_FROM_BELOW, DIRECTION_TAGS)

# Mũi tên theo hướng robot đi vào ô: (dx, dy) trên màn hình
ARROW_VECTORS = {
    ENTERED_FROM_LEFT: (1, 0),
    ENTERED_FROM_ABOVE: (0, 1),
    ENTERED_FROM_RIGHT: (-1, 0),
    ENTERED_FROM_BELOW: (0, -1),
}


def arrow_points(rect, direction):
    """Tam giác mũi tên nằm trong rect, mũi chỉ theo direction"""
    dx, dy = direction
    cx, cy = rect.center
    half = max(2, rect.width // 3)
    tip = (cx + dx * half, cy + dy * half)
    base_x, base_y = cx - dx * half, cy - dy * half
    left = (base_x - dy * half, base_y + dx * half)
    right = (base_x + dy * half, base_y - dx * half)
    return [tip, left, right]


def draw_grid(surface_size, cell_size, cells, colors, mobile_positions, robot_pos):
    grid_surface = pygame.Surface(surface_size)
    grid_surface.fill(colors['white'])

    # cell colors
    cell_colors = {
        UNVISITED: colors['white'],
        OBSTACLE: colors['black'],
        VISITED: colors['covered'],
    }

    rows, cols = cells.shape
    mobile = set(mobile_positions)

    # cells
    for r in range(rows):
        for c in range(cols):
            rect = pygame.Rect(c * cell_size, r * cell_size, cell_size, cell_size)
            status = int(cells[r][c])
            if (r + 1, c + 1) in mobile:
                pygame.draw.rect(grid_surface, colors['mobile'], rect)
            elif status in DIRECTION_TAGS:
                pygame.draw.rect(grid_surface, colors['fresh'], rect)
                pygame.draw.polygon(grid_surface, colors['path'],
                                    arrow_points(rect, ARROW_VECTORS[status]))
            else:
                pygame.draw.rect(grid_surface, cell_colors.get(status, colors['white']), rect)
            pygame.draw.rect(grid_surface, colors['light_gray'], rect, 1)

    # robot
    if robot_pos is not None:
        robot_x = (robot_pos[1] - 1) * cell_size + cell_size // 2
        robot_y = (robot_pos[0] - 1) * cell_size + cell_size // 2
        robot_radius = max(3, cell_size // 4)
        pygame.draw.circle(grid_surface, colors['green'], (robot_x, robot_y), robot_radius)
        pygame.draw.circle(grid_surface, colors['dark_green'], (robot_x, robot_y), robot_radius, 2)

    return grid_surface


def draw_info_panel(panel_width, total_height, fonts, colors, stats,
                    slider_rect, slider_handle, step_size,
                    buttons, results, window_size):
    font_large, font_medium, font_small = fonts
    panel_surface = pygame.Surface((panel_width, total_height))
    panel_surface.fill(colors['panel_bg'])

    y_offset = 20
    # title
    title_text = font_large.render("Grid Sweeper", True, colors['black'])
    panel_surface.blit(title_text, (20, y_offset))
    y_offset += 40

    info_texts = [
        f"Map: {stats['rows']}x{stats['cols']}",
        f"Obstacles: {stats['obstacles']} ({stats['mobile']} mobile)",
        f"Steps: {stats['steps']}",
        f"Position: {stats['robot_pos']}",
        f"Cleaned: {stats['cleaned']}",
        f"Coverage: {stats['coverage']:.1f}%",
        f"Elapsed: {stats['elapsed']:.1f}s",
        f"Remaining: {stats['remaining']:.1f}s",
    ]
    for text in info_texts:
        t = font_medium.render(text, True, colors['black'])
        panel_surface.blit(t, (20, y_offset))
        y_offset += 22

    # slider
    speed_label = font_medium.render("Step delay:", True, colors['black'])
    panel_surface.blit(speed_label, (20, slider_rect.y - 25))
    pygame.draw.rect(panel_surface, colors['light_gray'],
                     (slider_rect.x - window_size, slider_rect.y,
                      slider_rect.width, slider_rect.height))
    pygame.draw.rect(panel_surface, colors['blue'],
                     (slider_handle.x - window_size, slider_handle.y,
                      slider_handle.width, slider_handle.height))
    speed_surface = font_small.render(f"{step_size:.3f}s", True, colors['black'])
    panel_surface.blit(speed_surface, (slider_rect.right - window_size + 10, slider_rect.y + 4))

    # buttons
    y_offset = slider_rect.bottom
    for btn_data in buttons.values():
        btn_color = btn_data['color'] if btn_data['enabled'] else colors['gray']
        btn_rect_local = pygame.Rect(
            btn_data['rect'].x - window_size, btn_data['rect'].y,
            btn_data['rect'].width, btn_data['rect'].height
        )
        pygame.draw.rect(panel_surface, btn_color, btn_rect_local)
        pygame.draw.rect(panel_surface, colors['dark_gray'], btn_rect_local, 2)
        btn_text = font_medium.render(btn_data['text'], True,
                                      colors['black'] if btn_data['enabled'] else colors['gray'])
        text_rect = btn_text.get_rect(center=btn_rect_local.center)
        panel_surface.blit(btn_text, text_rect)
        y_offset = max(y_offset, btn_rect_local.bottom)

    # results
    if results:
        y_offset += 20
        results_title = font_medium.render("Results:", True, colors['black'])
        panel_surface.blit(results_title, (20, y_offset))
        y_offset += 25
        for text in [
            f"Cleaned: {results.get('cells_cleaned', 0)}",
            f"Coverage: {results.get('coverage_percentage', 0):.1f}%",
            f"Obstacle moves: {results.get('obstacle_moves', 0)}",
            f"Time: {results.get('elapsed', 0):.1f}s",
            "Cancelled" if results.get('cancelled') else "Completed",
        ]:
            r_text = font_small.render(text, True, colors['dark_gray'])
            panel_surface.blit(r_text, (20, y_offset))
            y_offset += 18

    # legend
    legend_y = max(y_offset + 20, 540)
    panel_surface.blit(font_medium.render("Legend:", True, colors['black']), (20, legend_y))
    legend_y += 25
    legend_items = [
        ("• Obstacle: Black", colors['black']),
        ("• Mobile obstacle: Orange", colors['mobile']),
        ("• Visited: Light green", colors['covered']),
        ("• Just visited: Arrow", colors['path']),
        ("• Robot: Green circle", colors['green']),
    ]
    for text, color in legend_items:
        t = font_small.render(text, True, color)
        panel_surface.blit(t, (20, legend_y))
        legend_y += 18

    # controls
    controls_y = legend_y + 15
    panel_surface.blit(font_medium.render("Controls:", True, colors['black']), (20, controls_y))
    controls_y += 22
    for text in ["SPACE: Pause/Resume", "S: Start Sweep", "R: Reset Sweep",
                 "C: Clear Obstacles", "Click: Add Obstacle"]:
        c_text = font_small.render(text, True, colors['dark_gray'])
        panel_surface.blit(c_text, (20, controls_y))
        controls_y += 18

    return panel_surface
