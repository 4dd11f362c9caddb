def coverage_percentage(cleaned: int, rows: int, cols: int, static_count: int) -> float:
    """Tỉ lệ bao phủ: cleaned * 100 / (rows*cols - số chướng ngại vật tĩnh)"""
    free_cells = rows * cols - static_count
    if free_cells <= 0:
        return 0.0
    return cleaned * 100.0 / free_cells


def estimate_remaining(elapsed: float, cleaned: int, rows: int, cols: int,
                       obstacle_count: int) -> float:
    """Ước lượng thời gian còn lại theo tốc độ quét trung bình"""
    if cleaned <= 0:
        return 0.0
    return max(0.0, elapsed * (rows * cols - obstacle_count - cleaned) / cleaned)
