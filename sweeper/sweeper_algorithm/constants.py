# --- Trạng thái của mỗi ô trên bản đồ ---
UNVISITED = 0            # Ô trống, chưa được quét
OBSTACLE = -1            # Ô là chướng ngại vật
ENTERED_FROM_LEFT = 1    # Vừa quét, robot đi sang phải (→)
ENTERED_FROM_ABOVE = 2   # Vừa quét, robot đi xuống (↓)
ENTERED_FROM_RIGHT = 3   # Vừa quét, robot đi sang trái (←)
ENTERED_FROM_BELOW = 4   # Vừa quét, robot đi lên (↑)
VISITED = 5              # Ô đã quét

DIRECTION_TAGS = (ENTERED_FROM_LEFT, ENTERED_FROM_ABOVE,
                  ENTERED_FROM_RIGHT, ENTERED_FROM_BELOW)
ALL_STATUSES = (UNVISITED, OBSTACLE, VISITED) + DIRECTION_TAGS

# --- Thứ tự ưu tiên khi quét: phải, xuống, trái, lên ---
# (dx, dy, tag gán cho ô đích)
SWEEP_ORDER = [
    (0, 1, ENTERED_FROM_LEFT),
    (1, 0, ENTERED_FROM_ABOVE),
    (0, -1, ENTERED_FROM_RIGHT),
    (-1, 0, ENTERED_FROM_BELOW),
]

# Hướng di chuyển của chướng ngại vật động: 0-phải, 1-xuống, 2-trái, 3-lên
DIR4 = [(0, 1), (1, 0), (0, -1), (-1, 0)]

START_POS = (1, 1)
START_TAG = ENTERED_FROM_LEFT

# --- Cấu hình mặc định ---
MAX_SIZE = 50
STEP_DELAY_MS = 500        # chờ sau mỗi ô được quét
INVALID_CHOICE_DELAY_MS = 1000
MOBILE_PROBABILITY = 0.5

MAP_SUFFIX = ".lbzsmap"

# --- Ký hiệu hiển thị trên terminal ---
GLYPHS = {
    OBSTACLE: "■",
    UNVISITED: "○",
    ENTERED_FROM_LEFT: "→",
    ENTERED_FROM_ABOVE: "↓",
    ENTERED_FROM_RIGHT: "←",
    ENTERED_FROM_BELOW: "↑",
    VISITED: "●",
}
MOBILE_GLYPH = "★"
