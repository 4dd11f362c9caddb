from .constants import (UNVISITED, OBSTACLE, VISITED, ENTERED_FROM_LEFT, ENTERED_FROM_ABOVE,
                        ENTERED_FROM_RIGHT, ENTERED_FROM_BELOW, DIRECTION_TAGS, MAX_SIZE)
from .errors import SweeperError, InvalidDimension, OutOfBounds, OutOfRange, MapFormatError
from .grid import GridState
from .obstacles import Obstacle, ObstacleRegistry
from .motion import ObstacleMotionStep
from .sweeper import Sweeper
from .persistence import save_map, load_map
from .utils import coverage_percentage, estimate_remaining
