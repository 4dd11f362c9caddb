class SweeperError(Exception):
    """Base class for grid sweeper errors"""


class InvalidDimension(SweeperError, ValueError):
    """Rows/cols non-positive or above the supported maximum"""


class OutOfBounds(SweeperError, IndexError):
    """Cell access outside the configured grid"""


class OutOfRange(SweeperError, ValueError):
    """Obstacle coordinate outside the configured grid"""


class MapFormatError(SweeperError, ValueError):
    """Map file content cannot be parsed"""
