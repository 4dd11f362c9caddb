"""Grid sweeper: depth-first coverage simulation of a cleaning robot."""

__version__ = "0.1.0"
