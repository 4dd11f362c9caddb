from sweeper.sweeper_algorithm.grid import GridState
from sweeper.sweeper_algorithm.obstacles import ObstacleRegistry
from sweeper.sweeper_algorithm.sweeper import Sweeper


class ScriptedRandom:
    """Random source replaying fixed values for randrange() and random()."""

    def __init__(self, choices=(), floats=()):
        self.choices = list(choices)
        self.floats = list(floats)

    def randrange(self, n):
        value = self.choices.pop(0)
        assert 0 <= value < n
        return value

    def random(self):
        return self.floats.pop(0)


class FakeClock:
    def __init__(self, tick=0.5):
        self.now = 0.0
        self.tick = tick

    def __call__(self):
        self.now += self.tick
        return self.now


def no_wait(duration_ms):
    pass


def make_world(rows, cols, static=(), mobile=(), rng=None):
    grid = GridState(rows, cols)
    obstacles = ObstacleRegistry(grid, rng=rng if rng is not None else ScriptedRandom())
    for x, y in static:
        obstacles.add_static(x, y, mobile=False)
    for x, y in mobile:
        obstacles.add_static(x, y, mobile=True)
    return grid, obstacles


def make_sweeper(grid, obstacles, **kwargs):
    kwargs.setdefault("wait", no_wait)
    return Sweeper(grid, obstacles, **kwargs)
