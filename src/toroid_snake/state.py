from __future__ import annotations

from collections import namedtuple
from typing import Union

Position = namedtuple("Position", ["x", "y"])
Grid = namedtuple("Grid", ["width", "height"])

GameState = namedtuple("GameState", ["snake", "grid", "direction", "food", "speed"])
# snake: tuple[Position, ...], head is first element.
# grid: Grid, fixed for the whole game.
# direction: one of UP, DOWN, LEFT, RIGHT
# food: Position, or None once the board is full
# speed: float multiplier, 1.0 / 2.0 / 3.0

# Headings as (dx, dy) in screen coordinates (y grows downwards).
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# User input: DirectionChange(direction), IDLE or QUIT.
DirectionChange = namedtuple("DirectionChange", ["direction"])
IDLE = "idle"
QUIT = "quit"
UserInput = Union[DirectionChange, str]

# Game events returned by a tick.
GameContinues = namedtuple("GameContinues", ["state"])
GameWon = namedtuple("GameWon", ["state"])
GAME_OVER = "game_over"
GAME_QUIT = "game_quit"
GameEvent = Union[GameContinues, GameWon, str]


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


def is_opposite(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return add_vectors(a, b) == (0, 0)


def is_terminal(event: GameEvent) -> bool:
    return not isinstance(event, GameContinues)


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
