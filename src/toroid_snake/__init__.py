from .logic import find_new_food_position, new_game, tick, wrap_position
from .state import (
    DOWN,
    GAME_OVER,
    GAME_QUIT,
    IDLE,
    LEFT,
    QUIT,
    RIGHT,
    UP,
    DirectionChange,
    GameContinues,
    GameState,
    GameWon,
    Grid,
    Position,
)

__all__ = [
    "tick",
    "new_game",
    "wrap_position",
    "find_new_food_position",
    "GameState",
    "Grid",
    "Position",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "DirectionChange",
    "IDLE",
    "QUIT",
    "GameContinues",
    "GameWon",
    "GAME_OVER",
    "GAME_QUIT",
]
