import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402

from toroid_snake.state import RIGHT, GameState, Grid, Position  # noqa: E402


def make_state(snake, food, direction=RIGHT, grid=(20, 20), speed=1.0):
    return GameState(
        snake=tuple(Position(*p) for p in snake),
        grid=Grid(*grid),
        direction=direction,
        food=Position(*food) if food is not None else None,
        speed=speed,
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def straight_state():
    """Three segments heading right, food well out of the way."""
    return make_state([(5, 5), (4, 5), (3, 5)], food=(15, 15), direction=RIGHT)


@pytest.fixture
def headless_pygame():
    pygame.init()
    pygame.font.init()
    yield
    pygame.quit()
