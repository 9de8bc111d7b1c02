from __future__ import annotations

import random
from collections.abc import Iterable

from . import config
from .state import (
    DIRECTIONS,
    GAME_OVER,
    GAME_QUIT,
    IDLE,
    QUIT,
    RIGHT,
    DirectionChange,
    Functor,
    GameContinues,
    GameEvent,
    GameState,
    GameWon,
    Grid,
    Position,
    UserInput,
    add_vectors,
    is_opposite,
)

# Outcomes of classify_move.
MOVED = "moved"
ATE_FOOD = "ate_food"
COLLISION = "collision"


def wrap_position(grid: Grid, pos: tuple[int, int]) -> Position:
    """Re-enter from the opposite edge when a step leaves the grid."""
    x, y = pos
    if x < 0:
        x = grid.width - 1
    elif x >= grid.width:
        x = 0
    if y < 0:
        y = grid.height - 1
    elif y >= grid.height:
        y = 0
    return Position(x, y)


def resolve_direction(current: tuple[int, int], requested: tuple[int, int]) -> tuple[int, int]:
    if requested not in DIRECTIONS:
        raise ValueError(f"unknown direction: {requested!r}")
    # A 180 degree turn keeps the current heading.
    if is_opposite(current, requested):
        return current
    return requested


def speed_for_length(length: int) -> float:
    if length < 5:
        return 1.0
    if length < 10:
        return 2.0
    return 3.0


def update_speed(state: GameState) -> GameState:
    return state._replace(speed=speed_for_length(len(state.snake)))


def apply_input(state: GameState, user_input: UserInput) -> GameState:
    if isinstance(user_input, DirectionChange):
        direction = resolve_direction(state.direction, user_input.direction)
    elif user_input == IDLE:
        direction = state.direction
    else:
        raise ValueError(f"unexpected user input: {user_input!r}")
    return state._replace(direction=direction)


def preview_move(state: GameState) -> tuple[GameState, Position]:
    next_head = wrap_position(state.grid, add_vectors(state.snake[0], state.direction))
    return state, next_head


def classify_move(state: GameState, next_head: Position) -> str:
    # The tail leaves its cell as the head arrives, so it is not an obstacle.
    if next_head in state.snake[:-1]:
        return COLLISION
    if next_head == state.food:
        return ATE_FOOD
    return MOVED


def are_neighbours(grid: Grid, a: Position, b: Position) -> bool:
    return any(wrap_position(grid, add_vectors(a, d)) == b for d in DIRECTIONS)


def update_positions(
    snake: tuple[Position, ...], grid: Grid, next_head: Position, food_was_eaten: bool
) -> tuple[Position, ...]:
    body = snake if food_was_eaten else snake[:-1]
    return tuple(wrap_position(grid, pos) for pos in (next_head, *body))


def find_new_food_position(
    snake: tuple[Position, ...], grid: Grid, rng: random.Random | None = None
) -> Position | None:
    """Pick a uniformly random cell not covered by the snake.

    Returns None when the snake fills the whole grid.
    """
    if rng is None:
        rng = random
    occupied = set(snake)
    free = [
        Position(x, y)
        for x in range(grid.width)
        for y in range(grid.height)
        if (x, y) not in occupied
    ]
    if not free:
        return None
    return rng.choice(free)


def resolve_move(state: GameState, next_head: Position, rng: random.Random | None = None) -> GameEvent:
    outcome = classify_move(state, next_head)
    if outcome == COLLISION:
        return GAME_OVER
    if outcome == MOVED:
        snake = update_positions(state.snake, state.grid, next_head, False)
        return GameContinues(state._replace(snake=snake))

    snake = update_positions(state.snake, state.grid, next_head, True)
    food = find_new_food_position(snake, state.grid, rng)
    new_state = state._replace(snake=snake, food=food)
    if food is None:
        return GameWon(new_state)
    return GameContinues(new_state)


def tick(state: GameState, user_input: UserInput, rng: random.Random | None = None) -> GameEvent:
    """Advance the game by one step.

    Returns GAME_QUIT, GAME_OVER, GameWon(state) or GameContinues(state).
    The given state is never modified.
    """
    if user_input == QUIT:
        return GAME_QUIT
    return (
        Functor(state)
        .map(update_speed)
        .map(lambda s: apply_input(s, user_input))
        .map(preview_move)
        .map(lambda preview: resolve_move(*preview, rng=rng))
        .get()
    )


def new_game(
    grid: tuple[int, int] | None = None,
    snake: Iterable[tuple[int, int]] | None = None,
    direction: tuple[int, int] = RIGHT,
    rng: random.Random | None = None,
) -> GameState:
    grid = Grid(*grid) if grid is not None else Grid(config.GRID_WIDTH, config.GRID_HEIGHT)
    if grid.width <= 0 or grid.height <= 0:
        raise ValueError(f"grid dimensions must be positive, got {grid.width}x{grid.height}")

    if snake is None:
        snake = config.INITIAL_SNAKE
    snake = tuple(Position(*pos) for pos in snake)
    if not snake:
        raise ValueError("snake needs at least one segment")
    for pos in snake:
        if not (0 <= pos.x < grid.width and 0 <= pos.y < grid.height):
            raise ValueError(f"snake segment {tuple(pos)} lies outside the {grid.width}x{grid.height} grid")

    seen = set()
    for pos in snake:
        if pos in seen:
            raise ValueError(f"snake segment {tuple(pos)} appears more than once")
        seen.add(pos)
    for a, b in zip(snake, snake[1:]):
        if not are_neighbours(grid, a, b):
            raise ValueError(f"snake segments {tuple(a)} and {tuple(b)} are not connected")

    if direction not in DIRECTIONS:
        raise ValueError(f"unknown direction: {direction!r}")

    food = find_new_food_position(snake, grid, rng)
    if food is None:
        raise ValueError("snake covers the whole grid, no cell left for food")

    return GameState(
        snake=snake,
        grid=grid,
        direction=direction,
        food=food,
        speed=speed_for_length(len(snake)),
    )
