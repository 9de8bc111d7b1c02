from __future__ import annotations

import logging
import random
from collections.abc import Callable

import pygame

from . import config
from .controls import LastKey, key_to_input, pump_events
from .logic import tick
from .render import draw_state, window_size
from .state import GAME_OVER, GAME_QUIT, GameEvent, GameState, GameWon, UserInput, is_terminal

logger = logging.getLogger(__name__)


def tick_interval_ms(speed: float) -> float:
    return config.BASE_TICK_MS / speed


def describe_outcome(event: GameEvent, state: GameState) -> str:
    if event == GAME_OVER:
        return f"Game Over! Length: {len(state.snake)}"
    if event == GAME_QUIT:
        return "Quit."
    if isinstance(event, GameWon):
        return f"You win! Length: {len(event.state.snake)}"
    raise ValueError(f"not a terminal event: {event!r}")


def run(
    state: GameState,
    read_input: Callable[[GameState], UserInput],
    draw: Callable[[GameState], None] | None = None,
    rng: random.Random | None = None,
) -> tuple[GameEvent, GameState]:
    """Drive ticks until a terminal event.

    read_input(state) returns one user input per tick; draw(state) is called
    before each tick. Returns the terminal event and the last running state.
    """
    while True:
        if draw is not None:
            draw(state)
        user_input = read_input(state)
        event = tick(state, user_input, rng)
        logger.debug("input=%r length=%d speed=%s", user_input, len(state.snake), state.speed)
        if is_terminal(event):
            logger.info("game ended: %s", describe_outcome(event, state))
            return event, state
        if len(event.state.snake) > len(state.snake):
            logger.info("food eaten, length %d, new food at %s", len(event.state.snake), tuple(event.state.food))
        state = event.state


def sample_input(slot: LastKey, wait_ms: float, clock: pygame.time.Clock) -> UserInput:
    start = pygame.time.get_ticks()
    while pygame.time.get_ticks() - start < wait_ms:
        pump_events(slot)
        clock.tick(config.FPS)
    return key_to_input(slot.take())


def play(state: GameState, rng: random.Random | None = None) -> str:
    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size(state.grid))
        pygame.display.set_caption("Toroid Snake")
        font = pygame.font.Font(None, config.FONT_SIZE)
        clock = pygame.time.Clock()
        slot = LastKey()

        event, last_state = run(
            state,
            read_input=lambda s: sample_input(slot, tick_interval_ms(s.speed), clock),
            draw=lambda s: draw_state(screen, font, s),
            rng=rng,
        )
    finally:
        pygame.quit()
    return describe_outcome(event, last_state)
