from __future__ import annotations

import threading

import pygame

from .state import DOWN, IDLE, LEFT, QUIT, RIGHT, UP, DirectionChange, UserInput

KEY_MAP = {
    pygame.K_w: DirectionChange(UP),
    pygame.K_UP: DirectionChange(UP),
    pygame.K_s: DirectionChange(DOWN),
    pygame.K_DOWN: DirectionChange(DOWN),
    pygame.K_a: DirectionChange(LEFT),
    pygame.K_LEFT: DirectionChange(LEFT),
    pygame.K_d: DirectionChange(RIGHT),
    pygame.K_RIGHT: DirectionChange(RIGHT),
    pygame.K_q: QUIT,
    pygame.K_ESCAPE: QUIT,
}


class LastKey:
    """Single-slot holder for the most recent key press.

    Writers overwrite the slot; the game loop reads and clears it once per tick.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._key: int | None = None
        self._quit = False

    def put(self, key: int) -> None:
        with self._lock:
            if not self._quit:
                self._key = key

    def request_quit(self) -> None:
        # Wins over any later key in the same window.
        with self._lock:
            self._key = pygame.K_q
            self._quit = True

    def take(self) -> int | None:
        with self._lock:
            key = self._key
            self._key = None
            self._quit = False
            return key


def key_to_input(key: int | None) -> UserInput:
    if key is None:
        return IDLE
    return KEY_MAP.get(key, IDLE)


def pump_events(slot: LastKey, events: list[pygame.event.Event] | None = None) -> None:
    if events is None:
        events = pygame.event.get()
    for event in events:
        if event.type == pygame.QUIT:
            slot.request_quit()
        elif event.type == pygame.KEYDOWN:
            slot.put(event.key)
