"""
Tests for keyboard sampling in toroid_snake.controls.
"""

import threading

import pygame

from toroid_snake.controls import LastKey, key_to_input, pump_events
from toroid_snake.state import DOWN, IDLE, LEFT, QUIT, RIGHT, UP, DirectionChange


def keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


class TestKeyToInput:
    """Tests for mapping keys to user input."""

    def test_wasd(self):
        """WASD steer."""
        assert key_to_input(pygame.K_w) == DirectionChange(UP)
        assert key_to_input(pygame.K_s) == DirectionChange(DOWN)
        assert key_to_input(pygame.K_a) == DirectionChange(LEFT)
        assert key_to_input(pygame.K_d) == DirectionChange(RIGHT)

    def test_arrows(self):
        """Arrow keys steer too."""
        assert key_to_input(pygame.K_UP) == DirectionChange(UP)
        assert key_to_input(pygame.K_LEFT) == DirectionChange(LEFT)

    def test_quit_keys(self):
        """Q and Escape quit."""
        assert key_to_input(pygame.K_q) == QUIT
        assert key_to_input(pygame.K_ESCAPE) == QUIT

    def test_no_key_or_other_key_is_idle(self):
        """Nothing pressed, or an unmapped key, is idle."""
        assert key_to_input(None) == IDLE
        assert key_to_input(pygame.K_z) == IDLE


class TestLastKey:
    """Tests for the single-slot key holder."""

    def test_starts_empty(self):
        """A new slot holds nothing."""
        assert LastKey().take() is None

    def test_last_write_wins(self):
        """Later keys overwrite earlier ones."""
        slot = LastKey()
        slot.put(pygame.K_w)
        slot.put(pygame.K_d)
        assert slot.take() == pygame.K_d

    def test_take_clears(self):
        """Reading with take empties the slot."""
        slot = LastKey()
        slot.put(pygame.K_w)
        slot.take()
        assert slot.take() is None

    def test_quit_request_is_sticky_within_window(self):
        """Keys after a window close do not cancel the quit."""
        slot = LastKey()
        slot.request_quit()
        slot.put(pygame.K_w)
        assert key_to_input(slot.take()) == QUIT
        slot.put(pygame.K_w)
        assert slot.take() == pygame.K_w

    def test_concurrent_writers(self):
        """Writes from several threads leave one of the written keys."""
        slot = LastKey()
        keys = [pygame.K_w, pygame.K_a, pygame.K_s, pygame.K_d]
        threads = [threading.Thread(target=lambda k=k: [slot.put(k) for _ in range(200)]) for k in keys]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert slot.take() in keys


class TestPumpEvents:
    """Tests for feeding pygame events into the slot."""

    def test_keydown_recorded(self):
        """The last key down in the batch is kept."""
        slot = LastKey()
        pump_events(slot, [keydown(pygame.K_w), keydown(pygame.K_a)])
        assert slot.take() == pygame.K_a

    def test_window_close_quits(self):
        """Closing the window becomes a quit."""
        slot = LastKey()
        pump_events(slot, [pygame.event.Event(pygame.QUIT), keydown(pygame.K_d)])
        assert key_to_input(slot.take()) == QUIT

    def test_other_events_ignored(self):
        """Mouse motion and key releases do not touch the slot."""
        slot = LastKey()
        pump_events(
            slot,
            [
                pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(0, 0), buttons=(0, 0, 0)),
                pygame.event.Event(pygame.KEYUP, key=pygame.K_w),
            ],
        )
        assert slot.take() is None
