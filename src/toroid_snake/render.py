from __future__ import annotations

import pygame

from . import config
from .state import GameState, Grid


def window_size(grid: Grid) -> tuple[int, int]:
    width = (grid.width + 2 * config.BORDER) * config.BLOCK + config.PANEL_WIDTH
    height = (grid.height + 2 * config.BORDER) * config.BLOCK
    return width, height


def cell_rect(x: int, y: int) -> pygame.Rect:
    # Grid cell (x, y) sits inside the border frame.
    return pygame.Rect(
        (x + config.BORDER) * config.BLOCK,
        (y + config.BORDER) * config.BLOCK,
        config.BLOCK,
        config.BLOCK,
    )


def panel_rows(state: GameState) -> list[tuple[str, str]]:
    if state.food is None:
        food = "-"
    else:
        food = f"({state.food.x}, {state.food.y})"
    return [
        ("Snake Length", str(len(state.snake))),
        ("Food Position", food),
        ("Speed", str(state.speed)),
    ]


def draw_board(screen: pygame.Surface, state: GameState) -> None:
    grid = state.grid
    frame = pygame.Rect(
        0,
        0,
        (grid.width + 2 * config.BORDER) * config.BLOCK,
        (grid.height + 2 * config.BORDER) * config.BLOCK,
    )
    pygame.draw.rect(screen, config.WHITE, frame)
    pygame.draw.rect(
        screen,
        config.BLACK,
        pygame.Rect(config.BLOCK, config.BLOCK, grid.width * config.BLOCK, grid.height * config.BLOCK),
    )

    head, *body = state.snake
    for x, y in body:
        pygame.draw.rect(screen, config.GREEN, cell_rect(x, y))
    pygame.draw.rect(screen, config.YELLOW, cell_rect(*head))

    if state.food is not None:
        pygame.draw.rect(screen, config.RED, cell_rect(*state.food))


def draw_panel(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    left = (state.grid.width + 2 * config.BORDER) * config.BLOCK
    panel = pygame.Rect(left, 0, config.PANEL_WIDTH, screen.get_height())
    pygame.draw.rect(screen, config.PANEL_BG, panel)

    line_height = font.get_linesize() + 4
    y = config.BLOCK
    for label, value in [("Property", "Value"), *panel_rows(state)]:
        screen.blit(font.render(label, True, config.GREY), (left + 12, y))
        screen.blit(font.render(value, True, config.WHITE), (left + 12 + config.PANEL_WIDTH // 2, y))
        y += line_height


def draw_state(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    screen.fill(config.BLACK)
    draw_board(screen, state)
    draw_panel(screen, font, state)
    pygame.display.flip()
