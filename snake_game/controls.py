"""Keyboard and mouse wiring for the game loop."""

import logging

import pygame

from .config import SPEED_CONTROL_STEP
from .direction import Direction

logger = logging.getLogger(__name__)

QUIT = "quit"

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

# Speed values are tick delays, so "faster" lowers the number.
FASTER_KEYS = (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS)
SLOWER_KEYS = (pygame.K_MINUS, pygame.K_KP_MINUS)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def direction_toward(head, target):
    """Pick the step from head toward target along the dominant axis."""
    dx = target[0] - head[0]
    dy = target[1] - head[1]
    if dx == 0 and dy == 0:
        return None
    if abs(dx) >= abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


def handle_event(loop, event, geometry, now):
    """Apply one pygame event to the loop; returns QUIT when the app should exit."""
    if event.type == pygame.QUIT:
        return QUIT

    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        cell = geometry.canvas_to_cell(*event.pos)
        if cell is not None:
            direction = direction_toward(loop.state.head, cell)
            if direction is not None:
                loop.request_direction(direction)
        return None

    if event.type != pygame.KEYDOWN:
        return None

    key = event.key
    if key == pygame.K_ESCAPE:
        return QUIT
    if key in KEY_DIRECTIONS:
        loop.request_direction(KEY_DIRECTIONS[key])
    elif key == pygame.K_SPACE:
        if loop.running:
            loop.toggle_pause(now)
    elif key in START_KEYS:
        if not loop.running:
            loop.start(now)
    elif key == pygame.K_r:
        loop.reset()
    elif key in FASTER_KEYS:
        if not loop.adjust_speed(-SPEED_CONTROL_STEP):
            logger.debug("Speed control is locked while a game is running")
    elif key in SLOWER_KEYS:
        if not loop.adjust_speed(SPEED_CONTROL_STEP):
            logger.debug("Speed control is locked while a game is running")
    return None
