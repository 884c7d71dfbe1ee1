"""Pygame host for the snake game: window, event pump and frame callback."""

import logging
import os

import pygame

from .config import (
    DEFAULT_HIGH_SCORE_FILE,
    FRAME_FPS,
    HIGH_SCORE_FILE_ENV,
    HUD_HEIGHT,
    IDLE_FPS,
    LOG_LEVEL_ENV,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameConfig,
)
from .controls import QUIT, handle_event
from .grid import GridGeometry
from .highscore import HighScoreStore
from .loop import GameLoop
from .render import Renderer

logger = logging.getLogger(__name__)


def configure_logging():
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    configure_logging()
    pygame.init()
    pygame.display.set_caption("Snake")
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    clock = pygame.time.Clock()

    geometry = GridGeometry(origin=(0, HUD_HEIGHT))
    config = GameConfig(cols=geometry.cols, rows=geometry.rows)
    store = HighScoreStore(os.environ.get(HIGH_SCORE_FILE_ENV, DEFAULT_HIGH_SCORE_FILE))
    renderer = Renderer(screen, geometry)
    loop = GameLoop(config=config, high_score_store=store, on_render=renderer.render)
    logger.info("Loaded high score %d from %s", loop.high_score, store.path)

    while True:
        now = pygame.time.get_ticks()
        for event in pygame.event.get():
            if handle_event(loop, event, geometry, now) == QUIT:
                pygame.quit()
                return

        if loop.running:
            loop.tick(now)
            pygame.display.flip()
            clock.tick(FRAME_FPS)
        else:
            # Nothing is scheduled while stopped; keep the screen current.
            renderer.render(loop.snapshot())
            pygame.display.flip()
            clock.tick(IDLE_FPS)


if __name__ == "__main__":
    main()
