"""Random food placement."""

import random

from .grid import Cell


def place_food(snake, cols, rows, rng=None):
    """Return a random grid cell that is not occupied by the snake.

    Samples uniformly and retries on occupied cells. Returns None when the
    snake already covers every cell, since no placement is possible.
    """
    rng = rng or random
    occupied = set(snake)
    if len(occupied) >= cols * rows:
        return None

    while True:
        pos = Cell(rng.randrange(cols), rng.randrange(rows))
        if pos not in occupied:
            return pos
