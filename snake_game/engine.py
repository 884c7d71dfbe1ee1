"""Snake movement, growth and collision rules.

All functions here are pure: they take an ``EngineState`` and return a new
one, leaving the input untouched. The only side effect is consuming
randomness from ``rng`` when food is placed.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional

from .direction import Direction
from .food import place_food
from .grid import Cell
from .speed import next_speed

logger = logging.getLogger(__name__)

WALL = "wall"
SELF = "self"
BOARD_FULL = "board_full"


@dataclass(frozen=True)
class EngineState:
    snake: tuple
    food: Optional[Cell]
    direction: Direction = Direction.RIGHT
    score: int = 0
    speed: int = 0

    @property
    def head(self):
        return self.snake[0]


@dataclass(frozen=True)
class AdvanceResult:
    state: EngineState
    ate_food: bool = False
    terminal: bool = False
    reason: Optional[str] = None


def initial_snake(config):
    """Create a horizontal snake with segments extending left from the head."""
    head_x, head_y = config.initial_head
    return tuple(Cell(head_x - i, head_y) for i in range(config.initial_length))


def new_state(config, rng=None):
    """Build the state every game starts from, with food placed off the body."""
    snake = initial_snake(config)
    return EngineState(
        snake=snake,
        food=place_food(snake, config.cols, config.rows, rng),
        direction=Direction.RIGHT,
        score=0,
        speed=config.initial_speed,
    )


def advance(state, direction, config, rng=None):
    """Move the snake one cell in ``direction``.

    Collisions are checked against the body as it stood before this tick,
    tail included, and leave the state unchanged. Eating grows the snake by
    one segment, adds to the score, speeds the game up and places new food.
    """
    new_head = state.head.shifted(direction.dx, direction.dy)

    if not (0 <= new_head.x < config.cols and 0 <= new_head.y < config.rows):
        logger.debug("Head would leave the grid at %s", new_head)
        return AdvanceResult(state=state, terminal=True, reason=WALL)
    if new_head in state.snake:
        logger.debug("Head would run into the body at %s", new_head)
        return AdvanceResult(state=state, terminal=True, reason=SELF)

    if new_head != state.food:
        moved = dataclasses.replace(
            state,
            snake=(new_head,) + state.snake[:-1],
            direction=direction,
        )
        return AdvanceResult(state=moved)

    snake = (new_head,) + state.snake
    food = place_food(snake, config.cols, config.rows, rng)
    grown = dataclasses.replace(
        state,
        snake=snake,
        food=food,
        direction=direction,
        score=state.score + config.score_per_food,
        speed=next_speed(state.speed, config.floor_speed, config.speed_decrement),
    )
    if food is None:
        logger.debug("Snake fills the grid with %d segments", len(snake))
        return AdvanceResult(state=grown, ate_food=True, terminal=True, reason=BOARD_FULL)
    return AdvanceResult(state=grown, ate_food=True)
