"""Frame-driven update loop for a snake game.

The host calls ``GameLoop.tick(now)`` once per displayed frame with a
millisecond timestamp. A logic tick fires only when at least ``speed``
milliseconds have passed since the previous one; every call still asks
for a redraw so overlays stay visible while paused.
"""

import dataclasses
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from .config import GameConfig
from .direction import Direction, DirectionArbiter
from .engine import advance, new_state
from .grid import Cell
from .speed import clamp_speed

logger = logging.getLogger(__name__)


class LoopState(enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass(frozen=True)
class GameOver:
    score: int
    high_score: int
    new_record: bool
    reason: str


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the game handed to renderers."""

    snake: tuple
    food: Optional[Cell]
    direction: Direction
    queued_direction: Optional[Direction]
    score: int
    high_score: int
    speed: int
    running: bool
    paused: bool
    game_over: Optional[GameOver] = None


@dataclass(frozen=True)
class FrameResult:
    snapshot: Snapshot
    ticked: bool = False
    ate_food: bool = False
    game_over: Optional[GameOver] = None
    reschedule: bool = True


class GameLoop:
    """Owns the engine state and drives it through STOPPED/RUNNING/PAUSED."""

    def __init__(self, config=None, high_score_store=None, rng=None,
                 on_render=None, on_game_over=None):
        self.config = config or GameConfig()
        self.rng = rng
        self.store = high_score_store
        self.high_score = high_score_store.load() if high_score_store is not None else 0
        self.on_render = on_render
        self.on_game_over = on_game_over
        self.reset()

    def reset(self):
        """Stop the game and return to the initial state."""
        self.state = new_state(self.config, self.rng)
        self.arbiter = DirectionArbiter(self.state.direction)
        self.status = LoopState.STOPPED
        self.last_tick = 0
        self.game_over = None
        logger.info("Game reset (speed=%d)", self.state.speed)

    @property
    def running(self):
        return self.status is not LoopState.STOPPED

    @property
    def paused(self):
        return self.status is LoopState.PAUSED

    def start(self, now):
        """Begin a game; a finished game is replaced by a fresh one first."""
        if self.status is not LoopState.STOPPED:
            return False
        self._discard_finished_game()
        self.status = LoopState.RUNNING
        self.last_tick = now
        logger.info("Game started")
        return True

    def toggle_pause(self, now):
        if self.status is LoopState.RUNNING:
            self.status = LoopState.PAUSED
            logger.info("Game paused (score=%d)", self.state.score)
            return True
        if self.status is LoopState.PAUSED:
            self.status = LoopState.RUNNING
            # Time spent paused must not count towards the next tick.
            self.last_tick = now
            logger.info("Game resumed")
            return True
        return False

    def request_direction(self, direction):
        return self.arbiter.request(direction)

    def set_speed(self, value):
        """Overwrite the tick delay from a speed control; only while stopped."""
        if self.status is not LoopState.STOPPED:
            return False
        self._discard_finished_game()
        speed = clamp_speed(value, self.config.speed_min, self.config.speed_max)
        self.state = dataclasses.replace(self.state, speed=speed)
        logger.debug("Speed set to %d", speed)
        return True

    def adjust_speed(self, delta):
        """Nudge the tick delay; relative to the fresh game after a game over."""
        if self.status is not LoopState.STOPPED:
            return False
        self._discard_finished_game()
        return self.set_speed(self.state.speed + delta)

    def tick(self, now):
        """Process one frame; commits at most one logic tick."""
        ticked = False
        ate_food = False
        event = None
        if self.status is LoopState.RUNNING and now - self.last_tick >= self.state.speed:
            direction = self.arbiter.commit()
            result = advance(self.state, direction, self.config, self.rng)
            self.state = result.state
            self.last_tick = now
            ticked = True
            ate_food = result.ate_food
            if ate_food:
                logger.debug("Food eaten, score=%d speed=%d", self.state.score, self.state.speed)
            if result.terminal:
                event = self._finish(result.reason)

        snapshot = self.snapshot()
        if self.on_render is not None:
            self.on_render(snapshot)
        return FrameResult(
            snapshot=snapshot,
            ticked=ticked,
            ate_food=ate_food,
            game_over=event,
            reschedule=self.status is not LoopState.STOPPED,
        )

    def snapshot(self):
        return Snapshot(
            snake=self.state.snake,
            food=self.state.food,
            direction=self.arbiter.committed,
            queued_direction=self.arbiter.queued,
            score=self.state.score,
            high_score=self.high_score,
            speed=self.state.speed,
            running=self.running,
            paused=self.paused,
            game_over=self.game_over,
        )

    def _finish(self, reason):
        self.status = LoopState.STOPPED
        score = self.state.score
        new_record = score > self.high_score
        if new_record:
            self.high_score = score
            if self.store is not None:
                self.store.save(score)
            logger.info("New high score: %d", score)
        self.game_over = GameOver(
            score=score,
            high_score=self.high_score,
            new_record=new_record,
            reason=reason,
        )
        logger.info("Game over (%s), score=%d", reason, score)
        if self.on_game_over is not None:
            self.on_game_over(self.game_over)
        return self.game_over

    def _discard_finished_game(self):
        if self.game_over is not None:
            self.reset()
