"""Grid snake game: engine, update loop and pygame front end."""

from .config import GameConfig
from .direction import Direction, DirectionArbiter
from .engine import AdvanceResult, EngineState, advance, new_state
from .grid import Cell, GridGeometry
from .loop import FrameResult, GameLoop, GameOver, LoopState, Snapshot

__all__ = [
    "AdvanceResult",
    "Cell",
    "Direction",
    "DirectionArbiter",
    "EngineState",
    "FrameResult",
    "GameConfig",
    "GameLoop",
    "GameOver",
    "GridGeometry",
    "LoopState",
    "Snapshot",
    "advance",
    "new_state",
]
