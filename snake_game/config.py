from dataclasses import dataclass

# Canvas configuration
CANVAS_WIDTH = 400
CANVAS_HEIGHT = 400
CELL_SIZE = 20
HUD_HEIGHT = 44
BAR_HEIGHT = 26
WINDOW_WIDTH = CANVAS_WIDTH
WINDOW_HEIGHT = HUD_HEIGHT + CANVAS_HEIGHT + BAR_HEIGHT

# Grid dimensions derived from canvas and cell size
GRID_COLS = CANVAS_WIDTH // CELL_SIZE
GRID_ROWS = CANVAS_HEIGHT // CELL_SIZE

# Timing, in milliseconds between ticks (lower is faster)
INITIAL_SPEED = 150
SPEED_DECREMENT = 3
FLOOR_SPEED = 70
SPEED_CONTROL_MIN = 70
SPEED_CONTROL_MAX = 200
SPEED_CONTROL_STEP = 10
IDLE_FPS = 15
FRAME_FPS = 60

SCORE_PER_FOOD = 10
INITIAL_HEAD = (10, 10)
INITIAL_LENGTH = 3

# Colors (R, G, B)
BG_COLOR = (250, 250, 250)
GRID_LINE = (224, 224, 224)
HUD_BG = (44, 62, 80)
HEAD_COLOR = (39, 174, 96)
BODY_COLOR = (39, 174, 96)
EYE_COLOR = (255, 255, 255)
FOOD_COLOR = (231, 76, 60)
LEAF_COLOR = (46, 204, 113)
STEM_COLOR = (139, 69, 19)
WHITE = (240, 240, 240)
OVERLAY_ALPHA = 128
HUD_FONT_SIZE = 20
SMALL_FONT_SIZE = 15
TITLE_FONT_SIZE = 30

HIGH_SCORE_FILE_ENV = "SNAKE_HIGH_SCORE_FILE"
LOG_LEVEL_ENV = "SNAKE_LOG_LEVEL"
DEFAULT_HIGH_SCORE_FILE = "~/.gridsnake_highscore.json"


@dataclass(frozen=True)
class GameConfig:
    """Tunables shared by the engine and the update loop."""

    cols: int = GRID_COLS
    rows: int = GRID_ROWS
    initial_head: tuple = INITIAL_HEAD
    initial_length: int = INITIAL_LENGTH
    initial_speed: int = INITIAL_SPEED
    speed_decrement: int = SPEED_DECREMENT
    floor_speed: int = FLOOR_SPEED
    score_per_food: int = SCORE_PER_FOOD
    speed_min: int = SPEED_CONTROL_MIN
    speed_max: int = SPEED_CONTROL_MAX

    def __post_init__(self):
        head_x, head_y = self.initial_head
        if self.cols < 1 or self.rows < 1:
            raise ValueError("Grid must have at least one column and one row.")
        if self.initial_length < 1:
            raise ValueError("The initial snake needs at least one segment.")
        # Segments extend left from the head, so the tail must stay on the board.
        if head_x - (self.initial_length - 1) < 0 or head_x >= self.cols:
            raise ValueError("Initial snake does not fit within the grid width.")
        if not 0 <= head_y < self.rows:
            raise ValueError("Initial snake does not fit within the grid height.")
        if self.floor_speed > self.initial_speed:
            raise ValueError("floor_speed cannot exceed initial_speed.")
        if self.speed_decrement < 0:
            raise ValueError("speed_decrement must be non-negative.")
        if self.speed_min > self.speed_max:
            raise ValueError("speed_min cannot exceed speed_max.")
