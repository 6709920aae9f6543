"""Configuration objects and tuning constants for the arcade simulation."""

from __future__ import annotations

from dataclasses import dataclass

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
TICK_RATE = 60  # fixed simulation ticks per second

# Player tuning. Speeds are expressed in pixels per tick.
PLAYER_WIDTH = 50
PLAYER_HEIGHT = 30
PLAYER_SPEED = 5.0
PLAYER_BOTTOM_MARGIN = 20
PLAYER_SMOOTHING = 0.1  # fraction of the remaining distance covered per tick
STARTING_LIVES = 3

BULLET_WIDTH = 4
BULLET_HEIGHT = 10
PLAYER_BULLET_SPEED = 7.0
ENEMY_BULLET_SPEED = 4.0
MAX_PLAYER_BULLETS = 3
SHOT_COOLDOWN_SECONDS = 0.3

# Formation layout. Rows are numbered from the top, so lower rows move faster.
ENEMY_ROWS = 5
ENEMY_COLUMNS = 10
ENEMY_WIDTH = 40
ENEMY_HEIGHT = 30
ENEMY_SPACING_X = 60
ENEMY_SPACING_Y = 50
ENEMY_ORIGIN = (50.0, 50.0)
ENEMY_BASE_SPEED = 1.0
ENEMY_ROW_SPEED_STEP = 0.2
ENEMY_POINTS = 10
DESCENT_AMOUNT = 20.0
ENEMY_FIRE_CHANCE = 0.002

# Scoring
STREAK_LENGTH = 5  # consecutive hits needed for each extra multiplier step
LEVEL_BONUS_FACTOR = 0.5

EVENT_FEED_LENGTH = 50


@dataclass(frozen=True)
class GameConfig:
    """Static configuration describing a single play session.

    Attributes
    ----------
    canvas_width, canvas_height:
        Size of the playfield in pixels.  Bullets leaving the vertical
        range are culled and the formation turns around at the horizontal
        edges.
    tick_rate:
        Number of fixed simulation steps per second.  The player smoothing
        factor and every speed below are applied once per step, so changing
        the tick rate changes how fast the game feels.
    enemy_rows, enemy_columns:
        Shape of the grid spawned for every wave.
    enemy_fire_chance:
        Probability that a single enemy opens fire on a given tick.
    max_player_bullets:
        Upper bound on player bullets alive at the same time.
    shot_cooldown:
        Minimum number of seconds between two player shots.  A shot is only
        accepted once strictly more than this much time has passed.
    pause_on_level_complete:
        When set, clearing a wave moves the session into the level complete
        intermission instead of carrying straight on.
    """

    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    tick_rate: int = TICK_RATE
    player_width: float = PLAYER_WIDTH
    player_height: float = PLAYER_HEIGHT
    player_speed: float = PLAYER_SPEED
    player_smoothing: float = PLAYER_SMOOTHING
    starting_lives: int = STARTING_LIVES
    bullet_width: float = BULLET_WIDTH
    bullet_height: float = BULLET_HEIGHT
    player_bullet_speed: float = PLAYER_BULLET_SPEED
    enemy_bullet_speed: float = ENEMY_BULLET_SPEED
    max_player_bullets: int = MAX_PLAYER_BULLETS
    shot_cooldown: float = SHOT_COOLDOWN_SECONDS
    enemy_rows: int = ENEMY_ROWS
    enemy_columns: int = ENEMY_COLUMNS
    enemy_width: float = ENEMY_WIDTH
    enemy_height: float = ENEMY_HEIGHT
    enemy_spacing_x: float = ENEMY_SPACING_X
    enemy_spacing_y: float = ENEMY_SPACING_Y
    enemy_origin: tuple[float, float] = ENEMY_ORIGIN
    enemy_base_speed: float = ENEMY_BASE_SPEED
    enemy_row_speed_step: float = ENEMY_ROW_SPEED_STEP
    enemy_points: int = ENEMY_POINTS
    descent_amount: float = DESCENT_AMOUNT
    enemy_fire_chance: float = ENEMY_FIRE_CHANCE
    pause_on_level_complete: bool = True

    @property
    def tick_seconds(self) -> float:
        return 1.0 / self.tick_rate

    def validate(self) -> None:
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("Canvas dimensions must be positive")
        if self.tick_rate <= 0:
            raise ValueError("Tick rate must be positive")
        if self.player_width <= 0 or self.player_height <= 0:
            raise ValueError("Player size must be positive")
        if self.player_width > self.canvas_width:
            raise ValueError("Player cannot be wider than the canvas")
        if not 0 < self.player_smoothing <= 1:
            raise ValueError("Player smoothing must be in (0, 1]")
        if self.starting_lives <= 0:
            raise ValueError("Starting lives must be positive")
        if self.bullet_width <= 0 or self.bullet_height <= 0:
            raise ValueError("Bullet size must be positive")
        if self.max_player_bullets <= 0:
            raise ValueError("max_player_bullets must be positive")
        if self.shot_cooldown < 0:
            raise ValueError("Shot cooldown cannot be negative")
        if self.enemy_rows <= 0 or self.enemy_columns <= 0:
            raise ValueError("Formation must contain at least one enemy")
        if self.enemy_width <= 0 or self.enemy_height <= 0:
            raise ValueError("Enemy size must be positive")
        if not 0 <= self.enemy_fire_chance <= 1:
            raise ValueError("Enemy fire chance must be a probability")
        if self.descent_amount < 0:
            raise ValueError("Descent amount cannot be negative")
