# config.py
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# ----- Grid & window -----
GRID_SIZE = 30          # cells per side
CELL_SIZE = 20          # pixels per cell
HUD_HEIGHT = 32         # score bar above the board
DPAD_HEIGHT = 96        # on-screen direction buttons below the board

# ----- Colors -----
BG     = (20, 20, 24)
BOARD  = (32, 32, 38)
GREEN  = (80, 200, 80)   # body
LIME   = (140, 240, 120) # head
RED    = (200, 70, 70)   # food
TEXT   = (220, 220, 230)
BUTTON = (60, 60, 72)

CATEGORY_COLORS = {
    "head": LIME,
    "body": GREEN,
    "food": RED,
}

# ----- Timing -----
TICK_MS = 100
FPS = 60

DEFAULT_HIGH_SCORE_PATH = Path.home() / ".gridsnake" / "highscore.json"


class ConfigError(ValueError):
    """Raised when a configuration value is out of range."""


# ----- Tunables (startup only, never changed while playing) -----
@dataclass
class Config:
    grid_size: int = GRID_SIZE
    tick_ms: int = TICK_MS
    cell_size: int = CELL_SIZE
    seed: Optional[int] = None
    max_food_attempts: int = 1000
    high_score_path: Path = field(default_factory=lambda: DEFAULT_HIGH_SCORE_PATH)

    def validate(self) -> "Config":
        if self.grid_size < 2:
            raise ConfigError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.tick_ms <= 0:
            raise ConfigError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.cell_size <= 0:
            raise ConfigError(f"cell_size must be positive, got {self.cell_size}")
        if self.max_food_attempts < 1:
            raise ConfigError(
                f"max_food_attempts must be at least 1, got {self.max_food_attempts}"
            )
        return self

    @property
    def board_px(self) -> int:
        return self.grid_size * self.cell_size

    @property
    def window_size(self) -> tuple[int, int]:
        return self.board_px, HUD_HEIGHT + self.board_px + DPAD_HEIGHT


CFG = Config()
