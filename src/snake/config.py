from dataclasses import dataclass
from typing import Optional
import logging
import os

# ----- Window & grid -----
WIDTH, HEIGHT = 640 * 2, 360 * 2
CELL_SIZE = 20
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE
TITLE = "Snake Game"

# ----- Colors -----
BLACK    = (0, 0, 0)
DARKGRAY = (80, 80, 80)
GRAY     = (130, 130, 130)
WHITE    = (255, 255, 255)
GREEN    = (0, 228, 48)
RED      = (230, 41, 55)
YELLOW   = (253, 249, 0)

# ----- Tunables -----
@dataclass
class Config:
    fps: int = 10                 # simulation steps per second
    seed: Optional[int] = None    # None -> unseeded food placement
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """Defaults, overridden by SNAKE_SEED / SNAKE_LOG_LEVEL when set."""
        cfg = cls()
        seed = os.environ.get("SNAKE_SEED")
        if seed:
            cfg.seed = int(seed)
        level = os.environ.get("SNAKE_LOG_LEVEL")
        if level:
            cfg.log_level = level.upper()
        return cfg

CFG = Config.from_env()


def setup_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=level or CFG.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
