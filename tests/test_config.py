from snake.config import Config, GRID_W, GRID_H, WIDTH, HEIGHT, CELL_SIZE
from snake.game import START


def test_defaults(monkeypatch):
    monkeypatch.delenv("SNAKE_SEED", raising=False)
    monkeypatch.delenv("SNAKE_LOG_LEVEL", raising=False)
    cfg = Config.from_env()
    assert cfg.fps == 10
    assert cfg.seed is None
    assert cfg.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SNAKE_SEED", "42")
    monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")
    cfg = Config.from_env()
    assert cfg.seed == 42
    assert cfg.log_level == "DEBUG"


def test_grid_fits_start_cell():
    assert (GRID_W, GRID_H) == (WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE) == (64, 36)
    assert 0 <= START.x < GRID_W and 0 <= START.y < GRID_H
