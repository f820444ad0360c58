# game.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging
import random

from .controls import InputSource, Key

logger = logging.getLogger(__name__)


# ---------- Grid position ----------
@dataclass(frozen=True)
class Position:
    x: int
    y: int


# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = Position(0, -1), Position(0, 1), Position(-1, 0), Position(1, 0)
STILL = Position(0, 0)

START = Position(20, 15)

# Checked in order; the first held key wins.
KEY_DIRECTIONS: Tuple[Tuple[Key, Position], ...] = (
    (Key.UP, UP),
    (Key.LEFT, LEFT),
    (Key.DOWN, DOWN),
    (Key.RIGHT, RIGHT),
)


# ---------- Helpers ----------
def is_opposite(a: Position, b: Position) -> bool:
    return a != STILL and a.x == -b.x and a.y == -b.y


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Position]          # head at index 0
    direction: Position
    food: Position
    width: int
    height: int
    score: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @property
    def head(self) -> Position:
        return self.snake[0]


@dataclass(frozen=True)
class DrawData:
    """What the renderer needs from a running game."""
    food: Position
    body: Tuple[Position, ...]
    score: int


def new_game_state(
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
    start: Position = START,
) -> GameState:
    """
    Fresh game: one-cell snake at `start`, moving right, score 0, food placed.
    `start` has to lie on the board or the first collision check fails.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"board must be at least 1x1, got {width}x{height}")

    state = GameState(
        snake=[start],
        direction=RIGHT,
        food=STILL,
        width=width,
        height=height,
        rng=rng if rng is not None else random.Random(),
    )
    spawn_food(state)
    return state


def spawn_food(state: GameState) -> None:
    """Drop food on a uniformly random cell. The snake's own cells are not excluded."""
    state.food = Position(
        state.rng.randrange(state.width),
        state.rng.randrange(state.height),
    )
    logger.debug("food at (%d, %d)", state.food.x, state.food.y)


# ---------- Input / Update ----------
def set_direction(state: GameState, requested: Position) -> None:
    """Queue a new heading for the next step; 180° turns are ignored."""
    if not is_opposite(requested, state.direction):
        state.direction = requested


def handle_input(state: GameState, inputs: InputSource) -> None:
    for key, direction in KEY_DIRECTIONS:
        if inputs.is_down(key):
            set_direction(state, direction)
            return


def step_game(state: GameState) -> None:
    """Advance the snake one cell, growing it when the new head lands on food."""
    if state.direction == STILL:
        return

    head = state.snake[0]
    new_head = Position(head.x + state.direction.x, head.y + state.direction.y)

    if new_head == state.food:
        state.score += 1
        state.snake.insert(0, new_head)
        spawn_food(state)
    else:
        state.snake.pop()
        state.snake.insert(0, new_head)


def detect_collision(state: GameState) -> bool:
    head = state.snake[0]
    if not (0 <= head.x < state.width and 0 <= head.y < state.height):
        return True
    return head in state.snake[1:]


def draw_data(state: GameState) -> DrawData:
    return DrawData(food=state.food, body=tuple(state.snake), score=state.score)
