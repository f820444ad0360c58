# screens.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union
import logging
import random

from .controls import InputSource, Key
from .game import (
    GameState, new_game_state, handle_input, step_game, detect_collision,
)

logger = logging.getLogger(__name__)


# ---------- Screens ----------
# Only Playing carries a game, so "menu with a live game" can't be built.
@dataclass(frozen=True)
class Menu:
    pass

@dataclass(frozen=True)
class Playing:
    game: GameState

@dataclass(frozen=True)
class GameOver:
    pass

@dataclass(frozen=True)
class HighScore:
    pass

Screen = Union[Menu, Playing, GameOver, HighScore]


# ---------- Controller ----------
class GameManager:
    """
    Owns the current screen and the scores that outlive a single game.

    tick() is called once per frame. It works out the next screen from the
    current one and the input, then swaps it in as the last thing it does,
    so whoever draws after tick() never sees a half-finished transition.
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.screen: Screen = Menu()
        self.high_score = 0
        self.last_score = 0

    @property
    def game(self) -> Optional[GameState]:
        if isinstance(self.screen, Playing):
            return self.screen.game
        return None

    def tick(self, inputs: InputSource) -> Screen:
        screen = self.screen
        nxt: Screen = screen

        if isinstance(screen, Menu):
            if inputs.is_pressed(Key.CONFIRM):
                nxt = Playing(new_game_state(self.width, self.height, self.rng))

        elif isinstance(screen, Playing):
            game = screen.game
            handle_input(game, inputs)
            step_game(game)
            if detect_collision(game):
                self.last_score = game.score
                self.high_score = max(self.high_score, self.last_score)
                logger.info("game over: score=%d high=%d", self.last_score, self.high_score)
                nxt = GameOver()

        elif isinstance(screen, (GameOver, HighScore)):
            if inputs.is_pressed(Key.CONFIRM):
                nxt = Menu()

        if nxt is not screen:
            logger.info("%s -> %s", type(screen).__name__, type(nxt).__name__)
            self.screen = nxt
        return self.screen

    def show_high_score(self) -> None:
        """Switch the menu to the high-score screen. Nothing in tick() leads here."""
        if not isinstance(self.screen, Menu):
            raise RuntimeError(
                f"high score screen is only reachable from the menu, not {type(self.screen).__name__}"
            )
        logger.info("Menu -> HighScore")
        self.screen = HighScore()
