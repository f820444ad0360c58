# main.py
import logging
import random
from typing import Dict, Set, Tuple

import pygame # type: ignore

from .config import WIDTH, HEIGHT, GRID_W, GRID_H, TITLE, CFG, setup_logging
from .controls import Key
from .render import draw
from .screens import GameManager

logger = logging.getLogger(__name__)

KEYMAP: Dict[Key, Tuple[int, ...]] = {
    Key.UP:      (pygame.K_w, pygame.K_UP),
    Key.LEFT:    (pygame.K_a, pygame.K_LEFT),
    Key.DOWN:    (pygame.K_s, pygame.K_DOWN),
    Key.RIGHT:   (pygame.K_d, pygame.K_RIGHT),
    Key.CONFIRM: (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER),
}


class PygameInput:
    """Per-frame keyboard snapshot answering the game's key queries."""

    def __init__(self) -> None:
        self.just_pressed: Set[int] = set()
        self.quit = False

    def poll(self) -> None:
        """Drain the event queue. Call once per frame before tick()."""
        self.just_pressed.clear()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.quit = True
                self.just_pressed.add(event.key)

    def is_down(self, key: Key) -> bool:
        held = pygame.key.get_pressed()
        return any(held[code] for code in KEYMAP[key])

    def is_pressed(self, key: Key) -> bool:
        return any(code in self.just_pressed for code in KEYMAP[key])


def main():
    setup_logging()
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()

        manager = GameManager(GRID_W, GRID_H, random.Random(CFG.seed))
        inputs = PygameInput()
        logger.info("board %dx%d cells, %d fps, seed=%s", GRID_W, GRID_H, CFG.fps, CFG.seed)

        while True:
            # 1) input
            inputs.poll()
            if inputs.quit:
                break

            # 2) update
            manager.tick(inputs)

            # 3) render
            draw(screen, manager)
            pygame.display.flip()
            clock.tick(CFG.fps)
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
