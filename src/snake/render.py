# render.py
from typing import Dict, Tuple
import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE,
    BLACK, DARKGRAY, GRAY, WHITE, GREEN, RED, YELLOW,
)
from .game import DrawData, draw_data
from .screens import GameManager, Menu, Playing, GameOver, HighScore

_fonts: Dict[int, pygame.font.Font] = {}


def font(size: int) -> pygame.font.Font:
    if size not in _fonts:
        _fonts[size] = pygame.font.SysFont(None, size)
    return _fonts[size]


# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)

def draw_centered_text(screen: pygame.Surface, text: str, y: int, size: int,
                       color: Tuple[int, int, int]) -> None:
    surf = font(size).render(text, True, color)
    screen.blit(surf, surf.get_rect(midtop=(WIDTH // 2, y)))


# ---------- Screens ----------
def draw_game(screen: pygame.Surface, data: DrawData) -> None:
    screen.fill(DARKGRAY)
    txt = font(24).render(f"Score: {data.score}", True, WHITE)
    screen.blit(txt, (10, 10))
    # food
    half = CELL_SIZE // 2
    center = (data.food.x * CELL_SIZE + half, data.food.y * CELL_SIZE + half)
    pygame.draw.circle(screen, RED, center, half)
    # snake
    for seg in data.body:
        draw_cell(screen, seg.x, seg.y, GREEN)

def draw_menu(screen: pygame.Surface) -> None:
    screen.fill(BLACK)
    draw_centered_text(screen, "Snake Game", HEIGHT // 2 - 100, 48, GREEN)
    draw_centered_text(screen, "Press SPACE to start", HEIGHT // 2, 28, WHITE)

def draw_game_over(screen: pygame.Surface, last_score: int, high_score: int) -> None:
    screen.fill(BLACK)
    draw_centered_text(screen, "Game Over", HEIGHT // 2 - 80, 48, RED)
    draw_centered_text(screen, f"Your Score: {last_score}", HEIGHT // 2 - 20, 32, WHITE)
    draw_centered_text(screen, f"Highest Score: {high_score}", HEIGHT // 2 + 20, 32, YELLOW)
    draw_centered_text(screen, "Press ENTER to return to menu", HEIGHT // 2 + 70, 28, GRAY)

def draw_high_score(screen: pygame.Surface, high_score: int) -> None:
    screen.fill(BLACK)
    draw_centered_text(screen, f"Highest Score: {high_score}", HEIGHT // 2 - 20, 36, WHITE)
    draw_centered_text(screen, "Press ENTER to return to menu", HEIGHT // 2 + 30, 28, GRAY)


def draw(screen: pygame.Surface, manager: GameManager) -> None:
    """Draw whatever screen the manager is on."""
    current = manager.screen
    if isinstance(current, Menu):
        draw_menu(screen)
    elif isinstance(current, Playing):
        draw_game(screen, draw_data(current.game))
    elif isinstance(current, GameOver):
        draw_game_over(screen, manager.last_score, manager.high_score)
    elif isinstance(current, HighScore):
        draw_high_score(screen, manager.high_score)
