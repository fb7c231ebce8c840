# render.py
from __future__ import annotations
import itertools
import logging
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

import pygame  # type: ignore

from .config import (
    BG, BOARD, BUTTON, CATEGORY_COLORS, DPAD_HEIGHT, HUD_HEIGHT, TEXT,
    Config,
)

logger = logging.getLogger(__name__)

Placement = Tuple[object, int, int]  # (handle, row, col)

DRAW_ORDER = {"food": 0, "body": 1, "head": 2}


class Renderer(Protocol):
    def create(self, category: str) -> object: ...
    def place(self, items: Iterable[Placement]) -> None: ...
    def restyle(self, handle: object, category: str) -> None: ...
    def clear(self) -> None: ...
    def show_score(self, score: int, high_score: int) -> None: ...
    def notify(self, message: str) -> None: ...


def dpad_layout(cfg: Config) -> Dict[str, pygame.Rect]:
    """
    On-screen arrow buttons below the board, keyed by the input name
    each one sends. Laid out as a plus sign centred horizontally.
    """
    size = DPAD_HEIGHT // 3
    cx = cfg.board_px // 2
    top = HUD_HEIGHT + cfg.board_px
    return {
        "up":    pygame.Rect(cx - size // 2, top, size, size),
        "left":  pygame.Rect(cx - size // 2 - size, top + size, size, size),
        "right": pygame.Rect(cx + size // 2, top + size, size, size),
        "down":  pygame.Rect(cx - size // 2, top + 2 * size, size, size),
    }


class PygameRenderer:
    """
    Keeps a table of handle -> (row, col, category) and draws it with pygame.

    The game core never reads anything back except what it created; cells
    that have been created but not placed yet are not drawn.
    """

    def __init__(self, cfg: Config):
        self.cfg = cfg
        self.cells: Dict[int, List] = {}   # handle -> [row, col, category]
        self.score = 0
        self.high_score = 0
        self.message: Optional[str] = None
        self.buttons = dpad_layout(cfg)
        self._ids = itertools.count(1)
        self.screen = None
        self.font = None

    # ---------- Window ----------
    def open(self, caption: str = "Snake") -> None:
        self.screen = pygame.display.set_mode(self.cfg.window_size)
        pygame.display.set_caption(caption)
        self.font = pygame.font.SysFont(None, 24)

    # ---------- Renderer protocol ----------
    def create(self, category: str) -> int:
        handle = next(self._ids)
        self.cells[handle] = [None, None, category]
        return handle

    def place(self, items: Iterable[Placement]) -> None:
        for handle, row, col in items:
            cell = self.cells.get(handle)
            if cell is None:
                logger.warning("place() on unknown handle %r", handle)
                continue
            cell[0], cell[1] = row, col

    def restyle(self, handle: int, category: str) -> None:
        cell = self.cells.get(handle)
        if cell is None:
            logger.warning("restyle() on unknown handle %r", handle)
            return
        cell[2] = category

    def clear(self) -> None:
        self.cells.clear()
        self.message = None

    def show_score(self, score: int, high_score: int) -> None:
        self.score = score
        self.high_score = high_score

    def notify(self, message: str) -> None:
        self.message = message

    # ---------- Pointer input ----------
    def button_at(self, pixel: Tuple[int, int]) -> Optional[str]:
        for key, rect in self.buttons.items():
            if rect.collidepoint(pixel):
                return key
        return None

    # ---------- Draw ----------
    def cell_rect(self, row: int, col: int) -> pygame.Rect:
        size = self.cfg.cell_size
        return pygame.Rect((col - 1) * size, HUD_HEIGHT + (row - 1) * size, size, size)

    def draw(self) -> None:
        if self.screen is None:
            return
        screen = self.screen
        screen.fill(BG)
        pygame.draw.rect(screen, BOARD, pygame.Rect(0, HUD_HEIGHT, self.cfg.board_px, self.cfg.board_px))

        # head last so it stays on top of a freshly absorbed marker
        for row, col, category in sorted(self.cells.values(), key=lambda c: DRAW_ORDER.get(c[2], 1)):
            if row is None or col is None:
                continue
            color = CATEGORY_COLORS.get(category, TEXT)
            pygame.draw.rect(screen, color, self.cell_rect(row, col))

        txt = self.font.render(f"Score: {self.score}   High score: {self.high_score}", True, TEXT)
        screen.blit(txt, (8, 8))

        for key, rect in self.buttons.items():
            pygame.draw.rect(screen, BUTTON, rect, border_radius=6)
            label = self.font.render(key[0].upper(), True, TEXT)
            screen.blit(label, label.get_rect(center=rect.center))

        if self.message:
            self._draw_overlay(self.message)

    def _draw_overlay(self, message: str) -> None:
        width, height = self.cfg.window_size
        # Dim with translucent overlay
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        self.screen.blit(overlay, (0, 0))

        title = self.font.render(message.upper(), True, (240, 240, 250))
        sub   = self.font.render("Press R to restart", True, TEXT)
        sco   = self.font.render(f"Score: {self.score}", True, TEXT)

        self.screen.blit(title, title.get_rect(center=(width // 2, height // 2 - 16)))
        self.screen.blit(sub, sub.get_rect(center=(width // 2, height // 2 + 16)))
        self.screen.blit(sco, sco.get_rect(center=(width // 2, height // 2 + 44)))
