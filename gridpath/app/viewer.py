# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Grid Pathfinding Visualizer

- Mouse:
    left click on grid  -> toggle wall (start/goal cannot be walled)
    DIJKSTRA / A*       -> run search, then replay its trace
- Keyboard:
    [D]/[A]      -> run Dijkstra / A*
    [C]          -> clear replay
    [R]          -> remove all walls
    [Q]/[ESC]    -> quit

Settings come from gridpath.config (env GRIDPATH_* or --key=value flags).
"""

import logging
import sys
from typing import Callable, Dict, List, Optional, Tuple

import pygame

from gridpath.app.replay import ANCHOR, EMPTY, TracePlayer, WALL
from gridpath.config import MARGIN, PANEL_WIDTH, Settings, resolve_settings
from gridpath.core.engine import ASTAR, DIJKSTRA, search
from gridpath.core.types import Cell, FRONTIER, Grid, GridPathError, PATH, VISITED

logger = logging.getLogger(__name__)

FONT_NAME = None  # default pygame font
PANEL_SPACING = 10
BUTTON_PADDING = 20

# Colors
BLACK       = (  0,   0,   0)
WHITE       = (255, 255, 255)
RED         = (255,   0,   0)
BLUE        = (  0,   0, 255)
CYAN        = (  0, 255, 255)
GREY        = (100, 100, 100)
GREEN       = (  0, 255,   0)
MAGENTA     = (255,   0, 255)
ORANGE      = (255, 200,   0)

STATE_COLORS: Dict[str, Tuple[int, int, int]] = {
    WALL: WHITE,
    EMPTY: ORANGE,
    ANCHOR: BLUE,
    FRONTIER: CYAN,
    VISITED: GREY,
}
PATH_COLORS = {DIJKSTRA: GREEN, ASTAR: MAGENTA}
LABELS = {DIJKSTRA: "Dijkstra", ASTAR: "A*"}


def cell_at(pos: Tuple[int, int], origin: Tuple[int, int], cell_size: int, n: int) -> Optional[Cell]:
    """Map a pixel position to a grid cell, or None outside the grid."""
    px, py = pos
    ox, oy = origin
    if px < ox or py < oy:
        return None
    col = (px - ox) // cell_size
    row = (py - oy) // cell_size
    if col >= n or row >= n:
        return None
    return (col, row)


def color_for(state: str, strategy: Optional[str]) -> Tuple[int, int, int]:
    if state == PATH:
        return PATH_COLORS.get(strategy, GREEN)
    return STATE_COLORS[state]


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, color, callback: Callable[[], None]):
        self.label = label
        self.rect = rect
        self.color = color
        self.callback = callback

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        pygame.draw.rect(screen, self.color, self.rect)
        text = font.render(self.label, True, WHITE)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, settings: Settings):
        pygame.init()

        self.settings = settings
        n = settings.grid_size
        self.grid = Grid.empty(n)
        self.start: Cell = (0, 0)
        self.goal: Cell = (n - 1, n - 1)
        self.cell_size = settings.cell_size
        self._grid_origin = (0, 0)

        self.font = pygame.font.Font(FONT_NAME, 20)
        self.font_msg = pygame.font.Font(FONT_NAME, 24)

        grid_px = n * self.cell_size
        win_w = grid_px + PANEL_WIDTH
        win_h = grid_px + 2 * MARGIN
        self.screen = pygame.display.set_mode((win_w, win_h))
        pygame.display.set_caption("Grid Pathfinding Visualizer")

        self._buttons: List[UIButton] = []
        self._build_buttons(grid_px + MARGIN, MARGIN)

        self.player = TracePlayer(self.grid, self.start, self.goal)
        self.strategy: Optional[str] = None
        self.message = ""
        self.animating = False
        self.clock = pygame.time.Clock()
        self._last_step_ms = 0

    def _build_buttons(self, x: int, y: int):
        w = self.font.size("DIJKSTRA")[0] + BUTTON_PADDING
        h = self.font.get_height() + BUTTON_PADDING
        self._buttons = [
            UIButton("DIJKSTRA", pygame.Rect(x, y, w, h), GREEN, lambda: self._run_search(DIJKSTRA)),
            UIButton("A*", pygame.Rect(x, y + h + PANEL_SPACING, w, h), MAGENTA,
                     lambda: self._run_search(ASTAR)),
        ]

    def run(self):
        while True:
            self._handle_events()
            self._tick_animation()
            self._draw()
            self.clock.tick(60)

    # ---------- actions ----------
    def _run_search(self, strategy: str):
        self.strategy = strategy
        self.message = ""
        try:
            result = search(self.grid, self.start, self.goal, strategy, self.settings.tolerance)
        except GridPathError as ex:
            logger.error("%s search failed: %s", LABELS[strategy], ex)
            self.message = f"{LABELS[strategy]}: {ex}"
            self.player.reset()
            self.animating = False
            return
        logger.info("%s: %s, %d trace events", LABELS[strategy], result.status, len(result.trace))
        if not result.found:
            self.message = f"{LABELS[strategy]}: No Path Found!"
        self.player.load(result.trace)
        self.animating = True
        self._last_step_ms = pygame.time.get_ticks()

    def _toggle_wall(self, c: Cell):
        if c == self.start or c == self.goal:
            return
        blocked = self.grid.toggle(c)
        logger.debug("wall %s -> %s", c, blocked)
        self._clear_replay()

    def _clear_replay(self):
        self.animating = False
        self.message = ""
        self.player.reset()

    def _clear_walls(self):
        self.grid.clear()
        self._clear_replay()

    def _tick_animation(self):
        if not self.animating:
            return
        now = pygame.time.get_ticks()
        if now - self._last_step_ms < self.settings.delay_ms:
            return
        self._last_step_ms = now
        if self.settings.delay_ms == 0:
            self.player.advance(self.player.total)
        else:
            self.player.advance()
        if self.player.finished:
            self.animating = False

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_d:
                    self._run_search(DIJKSTRA)
                elif e.key == pygame.K_a:
                    self._run_search(ASTAR)
                elif e.key == pygame.K_c:
                    self._clear_replay()
                elif e.key == pygame.K_r:
                    self._clear_walls()
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                c = cell_at(e.pos, self._grid_origin, self.cell_size, self.grid.size)
                if c is not None:
                    self._toggle_wall(c)
                    continue
                for b in self._buttons:
                    if b.handle_mouse(e):
                        break

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BLACK)
        self._draw_grid()
        for b in self._buttons:
            b.draw(self.screen, self.font)
        if self.message:
            surf = self.font_msg.render(self.message, True, RED)
            x = self.grid.size * self.cell_size + MARGIN
            y = self.screen.get_height() - 50
            self.screen.blit(surf, (x, y))
        pygame.display.flip()

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin
        for row in range(self.grid.size):
            for col in range(self.grid.size):
                rect = pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)
                state = self.player.state_at((col, row)) or EMPTY
                pygame.draw.rect(self.screen, color_for(state, self.strategy), rect)
                pygame.draw.rect(self.screen, RED, rect, 1)


# ---------- main ----------
def main():
    try:
        settings = resolve_settings()
    except ValueError as ex:
        logging.basicConfig(level=logging.INFO)
        logger.error("Bad settings: %s", ex)
        sys.exit(2)

    logging.basicConfig(
        level=settings.numeric_log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Starting viewer: %dx%d grid, %d ms per event",
                settings.grid_size, settings.grid_size, settings.delay_ms)
    Viewer(settings).run()


if __name__ == "__main__":
    main()
