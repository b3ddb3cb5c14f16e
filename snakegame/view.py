"""
view.py - View layer.

  - PygameCanvas: the Canvas draw primitives on top of a pygame.Surface
  - Board drawn by render.draw_board() onto its own surface, then blitted
  - HUD panel with current and best score
  - Pulsing title on the start / game-over overlays
  - Controls hint row on the start screen

Public API:
    GameView(screen)    - bind to a pygame surface
    view.render(model)  - draw the current frame
"""

import math
from typing import NamedTuple

import pygame

from .config import (
    WIDTH, PANEL_H, BOARD_W, BOARD_H, OFFSET_X, OFFSET_Y,
    WINDOW_BG, PANEL_BG, BORDER_COL, UI_COL, TEXT_COL, ACCENT_COL,
    HEAD_COL, FOOD_COL,
    STATE_MENU, STATE_PAUSED, STATE_OVER,
    OUTCOME_WALL, OUTCOME_SELF, OUTCOME_BOARD_FULL,
)
from .model import GameModel, GameSession
from .render import draw_board

OUTCOME_TEXT = {
    OUTCOME_WALL:       "YOU HIT THE WALL",
    OUTCOME_SELF:       "YOU BIT YOURSELF",
    OUTCOME_BOARD_FULL: "THE BOARD IS FULL",
}

CONTROL_HINTS = [("ARROWS/WASD", "MOVE"), ("P", "PAUSE"), ("R", "RESTART"), ("ESC", "QUIT")]


class GameOverText(NamedTuple):
    title: str
    color: tuple
    reason: str
    score: str
    best: str


def game_over_text(session: GameSession, best: int) -> GameOverText:
    """Wording for the game-over overlay. A full board is a win."""
    if session.outcome == OUTCOME_BOARD_FULL:
        title, color = "YOU WIN!", HEAD_COL
    else:
        title, color = "GAME OVER", FOOD_COL
    best_line = "*  NEW HIGH SCORE  *" if session.new_best else f"BEST: {best}"
    return GameOverText(title, color, OUTCOME_TEXT.get(session.outcome, ""),
                        f"YOUR SCORE: {session.score}", best_line)


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


def _load_font(size: int, bold: bool = False, name: str = "courier") -> pygame.font.Font:
    try:
        return pygame.font.SysFont(name, size, bold=bold)
    except Exception:
        return pygame.font.SysFont(None, size)


# ───────────────────────── PygameCanvas ──────────────────────────
class PygameCanvas:
    """Canvas primitives over a pygame surface. RGBA colours are blended."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self.width, self.height = surface.get_size()
        self._fonts: dict[int, pygame.font.Font] = {}

    def fill_rect(self, rect, color) -> None:
        if len(color) == 4:
            shade = pygame.Surface((rect[2], rect[3]), pygame.SRCALPHA)
            shade.fill(color)
            self.surface.blit(shade, (rect[0], rect[1]))
        else:
            self.surface.fill(color, rect)

    def round_rect(self, rect, color, radius: int) -> None:
        pygame.draw.rect(self.surface, color, rect, border_radius=radius)

    def circle(self, center, radius: int, color) -> None:
        pygame.draw.circle(self.surface, color, center, radius)

    def line(self, start, end, color) -> None:
        pygame.draw.line(self.surface, color, start, end)

    def text(self, text: str, center, color, size: int) -> None:
        if size not in self._fonts:
            self._fonts[size] = _load_font(size, bold=True)
        surf = self._fonts[size].render(text, True, color)
        self.surface.blit(surf, surf.get_rect(center=center))


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameModel snapshot."""

    # ── Construction ─────────────────────────────────────────────
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._board_surf = pygame.Surface((BOARD_W, BOARD_H))
        self.canvas = PygameCanvas(self._board_surf)

        # For overlay title pulse animation
        self._anim_tick: int = 0

    # ── Main entry ───────────────────────────────────────────────
    def render(self, model: GameModel) -> None:
        self._anim_tick += 1

        self.screen.fill(WINDOW_BG)
        draw_board(model.session, self.canvas)
        self.screen.blit(self._board_surf, (OFFSET_X, OFFSET_Y))

        self._draw_border()
        self._draw_panel(model)

        if model.state == STATE_MENU:
            self._draw_menu_overlay()
        elif model.state == STATE_OVER:
            self._draw_game_over_overlay(model)

        pygame.display.flip()

    # ── Border ───────────────────────────────────────────────────
    def _draw_border(self) -> None:
        pygame.draw.rect(self.screen, BORDER_COL,
                         (OFFSET_X - 1, OFFSET_Y - 1, BOARD_W + 2, BOARD_H + 2), 1)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, model: GameModel) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, WIDTH, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL,
                         (0, PANEL_H - 1), (WIDTH, PANEL_H - 1), 1)

        score = model.session.score if model.session is not None else 0

        # Current score (left)
        self.screen.blit(self.font_small.render("SCORE", True, UI_COL), (16, 6))
        self.screen.blit(self.font_big.render(str(score), True, HEAD_COL), (16, 22))

        # High score (right)
        best_label = self.font_small.render("BEST", True, UI_COL)
        best = self.font_big.render(str(model.high_score.best), True, ACCENT_COL)
        self.screen.blit(best_label, best_label.get_rect(topright=(WIDTH - 16, 6)))
        self.screen.blit(best, best.get_rect(topright=(WIDTH - 16, 22)))

        title = self.font_med.render("SNAKE", True, TEXT_COL)
        self.screen.blit(title, title.get_rect(center=(WIDTH // 2, 20)))

        if model.state == STATE_PAUSED:
            badge = self.font_tiny.render("[ PAUSED ]", True, ACCENT_COL)
            self.screen.blit(badge, badge.get_rect(center=(WIDTH // 2, PANEL_H - 14)))

    # ── Overlay infrastructure ────────────────────────────────────
    def _draw_overlay_base(self) -> None:
        surf = pygame.Surface((BOARD_W, BOARD_H), pygame.SRCALPHA)
        surf.fill((5, 5, 12, 215))
        self.screen.blit(surf, (OFFSET_X, OFFSET_Y))
        pygame.draw.rect(self.screen, _lerp_color(WINDOW_BG, UI_COL, 0.12),
                         (OFFSET_X + 8, OFFSET_Y + 8, BOARD_W - 16, BOARD_H - 16), 1)

    def _draw_animated_title(self, title: str, color: tuple,
                             cy: int, font: pygame.font.Font) -> int:
        pulse = 0.82 + 0.18 * math.sin(self._anim_tick * 0.05)
        surf = font.render(title, True, _brighten(color, pulse))
        gw, gh = surf.get_width() + 50, surf.get_height() + 16
        glow = pygame.Surface((gw, gh), pygame.SRCALPHA)
        glow.fill(_with_alpha(color, int(35 * pulse)))
        self.screen.blit(glow, (WIDTH // 2 - gw // 2, cy - 8))
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy + surf.get_height() // 2)))
        return cy + surf.get_height() + 14

    def _draw_text_line(self, text: str, color: tuple,
                        cy: int, font: pygame.font.Font) -> int:
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy)))
        return cy + surf.get_height() + 8

    def _draw_button(self, label: str, color: tuple, cy: int) -> int:
        btn_w = max(240, self.font_small.size(label)[0] + 40)
        btn_h = 38
        bx = WIDTH // 2 - btn_w // 2
        bg = pygame.Surface((btn_w, btn_h), pygame.SRCALPHA)
        bg.fill(_with_alpha(color, 22))
        self.screen.blit(bg, (bx, cy))
        pygame.draw.rect(self.screen, color, (bx, cy, btn_w, btn_h), 2, border_radius=4)
        txt = self.font_small.render(label, True, color)
        self.screen.blit(txt, txt.get_rect(center=(WIDTH // 2, cy + btn_h // 2)))
        return cy + btn_h + 10

    def _draw_controls_hint(self, cy: int) -> None:
        slot = 100
        sx = WIDTH // 2 - len(CONTROL_HINTS) * slot // 2
        for i, (key, action) in enumerate(CONTROL_HINTS):
            x = sx + i * slot + slot // 2
            k_surf = self.font_tiny.render(key,    True, (200, 200, 255))
            a_surf = self.font_tiny.render(action, True, UI_COL)
            kw = k_surf.get_width() + 12
            kh = k_surf.get_height() + 4
            pygame.draw.rect(self.screen, (28, 28, 48),
                             (x - kw // 2, cy, kw, kh), border_radius=3)
            pygame.draw.rect(self.screen, (55, 55, 88),
                             (x - kw // 2, cy, kw, kh), 1, border_radius=3)
            self.screen.blit(k_surf, k_surf.get_rect(center=(x, cy + kh // 2)))
            self.screen.blit(a_surf, a_surf.get_rect(center=(x, cy + kh + 10)))

    # ── State overlays ────────────────────────────────────────────
    def _draw_menu_overlay(self) -> None:
        self._draw_overlay_base()
        cy = OFFSET_Y + 60
        cy = self._draw_animated_title("SNAKE", HEAD_COL, cy, self.font_title)
        cy += 4
        cy = self._draw_text_line("EAT, GROW, DON'T CRASH", UI_COL, cy, self.font_med)
        cy += 30
        cy = self._draw_button("ENTER - START GAME", HEAD_COL, cy)
        cy += 20
        self._draw_controls_hint(cy)

    def _draw_game_over_overlay(self, model: GameModel) -> None:
        self._draw_overlay_base()
        text = game_over_text(model.session, model.high_score.best)
        color = text.color

        cy = OFFSET_Y + 50
        cy = self._draw_animated_title(text.title, color, cy, self.font_title)
        cy += 2
        cy = self._draw_text_line(text.reason, _lerp_color(UI_COL, color, 0.5), cy, self.font_med)
        cy += 16
        cy = self._draw_text_line(text.score, TEXT_COL, cy, self.font_big)
        cy += 4
        best_color = ACCENT_COL if model.session.new_best else UI_COL
        cy = self._draw_text_line(text.best, best_color, cy, self.font_small)
        cy += 20
        self._draw_button("ENTER - PLAY AGAIN", color, cy)

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", 42, True),
            ("font_big",   26, True),
            ("font_med",   17, False),
            ("font_small", 13, True),
            ("font_tiny",  11, False),
        ]
        for attr, size, bold in specs:
            setattr(self, attr, _load_font(size, bold=bold))
