"""
render.py - Board renderer.

draw_board() paints one GameSession onto anything that implements the
Canvas protocol. It reads the session and never changes it, so the same
frame can be drawn onto a pygame surface or a recording canvas in tests.

Layer order: background, grid, snake, food, pause shade.
"""

from typing import Optional, Protocol

from .config import (
    CELL, COLS, ROWS,
    BG, GRID_COL, HEAD_COL, BODY_COL, FOOD_COL, PAUSE_SHADE, TEXT_COL,
)
from .model import GameSession

Color = tuple  # (r, g, b) or (r, g, b, a)
Rect = tuple[int, int, int, int]


class Canvas(Protocol):
    """The draw primitives the renderer needs, in pixel coordinates."""

    width: int
    height: int

    def fill_rect(self, rect: Rect, color: Color) -> None: ...
    def round_rect(self, rect: Rect, color: Color, radius: int) -> None: ...
    def circle(self, center: tuple[int, int], radius: int, color: Color) -> None: ...
    def line(self, start: tuple[int, int], end: tuple[int, int], color: Color) -> None: ...
    def text(self, text: str, center: tuple[int, int], color: Color, size: int) -> None: ...


def cell_rect(cell: tuple[int, int], padding: int = 0) -> Rect:
    x, y = cell
    return (x * CELL + padding, y * CELL + padding,
            CELL - padding * 2, CELL - padding * 2)


def cell_center(cell: tuple[int, int]) -> tuple[int, int]:
    x, y = cell
    return (x * CELL + CELL // 2, y * CELL + CELL // 2)


def draw_board(session: Optional[GameSession], canvas: Canvas) -> None:
    """Draw the board across the whole canvas. With no session only the
    empty grid is drawn.
    """
    cols = session.cols if session is not None else COLS
    rows = session.rows if session is not None else ROWS
    width, height = canvas.width, canvas.height

    canvas.fill_rect((0, 0, width, height), BG)
    _draw_grid(canvas, cols, rows, cols * CELL, rows * CELL)

    if session is None:
        return

    _draw_snake(canvas, session)
    if session.food is not None:
        canvas.circle(cell_center(session.food), CELL // 2 - 3, FOOD_COL)

    if session.paused:
        canvas.fill_rect((0, 0, width, height), PAUSE_SHADE)
        canvas.text("PAUSED", (width // 2, height // 2), TEXT_COL, 28)


def _draw_grid(canvas: Canvas, cols: int, rows: int, width: int, height: int) -> None:
    for c in range(cols):
        canvas.line((c * CELL, 0), (c * CELL, height), GRID_COL)
    for r in range(rows):
        canvas.line((0, r * CELL), (width, r * CELL), GRID_COL)


def _draw_snake(canvas: Canvas, session: GameSession) -> None:
    # Head is bigger, rounder and darker than the body segments
    for i, seg in enumerate(session.snake.body):
        if i == 0:
            canvas.round_rect(cell_rect(seg, 1), HEAD_COL, 4)
        else:
            canvas.round_rect(cell_rect(seg, 2), BODY_COL, 3)

