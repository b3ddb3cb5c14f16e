"""
model.py - Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    Direction   - immutable (dx, dy) value object
    Snake       - body and heading, head-first
    HighScore   - best score, shared by every session of one run
    GameSession - one game: snake, food, score, phase
    GameModel   - top-level model; owns the high score and current session
"""

import random
from collections import deque
from typing import Optional

from .config import (
    COLS, ROWS, START_LENGTH, SPAWN_ATTEMPTS,
    BASE_INTERVAL, MIN_INTERVAL, SPEED_STEP,
    STATE_MENU, STATE_RUNNING, STATE_PAUSED, STATE_OVER,
    TICK_MOVED, TICK_ATE, TICK_PAUSED,
    OUTCOME_WALL, OUTCOME_SELF, OUTCOME_BOARD_FULL,
)


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def is_opposite(self, other: "Direction") -> bool:
        return self.x + other.x == 0 and self.y + other.y == 0

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    Body cells (index 0 is the head) plus the committed and queued heading.
    No rendering. No input handling.
    """

    def __init__(self, cells, direction: Direction):
        self.body: deque[tuple[int, int]] = deque(cells)
        if not self.body:
            raise ValueError("a snake needs at least one cell")
        self.dir: Direction = direction
        self._next_dir: Direction = direction

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> tuple[int, int]:
        return self.body[0]

    @property
    def tail(self) -> tuple[int, int]:
        return self.body[-1]

    @property
    def next_dir(self) -> Direction:
        return self._next_dir

    def __len__(self) -> int:
        return len(self.body)

    # ── Commands ─────────────────────────────────────────────────
    def request_direction(self, new_dir: Direction) -> bool:
        """Queue a direction change (ignored if it would reverse the snake)."""
        if new_dir.is_opposite(self.dir):
            return False
        self._next_dir = new_dir
        return True

    def commit_direction(self) -> Direction:
        self.dir = self._next_dir
        return self.dir

    # ── Queries ──────────────────────────────────────────────────
    def occupies(self, cell: tuple[int, int]) -> bool:
        return cell in self.body

    def blocks(self, cell: tuple[int, int]) -> bool:
        """True if moving the head into cell would hit the body.

        The tail is left out: it vacates its cell on the same tick.
        """
        return cell != self.tail and cell in self.body


# ─────────────────────────── HighScore ───────────────────────────
class HighScore:
    """Best score of the running process. Never written to disk."""

    def __init__(self, best: int = 0):
        self.best = best

    def submit(self, score: int) -> bool:
        if score > self.best:
            self.best = score
            return True
        return False


def initial_body(cols: int, rows: int, length: int = START_LENGTH) -> list[tuple[int, int]]:
    """Horizontal segment centred on the board, head on the right."""
    if length < 1 or length > cols or rows < 1:
        raise ValueError(f"a {length}-cell snake does not fit a {cols}x{rows} grid")
    tail_x = (cols - length) // 2
    head_x = tail_x + length - 1
    head_y = rows // 2
    return [(head_x - i, head_y) for i in range(length)]


def interval_for(score: int) -> int:
    """Milliseconds until the next tick at the given score."""
    return max(MIN_INTERVAL, BASE_INTERVAL - score * SPEED_STEP)


# ────────────────────────── GameSession ──────────────────────────
class GameSession:
    """
    One game, from start to game over.
    The controller calls tick() each time the scheduler fires.
    """

    def __init__(
        self,
        cols: int = COLS,
        rows: int = ROWS,
        high_score: Optional[HighScore] = None,
        rng: Optional[random.Random] = None,
    ):
        self.cols = cols
        self.rows = rows
        self.high_score = high_score if high_score is not None else HighScore()
        self._rng = rng if rng is not None else random.Random()

        self.snake = Snake(initial_body(cols, rows), Direction.RIGHT)
        self.score: int = 0
        self.state: str = STATE_RUNNING
        self.outcome: Optional[str] = None
        self.new_best: bool = False
        self.food: Optional[tuple[int, int]] = self.spawn_food()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def paused(self) -> bool:
        return self.state == STATE_PAUSED

    @property
    def over(self) -> bool:
        return self.state == STATE_OVER

    def in_bounds(self, cell: tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.cols and 0 <= y < self.rows

    def current_interval(self) -> int:
        return interval_for(self.score)

    # ── Commands ─────────────────────────────────────────────────
    def request_direction(self, new_dir: Direction) -> bool:
        if self.over:
            return False
        return self.snake.request_direction(new_dir)

    def toggle_pause(self) -> bool:
        """Flip running <-> paused. Returns the new paused flag."""
        if self.state == STATE_RUNNING:
            self.state = STATE_PAUSED
        elif self.state == STATE_PAUSED:
            self.state = STATE_RUNNING
        return self.paused

    def spawn_food(self) -> Optional[tuple[int, int]]:
        """Random free cell, or None when the snake covers the whole board."""
        if len(self.snake) >= self.cols * self.rows:
            return None
        for _ in range(SPAWN_ATTEMPTS):
            pos = (self._rng.randrange(self.cols), self._rng.randrange(self.rows))
            if not self.snake.occupies(pos):
                return pos
        occupied = set(self.snake.body)
        free = [(x, y) for y in range(self.rows) for x in range(self.cols)
                if (x, y) not in occupied]
        return self._rng.choice(free)

    def tick(self) -> str:
        """
        Advance one cell.
        Returns TICK_MOVED, TICK_ATE or TICK_PAUSED, or the terminal outcome
        once the session is over.
        """
        if self.state == STATE_OVER:
            return self.outcome
        if self.state == STATE_PAUSED:
            return TICK_PAUSED

        direction = self.snake.commit_direction()
        hx, hy = self.snake.head
        new_head = (hx + direction.x, hy + direction.y)

        if not self.in_bounds(new_head):
            return self._finish(OUTCOME_WALL)
        if self.snake.blocks(new_head):
            return self._finish(OUTCOME_SELF)

        self.snake.body.appendleft(new_head)
        if new_head != self.food:
            self.snake.body.pop()
            return TICK_MOVED

        self.score += 1
        if self.high_score.submit(self.score):
            self.new_best = True
        self.food = self.spawn_food()
        if self.food is None:
            return self._finish(OUTCOME_BOARD_FULL)
        return TICK_ATE

    # ── Private helpers ──────────────────────────────────────────
    def _finish(self, outcome: str) -> str:
        self.state = STATE_OVER
        self.outcome = outcome
        return outcome


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns the high score and the current session.
    A fresh GameSession replaces the old one on every start.
    """

    def __init__(self, cols: int = COLS, rows: int = ROWS, rng: Optional[random.Random] = None):
        self.cols = cols
        self.rows = rows
        self.rng = rng if rng is not None else random.Random()
        self.high_score = HighScore()
        self.session: Optional[GameSession] = None

    # ── Public API ───────────────────────────────────────────────
    @property
    def state(self) -> str:
        if self.session is None:
            return STATE_MENU
        return self.session.state

    def start(self) -> GameSession:
        self.session = GameSession(self.cols, self.rows, self.high_score, self.rng)
        return self.session

    def request_direction(self, new_dir: Direction) -> bool:
        if self.session is None:
            return False
        return self.session.request_direction(new_dir)

    def toggle_pause(self) -> bool:
        if self.session is None or self.session.over:
            return False
        return self.session.toggle_pause()
